"""Trie node and the mask / collection helpers that operate on subtrees."""

from __future__ import annotations

from typing import Any

from masktrie.constants import MASK_BASE, MASK_WIDTH, ROOT_CHAR, TERMINAL_CHAR

_BASE = ord(MASK_BASE)


def check_key(key) -> None:
    """Reject anything that cannot be stored as a key."""
    if not isinstance(key, str):
        raise TypeError(f"trie keys must be str, not {type(key).__name__}")
    if TERMINAL_CHAR in key:
        raise ValueError("trie keys must not contain NUL characters")


def char_bit(ch: str) -> int:
    """Mask bit for a single character, or 0 outside the maskable range."""
    if not ch:
        return 0
    offset = ord(ch) - _BASE
    if 0 <= offset < MASK_WIDTH:
        return 1 << offset
    return 0


def suffix_masks(s: str) -> list[int]:
    """masks[i] is the mask of s[i:], computed in one pass from the end."""
    masks = [0] * len(s)
    m = 0
    for i in range(len(s) - 1, -1, -1):
        m |= char_bit(s[i])
        masks[i] = m
    return masks


class TrieNode:
    """Single node in the trie.

    Interior nodes stand for one character position. A stored key ends in a
    synthetic child keyed by ``TERMINAL_CHAR`` that carries the key and its
    value.
    """

    __slots__ = (
        "character", "path", "is_terminal", "depth", "value",
        "mask", "terminal_count", "parent", "children",
    )

    def __init__(
        self,
        character: str = ROOT_CHAR,
        parent: TrieNode | None = None,
        mask: int = 0,
        path: str = "",
        value: Any = None,
        is_terminal: bool = False,
    ):
        self.character = character
        self.path = path
        self.is_terminal = is_terminal
        self.depth = parent.depth + 1 if parent is not None else 0
        self.value = value
        self.mask = mask
        self.terminal_count = 1 if is_terminal else 0
        self.parent = parent  # navigational only; the parent owns us
        self.children: dict[str, TrieNode] = {}

    def add_child(
        self,
        character: str,
        mask: int = 0,
        path: str = "",
        value: Any = None,
        is_terminal: bool = False,
    ) -> TrieNode:
        child = TrieNode(character, self, mask, path, value, is_terminal)
        self.children[character] = child
        self.mask |= mask
        return child

    def detach(self) -> None:
        """Cut this node out of its parent and drop every reference it holds."""
        if self.parent is not None:
            self.parent.children.pop(self.character, None)
        self.parent = None
        self.children = {}
        self.value = None

    @property
    def terminal(self) -> TrieNode | None:
        """The terminal child marking a key that ends here, if any."""
        node = self.children.get(TERMINAL_CHAR)
        if node is not None and node.is_terminal:
            return node
        return None

    def recompute_mask(self) -> None:
        m = char_bit(self.character)
        for child in self.children.values():
            m |= child.mask
        self.mask = m

    def __repr__(self) -> str:
        if self.is_terminal:
            return f"TrieNode(path={self.path!r}, depth={self.depth})"
        return (
            f"TrieNode(character={self.character!r}, depth={self.depth}, "
            f"terminals={self.terminal_count})"
        )


def find_node(node: TrieNode, key: str) -> TrieNode | None:
    """Walk *key* down from *node*; None if it falls off the tree."""
    for ch in key:
        node = node.children.get(ch)
        if node is None:
            return None
    return node


def iter_terminals(node: TrieNode):
    """Yield every terminal node under *node* (depth-first, explicit stack)."""
    stack = [node]
    while stack:
        n = stack.pop()
        stack.extend(n.children.values())
        if n.is_terminal:
            yield n


def collect_keys(node: TrieNode) -> list[str]:
    return [n.path for n in iter_terminals(node)]


def collect_values(node: TrieNode) -> list[Any]:
    return [n.value for n in iter_terminals(node)]


def collect_items(node: TrieNode) -> dict[str, Any]:
    return {n.path: n.value for n in iter_terminals(node)}
