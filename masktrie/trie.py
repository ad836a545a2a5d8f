"""Trie with per-node reachability masks for prefix, longest-match and fuzzy search."""

from __future__ import annotations

import logging
from typing import Any

from masktrie.constants import TERMINAL_CHAR
from masktrie.locks import RWLock
from masktrie.node import (
    TrieNode,
    check_key,
    collect_items,
    collect_keys,
    collect_values,
    find_node,
    iter_terminals,
    suffix_masks,
)
from masktrie.search import SearchMixin

log = logging.getLogger("masktrie")


class Trie(SearchMixin):
    """Associative string index.

    Every public method takes the container lock: mutations exclusively,
    queries in shared mode. Results are fresh lists/dicts, never nodes.
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0
        self._lock = RWLock()

    # size

    @property
    def size(self) -> int:
        with self._lock.read_locked():
            return self._size

    def __len__(self) -> int:
        return self.size

    def __contains__(self, key) -> bool:
        if not isinstance(key, str) or TERMINAL_CHAR in key:
            return False
        with self._lock.read_locked():
            return self._terminal(key) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size})"

    # mutation

    def insert(self, key: str, value: Any = None) -> None:
        """Store *value* under *key*, overwriting any previous value."""
        check_key(key)
        with self._lock.write_locked():
            existing = self._terminal(key)
            if existing is not None:
                existing.value = value
                return

            masks = suffix_masks(key)
            node = self.root
            node.terminal_count += 1
            for ch, suffix_mask in zip(key, masks):
                node.mask |= suffix_mask
                child = node.children.get(ch)
                if child is None:
                    child = node.add_child(ch, suffix_mask)
                else:
                    child.mask |= suffix_mask
                node = child
                node.terminal_count += 1
            node.add_child(TERMINAL_CHAR, path=key, value=value, is_terminal=True)
            self._size += 1

    def remove(self, key: str, default: Any = None) -> Any:
        """Delete *key* and return its value, or *default* if it was absent."""
        check_key(key)
        with self._lock.write_locked():
            target = self._terminal(key)
            if target is None:
                return default

            value = target.value
            node = target.parent
            target.detach()
            self._size -= 1

            pruned = 0
            while node.parent is not None:
                node.terminal_count -= 1
                parent = node.parent
                if not node.children and not node.is_terminal:
                    node.detach()
                    pruned += 1
                node = parent
            node.terminal_count -= 1

            # Masks can only shrink; rebuild them on the surviving chain.
            survivor = find_node(self.root, key[:len(key) - pruned])
            while survivor is not None:
                survivor.recompute_mask()
                survivor = survivor.parent

            if pruned:
                log.debug("removed %r, pruned %d dangling node(s)", key, pruned)
            return value

    def clear(self) -> None:
        """Drop every key; the root is kept and reset."""
        with self._lock.write_locked():
            stack = list(self.root.children.values())
            while stack:
                node = stack.pop()
                stack.extend(node.children.values())
                node.detach()
            root = self.root
            root.children = {}
            root.path = ""
            root.is_terminal = False
            root.depth = 0
            root.value = None
            root.mask = 0
            root.parent = None
            root.terminal_count = 0
            log.debug("cleared trie of %d key(s)", self._size)
            self._size = 0

    # exact / prefix

    def find(self, key: str, default: Any = None) -> Any:
        """Value stored under *key*, or *default*."""
        check_key(key)
        with self._lock.read_locked():
            node = self._terminal(key)
            return default if node is None else node.value

    def has_prefix(self, prefix: str) -> bool:
        """True if some stored key starts with *prefix*."""
        check_key(prefix)
        with self._lock.read_locked():
            return find_node(self.root, prefix) is not None

    def keys(self, prefix: str = "") -> list[str]:
        check_key(prefix)
        with self._lock.read_locked():
            node = find_node(self.root, prefix)
            return collect_keys(node) if node is not None else []

    def values(self, prefix: str = "") -> list[Any]:
        check_key(prefix)
        with self._lock.read_locked():
            node = find_node(self.root, prefix)
            return collect_values(node) if node is not None else []

    def items(self, prefix: str = "") -> dict[str, Any]:
        check_key(prefix)
        with self._lock.read_locked():
            node = find_node(self.root, prefix)
            return collect_items(node) if node is not None else {}

    keys_with_prefix = keys
    values_with_prefix = values
    all_with_prefix = items

    # longest / matching prefix

    def longest_prefix_match(self, key: str) -> tuple[str, Any] | None:
        """The longest stored key that is a literal prefix of *key*.

        >>> t = Trie(); t.insert("foo", 1); t.insert("foretold", 2)
        >>> t.longest_prefix_match("fooo")
        ('foo', 1)
        """
        check_key(key)
        with self._lock.read_locked():
            nodes = self._prefix_terminals(key)
            if not nodes:
                return None
            return nodes[-1].path, nodes[-1].value

    def matching_prefixes(self, key: str) -> list[tuple[str, Any]]:
        """Every stored key that is a literal prefix of *key*, shortest first."""
        check_key(key)
        with self._lock.read_locked():
            return [(n.path, n.value) for n in self._prefix_terminals(key)]

    def matching_prefix_keys(self, key: str) -> list[str]:
        check_key(key)
        with self._lock.read_locked():
            return [n.path for n in self._prefix_terminals(key)]

    def matching_prefix_items(self, key: str) -> dict[str, Any]:
        check_key(key)
        with self._lock.read_locked():
            return {n.path: n.value for n in self._prefix_terminals(key)}

    # fuzzy

    def fuzzy_search(self, partial: str) -> list[str]:
        """Keys containing *partial* as an ordered subsequence, shortest first.

        >>> t = Trie()
        >>> for k in ("bfrza", "frosty", "foo/bart/baz.go"): t.insert(k)
        >>> t.fuzzy_search("fz")
        ['bfrza', 'foo/bart/baz.go']
        """
        check_key(partial)
        with self._lock.read_locked():
            keys = [n.path for n in self._fuzzy_terminals(partial)]
        keys.sort(key=len)
        return keys

    def fuzzy_search_values(self, partial: str) -> list[Any]:
        check_key(partial)
        with self._lock.read_locked():
            return [n.value for n in self._fuzzy_terminals(partial)]

    def fuzzy_search_items(self, partial: str) -> dict[str, Any]:
        check_key(partial)
        with self._lock.read_locked():
            return {n.path: n.value for n in self._fuzzy_terminals(partial)}

    # internals, called with the lock held

    def _terminal(self, key: str) -> TrieNode | None:
        node = find_node(self.root, key)
        return node.terminal if node is not None else None

    def _prefix_terminals(self, key: str) -> list[TrieNode]:
        found: list[TrieNode] = []
        node = self.root
        for ch in key:
            node = node.children.get(ch)
            if node is None:
                break
            term = node.terminal
            if term is not None:
                found.append(term)
        return found

    def _fuzzy_terminals(self, partial: str) -> list[TrieNode]:
        if not partial:
            return list(iter_terminals(self.root))

        found: list[TrieNode] = []
        end = len(partial)
        remaining = suffix_masks(partial)
        stack = [(self.root, 0)]
        while stack:
            node, idx = stack.pop()
            need = remaining[idx]
            if node.mask & need != need:
                continue

            if node.character == partial[idx]:
                idx += 1
                if idx == end:
                    found.extend(iter_terminals(node))
                    continue

            for child in node.children.values():
                stack.append((child, idx))
        return found
