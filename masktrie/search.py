"""Mode-dispatched queries over a Trie.

``SearchType`` picks the algorithm; ``search``, ``search_values`` and
``search_all`` pick the shape of the result (keys, values or a key->value
dict). Unknown modes give an empty result instead of an error.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Any

from masktrie.node import check_key, find_node, iter_terminals

if TYPE_CHECKING:
    from masktrie.node import TrieNode


class SearchType(IntEnum):
    EXACT = 0
    PREFIX = 1
    LONGEST_PREFIX = 2
    MATCHING_PREFIX = 3
    FUZZY = 4
    # PREFIX + MATCHING_PREFIX + FUZZY
    RELATIVE = 5


MODE_NAMES: dict[str, SearchType] = {
    "exact": SearchType.EXACT,
    "prefix": SearchType.PREFIX,
    "longest": SearchType.LONGEST_PREFIX,
    "matching": SearchType.MATCHING_PREFIX,
    "fuzzy": SearchType.FUZZY,
    "relative": SearchType.RELATIVE,
}


def _coerce_mode(mode) -> SearchType | None:
    if isinstance(mode, SearchType):
        return mode
    if isinstance(mode, bool):
        return None
    try:
        return SearchType(mode)
    except (ValueError, TypeError):
        return None


class SearchMixin:
    """Composite queries; mixed into ``Trie``, relies on its lock and walkers."""

    def search(self, key: str, mode) -> list[str]:
        keys = [k for k, _ in self._dispatch(key, mode)]
        if _coerce_mode(mode) is SearchType.FUZZY:
            keys.sort(key=len)
        return keys

    def search_values(self, key: str, mode) -> list[Any]:
        return [v for _, v in self._dispatch(key, mode)]

    def search_all(self, key: str, mode) -> dict[str, Any]:
        return dict(self._dispatch(key, mode))

    def prefix_and_ancestors(self, key: str) -> dict[str, Any]:
        """Keys under *key* plus every stored key that is a prefix of *key*."""
        check_key(key)
        with self._lock.read_locked():
            found = self._prefix_and_ancestor_terminals(key)
            return {path: n.value for path, n in found.items()}

    def relative(self, key: str) -> list[str]:
        """Keys under *key*, stored prefixes of *key*, and fuzzy matches of *key*."""
        return self.search(key, SearchType.RELATIVE)

    def relative_values(self, key: str) -> list[Any]:
        return self.search_values(key, SearchType.RELATIVE)

    def relative_items(self, key: str) -> dict[str, Any]:
        return self.search_all(key, SearchType.RELATIVE)

    def _dispatch(self, key: str, mode) -> list[tuple[str, Any]]:
        """(key, value) pairs for *mode*, copied out while the lock is held."""
        check_key(key)
        stype = _coerce_mode(mode)
        if stype is None:
            return []

        with self._lock.read_locked():
            return [(n.path, n.value) for n in self._select(key, stype)]

    def _select(self, key: str, stype: SearchType) -> list[TrieNode]:
        if stype is SearchType.EXACT:
            node = self._terminal(key)
            return [node] if node is not None else []
        if stype is SearchType.PREFIX:
            node = find_node(self.root, key)
            return list(iter_terminals(node)) if node is not None else []
        if stype is SearchType.LONGEST_PREFIX:
            return self._prefix_terminals(key)[-1:]
        if stype is SearchType.MATCHING_PREFIX:
            return self._prefix_terminals(key)
        if stype is SearchType.FUZZY:
            return self._fuzzy_terminals(key)
        return self._relative_terminals(key)

    def _prefix_and_ancestor_terminals(self, key: str) -> dict[str, TrieNode]:
        found: dict[str, TrieNode] = {}
        node = find_node(self.root, key)
        if node is not None:
            for n in iter_terminals(node):
                found[n.path] = n
        for n in self._prefix_terminals(key):
            found.setdefault(n.path, n)
        return found

    def _relative_terminals(self, key: str) -> list[TrieNode]:
        found = self._prefix_and_ancestor_terminals(key)
        for n in self._fuzzy_terminals(key):
            found.setdefault(n.path, n)
        return list(found.values())
