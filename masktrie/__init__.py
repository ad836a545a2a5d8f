"""masktrie -- in-memory string index with prefix, longest-match and fuzzy search."""

from masktrie.constants import MASK_BASE, MASK_WIDTH, ROOT_CHAR, TERMINAL_CHAR
from masktrie.locks import RWLock
from masktrie.node import TrieNode
from masktrie.search import MODE_NAMES, SearchType
from masktrie.trie import Trie
from masktrie.wordlist import DEFAULT_SEARCH_PATHS, build_trie, load_keys

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_SEARCH_PATHS",
    "MASK_BASE",
    "MASK_WIDTH",
    "MODE_NAMES",
    "ROOT_CHAR",
    "TERMINAL_CHAR",
    "RWLock",
    "SearchType",
    "Trie",
    "TrieNode",
    "build_trie",
    "load_keys",
]
