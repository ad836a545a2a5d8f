"""Loading key lists from plain-text files into a Trie."""

from __future__ import annotations

import logging
import os
from typing import Any, Iterable

from masktrie.constants import TERMINAL_CHAR
from masktrie.trie import Trie

log = logging.getLogger("masktrie.wordlist")

DEFAULT_SEARCH_PATHS: list[str] = [
    "words.txt",
    "/usr/share/dict/words",
]


def load_keys(
    trie: Trie,
    path: str,
    value: Any = None,
    strip: bool = True,
    skip_blank: bool = True,
) -> int:
    """Insert every line of *path* (UTF-8, one key per line) into *trie*.

    Returns the number of lines inserted; duplicates are counted each time
    they appear but only stored once. Lines containing NUL are skipped.
    """
    count = 0
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            key = line.strip() if strip else line.rstrip("\r\n")
            if skip_blank and not key:
                continue
            if TERMINAL_CHAR in key:
                log.debug("skipping key with NUL in %s", path)
                continue
            trie.insert(key, value)
            count += 1
    return count


def build_trie(paths: Iterable[str] | None = None, value: Any = None) -> Trie:
    """Build a Trie from the first existing file in *paths*.

    Falls back to ``DEFAULT_SEARCH_PATHS``; an empty Trie is returned (with a
    warning) when none of the candidates exist.
    """
    trie = Trie()
    search_paths = list(paths) if paths else list(DEFAULT_SEARCH_PATHS)

    for path in search_paths:
        if os.path.exists(path):
            count = load_keys(trie, path, value)
            log.info("Loaded %s keys from %s", f"{len(trie):,}", path)
            if count != len(trie):
                log.debug("%d duplicate line(s) in %s", count - len(trie), path)
            return trie

    log.warning("No key list found in %s -- starting empty.", ", ".join(search_paths))
    return trie
