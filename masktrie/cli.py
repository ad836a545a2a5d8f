"""Command-line front end: load a key list and run queries against it."""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time

from masktrie.search import MODE_NAMES
from masktrie.trie import Trie
from masktrie.wordlist import build_trie

log = logging.getLogger("masktrie")


def run_queries(trie: Trie, queries: list[str], mode: str, show_values: bool = False) -> bool:
    """Print the results of each query; True if every query matched."""
    stype = MODE_NAMES[mode]
    all_matched = True
    for query in queries:
        t0 = time.time()
        if show_values:
            results = trie.search_all(query, stype)
            lines = [f"{k}\t{v!r}" for k, v in results.items()]
        else:
            lines = trie.search(query, stype)
        elapsed = time.time() - t0

        print(f"{mode} {query!r}: {len(lines)} match(es) in {elapsed * 1000:.2f}ms")
        for line in lines:
            print(f"  {line}")
        if not lines:
            all_matched = False
    return all_matched


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="masktrie",
        description="masktrie -- exact, prefix, longest-prefix and fuzzy key lookups",
    )
    parser.add_argument("queries", nargs="+", metavar="QUERY",
                        help="Key, prefix or partial string to look up")
    parser.add_argument("--keys", type=str, default=None,
                        help="Path to a key list file (one key per line)")
    parser.add_argument("--mode", choices=sorted(MODE_NAMES), default="prefix",
                        help="Search mode (default: %(default)s)")
    parser.add_argument("--values", action="store_true",
                        help="Print stored values next to matched keys")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.keys is not None and not os.path.exists(args.keys):
        parser.error(f"key list not found: {args.keys}")

    trie = build_trie([args.keys] if args.keys else None)
    log.debug("trie ready with %d key(s)", len(trie))

    return 0 if run_queries(trie, args.queries, args.mode, args.values) else 1


def run() -> None:
    sys.exit(main())
