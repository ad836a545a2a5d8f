"""Shared constants for the masktrie index."""

from __future__ import annotations

# Character held by the root node; never equal to a real key character.
ROOT_CHAR = ""

# Child key of the synthetic node that marks the end of a stored key.
TERMINAL_CHAR = "\x00"

# Reachability masks only discriminate 'a'..'z'. Anything else contributes
# no bit, which keeps the mask an over-approximation for every alphabet.
MASK_BASE = "a"
MASK_WIDTH = 26
