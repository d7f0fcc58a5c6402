"""Command that prints a sample word list in sorted order."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .treemap import TreeMap

WORDS = ("saco", "cese", "case", "cosa", "casa", "cesa", "cose", "seco", "saca")


def lower_than_string(key1: str, key2: str) -> bool:
    """Order strings lexicographically."""
    return key1 < key2


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Insert the sample words and print them in key order."""
    tree = TreeMap(lower_than_string)
    for word in WORDS:
        tree.insert(word, word)

    pair = tree.first()
    while pair is not None:
        sys.stdout.write(f"{pair.value}\n")
        pair = tree.next()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())