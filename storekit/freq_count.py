"""Count word frequencies in text files."""

from __future__ import annotations

import re
import sys
from typing import Iterable, List, Optional, Sequence

from storekit.common import hash_str, str_eq
from storekit.hash_table import HashTable

DELIMITERS = "+-#@()[]{}.,:;!? \t\n\r"
_SPLITTER = re.compile("[" + re.escape(DELIMITERS) + "]+")


def tokenize(line: str) -> List[str]:
    """Split ``line`` into the non-empty words between delimiters."""
    return [word for word in _SPLITTER.split(line) if word]


def count_words(lines: Iterable[str], table: Optional[HashTable] = None) -> HashTable:
    """Add the lower-cased words of ``lines`` to ``table`` and return it."""
    if table is None:
        table = HashTable(hash_str, str_eq)
    for line in lines:
        for word in tokenize(line):
            table.insert_freq(word.lower())
    return table


def count_files(paths: Iterable[str]) -> HashTable:
    """Count the words of every readable file; unreadable ones are reported."""
    table = HashTable(hash_str, str_eq)
    for path in paths:
        try:
            with open(path, encoding="utf-8", errors="replace") as handle:
                count_words(handle, table)
        except OSError as exc:
            print(f"{path}: {exc.strerror}", file=sys.stderr)
    return table


def format_frequencies(table: HashTable) -> List[str]:
    """Return ``"word: count"`` lines sorted by word."""
    return [f"{word}: {table.lookup(word)}" for word in sorted(table.keys())]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print word frequencies of the files named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: freq-count file1 ... filen")
        return 1
    for line in format_frequencies(count_files(args)):
        print(line)
    return 0