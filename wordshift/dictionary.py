"""Loading a word list for puzzle solving."""

from __future__ import annotations

import string
import sys

_LETTERS = frozenset(string.ascii_letters)
_UPPERCASE = frozenset(string.ascii_uppercase)


def _is_dictionary_word(token: str) -> bool:
    """Accept tokens made only of letters that do not start with a capital."""
    if token[0] in _UPPERCASE:
        return False
    return all(ch in _LETTERS for ch in token)


def read_dict_words(filename) -> frozenset[str]:
    """Read whitespace-separated words from *filename* into a set.

    Words starting with an upper-case letter and words holding anything
    other than letters are skipped. The number of accepted words is
    reported on standard error. Raises ``OSError`` if the file cannot be
    opened.
    """
    words: set[str] = set()
    count = 0
    with open(filename, encoding="utf-8", errors="replace") as handle:
        for line in handle:
            for token in line.split():
                if _is_dictionary_word(token):
                    words.add(token)
                    count += 1
    print(f"Read {count} words into dictionary.", file=sys.stderr)
    return frozenset(words)