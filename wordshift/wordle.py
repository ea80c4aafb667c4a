"""Finding dictionary words that fit a partially known pattern."""

from __future__ import annotations

import string
import sys
from collections.abc import Iterable

from wordshift.dictionary import read_dict_words

BLANK = "-"
DICTIONARY_FILE = "dict-eng.txt"
_LOWERCASE = frozenset(string.ascii_lowercase)


def _fits_pattern(word: str, pattern: str) -> bool:
    """Fixed letters must match; blanks must be filled with lower-case letters."""
    if len(word) != len(pattern):
        return False
    for want, have in zip(pattern, word):
        if want == BLANK:
            if have not in _LOWERCASE:
                return False
        elif want != have:
            return False
    return True


def _uses_floating(word: str, floating: str) -> bool:
    """Check that every floating letter appears, counting repeats."""
    remaining = list(word)
    for ch in floating:
        try:
            remaining[remaining.index(ch)] = BLANK
        except ValueError:
            return False
    return True


def wordle(pattern: str, floating: str, dictionary: Iterable[str]) -> set[str]:
    """Return every dictionary word matching *pattern* that uses all *floating* letters.

    In *pattern*, ``-`` marks an unknown position; other characters are
    fixed. Each floating letter must appear somewhere in the word, as many
    times as it is listed.
    """
    return {
        word
        for word in dictionary
        if _fits_pattern(word, pattern) and _uses_floating(word, floating)
    }


def main(argv=None) -> int:
    """Print the words fitting a pattern and optional floating letters."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(
            'Please provide an initial string (e.g. "s---ng")'
            " and optional string of floating characters."
        )
        return 1
    dictionary = read_dict_words(DICTIONARY_FILE)
    pattern = args[0]
    floating = args[1] if len(args) > 1 else ""
    for word in sorted(wordle(pattern, floating, dictionary)):
        print(word)
    return 0


if __name__ == "__main__":
    sys.exit(main())