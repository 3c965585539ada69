"""Find dictionary words matching a wordle-style pattern."""

from __future__ import annotations

import string
import sys
from collections.abc import Iterator, Sequence, Set

from wordsched.dictionary import read_dict_words

DICTIONARY_FILE = "dict-eng.txt"
UNKNOWN = "-"


def _candidates(
    current: list[str], pattern: str, floating: str, index: int, dashes: int
) -> Iterator[str]:
    """Yield every filled-in word that uses up all floating letters."""
    if index == len(pattern):
        if not floating:
            yield "".join(current)
        return
    if pattern[index] != UNKNOWN:
        yield from _candidates(current, pattern, floating, index + 1, dashes)
        return
    for pos, letter in enumerate(floating):
        current[index] = letter
        remaining = floating[:pos] + floating[pos + 1:]
        yield from _candidates(current, pattern, remaining, index + 1, dashes - 1)
    if len(floating) < dashes:
        for letter in string.ascii_lowercase:
            if letter in floating:
                continue
            current[index] = letter
            yield from _candidates(current, pattern, floating, index + 1, dashes - 1)


def wordle(pattern: str, floating: str, dictionary: Set[str]) -> set[str]:
    """Return all words in ``dictionary`` matching ``pattern``.

    ``pattern`` holds fixed letters and ``-`` for unknown positions; every
    letter of ``floating`` must fill one of the unknown positions.
    """
    dashes = pattern.count(UNKNOWN)
    return {
        word
        for word in _candidates(list(pattern), pattern, floating, 0, dashes)
        if word in dictionary
    }


def main(argv: Sequence[str] | None = None) -> int:
    """Print the matches for a pattern and optional floating letters."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(
            'Please provide an initial string (e.g. "s---ng") '
            "and optional string of floating characters."
        )
        return 1
    dictionary = read_dict_words(DICTIONARY_FILE)
    floating = args[1] if len(args) > 1 else ""
    for word in sorted(wordle(args[0], floating, dictionary)):
        print(word)
    return 0


if __name__ == "__main__":
    sys.exit(main())