"""Loading the word list used by the wordle solver."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Iterator

_cache: dict[str, frozenset[str]] = {}


def _is_ascii_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _accepted_words(lines: Iterable[str]) -> Iterator[str]:
    """Yield every acceptable token: lower-case start and letters only."""
    for line in lines:
        for token in line.split():
            if "A" <= token[0] <= "Z":
                continue
            if all(_is_ascii_letter(ch) for ch in token):
                yield token


def parse_dict_words(lines: Iterable[str]) -> frozenset[str]:
    """Build a dictionary from whitespace-separated words in ``lines``.

    Words starting with an upper-case letter and words holding anything
    other than letters are skipped.
    """
    return frozenset(_accepted_words(lines))


def read_dict_words(filename: str | os.PathLike[str]) -> frozenset[str]:
    """Read and cache the dictionary stored in ``filename``.

    Raises OSError if the file cannot be opened.
    """
    key = os.path.abspath(os.fspath(filename))
    cached = _cache.get(key)
    if cached is not None:
        return cached
    try:
        with open(key, encoding="utf-8", errors="replace") as handle:
            accepted = list(_accepted_words(handle))
    except OSError as exc:
        raise OSError("Cannot open dictionary file.") from exc
    words = frozenset(accepted)
    print(f"Read {len(accepted)} words into dictionary.", file=sys.stderr)
    _cache[key] = words
    return words