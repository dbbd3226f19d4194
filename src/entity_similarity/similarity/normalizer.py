"""Identifier normalization ahead of word similarity lookups."""

from __future__ import annotations

import re
from collections.abc import Iterable

from entity_similarity.similarity.config import (
    DEFAULT_LEADING_WORDS,
    DEFAULT_TRAILING_WORDS,
)

_SEPARATOR = re.compile(r"[\W_]+")


def _split_case(run: str) -> list[str]:
    """Split one alphanumeric run on letter-case and digit boundaries.

    Uses str case predicates so non-ASCII letters stay inside their word;
    uncased scripts (CJK) never start a new word on their own.
    """
    words: list[str] = []
    current = ""
    for ch in run:
        if current:
            prev = current[-1]
            if ch.isdigit() != prev.isdigit():
                words.append(current)
                current = ""
            elif ch.isupper() and not prev.isupper():
                words.append(current)
                current = ""
            elif (
                ch.islower()
                and prev.isupper()
                and len(current) > 1
                and current[-2].isupper()
            ):
                # "HTTPResponse": the last capital opens the next word
                words.append(current[:-1])
                current = prev
        current += ch
    if current:
        words.append(current)
    return words


def split_identifier(raw: str) -> list[str]:
    """Split camelCase, PascalCase, snake_case and kebab-case into words."""
    words: list[str] = []
    for part in _SEPARATOR.split(raw):
        if part:
            words.extend(_split_case(part))
    return words


class NameNormalizer:
    """Strips naming-convention noise so identifiers compare on meaning.

    ``getCustomerName`` and ``customer_name`` both become ``customer_name``;
    ``OrderDTO`` becomes ``order``. Words are lowercased and joined with
    ``_``, the separator WordNet uses for collocations. A lone decoration
    word (a field literally called ``record``) is kept rather than erased.
    """

    def __init__(
        self,
        leading_words: Iterable[str] = DEFAULT_LEADING_WORDS,
        trailing_words: Iterable[str] = DEFAULT_TRAILING_WORDS,
    ) -> None:
        self._leading = frozenset(w.lower() for w in leading_words)
        self._trailing = frozenset(w.lower() for w in trailing_words)

    def normalize(self, raw: str) -> str:
        """Return the comparable base token for an identifier."""
        words = [w.lower() for w in split_identifier(raw)]
        if not words:
            return raw.strip().lower()

        start, end = 0, len(words)
        while end - start > 1 and words[start] in self._leading:
            start += 1
        while end - start > 1 and words[end - 1] in self._trailing:
            end -= 1

        return "_".join(words[start:end])

    __call__ = normalize
