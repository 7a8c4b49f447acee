"""Tokenizer utilities for the retrieval core.

Words are separated by the ASCII space character only. Tabs, newlines and
other whitespace are ordinary characters and stay inside the word they
belong to.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from search_server.search.errors import InvalidArgumentError


_WORD_SEPARATOR = " "
# Code points 0-31 are rejected anywhere in indexed or queried text
_MAX_CONTROL_CODE_POINT = 31


class Tokenizer(Protocol):
    """Protocol implemented by tokenizers."""

    def __call__(self, text: str) -> Iterator[str]:  # pragma: no cover - interface definition
        ...


class SpaceTokenizer:
    """Tokenizer that yields the non-empty runs between space characters."""

    def __call__(self, text: str) -> Iterator[str]:
        for word in text.split(_WORD_SEPARATOR):
            if word:
                yield word


def split_into_words(text: str) -> list[str]:
    """Return the words of ``text`` in left-to-right order."""

    return list(SpaceTokenizer()(text))


def has_control_characters(text: str) -> bool:
    """Return True when ``text`` contains a character with code point 0-31."""

    return any(ord(char) <= _MAX_CONTROL_CODE_POINT for char in text)


def validate_text(text: str, *, what: str) -> str:
    """Return ``text`` unchanged or raise if it holds control characters."""

    if has_control_characters(text):
        raise InvalidArgumentError(f"{what} contains invalid characters (codes 0-31): {text!r}")
    return text
