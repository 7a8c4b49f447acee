"""Parse raw query text into plus and minus word sets."""

from __future__ import annotations

from dataclasses import dataclass

from search_server.search.errors import InvalidArgumentError
from search_server.search.models import Query
from search_server.search.stop_words import StopWordSet
from search_server.search.tokenizer import SpaceTokenizer, Tokenizer, validate_text


_MINUS = "-"


@dataclass(frozen=True, slots=True)
class QueryWord:
    """A single classified query token."""

    data: str
    is_minus: bool
    is_stop: bool


class QueryParser:
    """Turn query text into an immutable :class:`Query`.

    A leading ``-`` marks a word whose presence disqualifies a document.
    Stop words are dropped whether or not they carry the prefix.
    """

    def __init__(self, stop_words: StopWordSet, *, tokenizer: Tokenizer | None = None) -> None:
        self.stop_words = stop_words
        self.tokenizer = tokenizer or SpaceTokenizer()

    def parse_word(self, text: str) -> QueryWord:
        validate_text(text, what="Query word")
        is_minus = False
        if text.startswith(_MINUS):
            if text.startswith(_MINUS * 2):
                raise InvalidArgumentError(f"More than one minus sign before a query word: {text!r}")
            text = text[1:]
            if not text:
                raise InvalidArgumentError("No text after the minus sign in the query")
            is_minus = True
        return QueryWord(data=text, is_minus=is_minus, is_stop=text in self.stop_words)

    def parse(self, raw_query: str) -> Query:
        plus_words: set[str] = set()
        minus_words: set[str] = set()
        for token in self.tokenizer(raw_query):
            word = self.parse_word(token)
            if word.is_stop:
                continue
            if word.is_minus:
                minus_words.add(word.data)
            else:
                plus_words.add(word.data)
        # Keep the sets disjoint; a minus word excludes regardless
        return Query(plus_words=frozenset(plus_words - minus_words), minus_words=frozenset(minus_words))
