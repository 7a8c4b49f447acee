"""Case-sensitive stop word set shared by indexing and query parsing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from search_server.search.tokenizer import split_into_words, validate_text


class StopWordSet:
    """Set of words excluded from both the index and parsed queries.

    Unlike ``str.lower``-based stop lists, membership is exact: ``"And"``
    and ``"and"`` are different words.
    """

    def __init__(self, stop_words: str | Iterable[str] | None = None) -> None:
        self._words: set[str] = set()
        if stop_words is None:
            return
        if isinstance(stop_words, str):
            self.add_text(stop_words)
        else:
            self.update(stop_words)

    def add_text(self, text: str) -> None:
        """Add every space-separated word of ``text``."""

        self.update(split_into_words(text))

    def update(self, words: Iterable[str]) -> None:
        """Add words from an iterable, skipping empty strings.

        All words are validated before any is added so a rejected batch
        leaves the set untouched.
        """

        accepted = [validate_text(word, what="Stop word") for word in words if word]
        self._words.update(accepted)

    def filter(self, words: Iterable[str]) -> list[str]:
        """Return ``words`` without stop words, preserving order."""

        return [word for word in words if word not in self._words]

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"StopWordSet({sorted(self._words)!r})"
