"""Per-language dictionary backed by a prefix trie."""

from __future__ import annotations

import logging

from polyspell.trie import Trie

log = logging.getLogger("polyspell")


class Dictionary:
    """Word list for one language, with trie-based lookup and suggestions.

    ``available`` is False when the word list could not be read; such a
    dictionary is empty and ``error`` says why.
    """

    def __init__(self, language: str, origin: str = "", error: str | None = None):
        self.language = language
        self.origin = origin
        self.error = error
        self.trie = Trie()

    @classmethod
    def from_text(cls, language: str, text: str, origin: str = "") -> Dictionary:
        """Build a dictionary from newline-delimited words."""
        dictionary = cls(language, origin)
        for line in text.splitlines():
            word = line.strip()
            if word:
                dictionary.trie.insert(word)
        log.info("Loaded %s words for %s from %s", f"{len(dictionary):,}", language, origin or "<text>")
        return dictionary

    @classmethod
    def unavailable(cls, language: str, error: str, origin: str = "") -> Dictionary:
        return cls(language, origin, error=error)

    @property
    def available(self) -> bool:
        return self.error is None

    def __len__(self) -> int:
        return len(self.trie)

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def is_valid(self, word: str) -> bool:
        return self.trie.contains(word)

    def suggest(self, prefix: str, limit: int) -> list[str]:
        return self.trie.suggest(prefix, limit)

    def __repr__(self) -> str:
        state = f"{len(self)} words" if self.available else "unavailable"
        return f"Dictionary({self.language!r}, {state})"
