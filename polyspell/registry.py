"""Registry of lazily built per-language dictionaries."""

from __future__ import annotations

import logging
import threading
from typing import Iterable

from polyspell.constants import DEFAULT_LANGUAGE
from polyspell.dictionary import Dictionary
from polyspell.errors import DictionaryNotLoaded, WordListUnavailable

log = logging.getLogger("polyspell.registry")


class DictionaryRegistry:
    """Builds each language's dictionary once, on first use, and keeps it.

    The registry is the only entry point callers need: resolve the language
    code, make sure its dictionary is loaded, then ask membership and
    suggestion questions. Dictionaries are never rebuilt or evicted.
    """

    def __init__(self, source, languages: Iterable[str] | None = None, default_language: str = DEFAULT_LANGUAGE):
        self.source = source
        if languages is None:
            languages = source.languages
        self.languages: frozenset[str] = frozenset(languages)
        self.default_language = default_language
        self._dictionaries: dict[str, Dictionary] = {}
        self._lock = threading.Lock()

    def __contains__(self, language: str) -> bool:
        return language in self._dictionaries

    def get(self, language: str) -> Dictionary | None:
        return self._dictionaries.get(language)

    def loaded_languages(self) -> list[str]:
        return sorted(self._dictionaries)

    def resolve_language(self, code: str) -> tuple[str, bool]:
        """Map *code* onto a known language, falling back to the default.

        Returns ``(language, fell_back)``.
        """
        if code in self.languages:
            return code, False
        log.warning("Unsupported language %r, falling back to %r", code, self.default_language)
        return self.default_language, True

    def ensure_loaded(self, language: str, source=None) -> Dictionary:
        """Return the dictionary for *language*, building it on first request.

        An unreadable word list is logged and stored as an empty, unavailable
        dictionary; it is not retried.
        """
        dictionary = self._dictionaries.get(language)
        if dictionary is not None:
            return dictionary
        with self._lock:
            dictionary = self._dictionaries.get(language)
            if dictionary is None:
                dictionary = self._build(language, source or self.source)
                self._dictionaries[language] = dictionary
        return dictionary

    def is_valid_word(self, language: str, token: str) -> bool:
        return self._loaded(language).is_valid(token)

    def suggest(self, language: str, token: str, limit: int) -> list[str]:
        return self._loaded(language).suggest(token, limit)

    def _loaded(self, language: str) -> Dictionary:
        dictionary = self._dictionaries.get(language)
        if dictionary is None:
            raise DictionaryNotLoaded(language)
        return dictionary

    def _build(self, language: str, source) -> Dictionary:
        origin = source.describe(language) if hasattr(source, "describe") else repr(source)
        try:
            text = source.read(language)
        except WordListUnavailable as exc:
            log.exception("Could not load dictionary for %s", language)
            return Dictionary.unavailable(language, exc.reason, origin)
        return Dictionary.from_text(language, text, origin)
