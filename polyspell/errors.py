"""Exceptions raised by polyspell."""

from __future__ import annotations


class SpellCheckError(Exception):
    """Base class for polyspell errors."""


class ConfigError(SpellCheckError):
    """The dictionary configuration is unusable."""


class WordListUnavailable(SpellCheckError):
    """A language's word list could not be read."""

    def __init__(self, language: str, reason: str):
        super().__init__(f"word list for '{language}' unavailable: {reason}")
        self.language = language
        self.reason = reason


class DictionaryNotLoaded(SpellCheckError, KeyError):
    """A query was made for a language that has not been loaded."""

    def __init__(self, language: str):
        super().__init__(language)
        self.language = language

    def __str__(self) -> str:
        return f"dictionary for '{self.language}' has not been loaded"


class LanguageDetectionError(SpellCheckError):
    """The language of a token could not be determined."""
