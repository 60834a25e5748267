"""Spell-check pipeline: detect -> resolve -> load -> validate/suggest."""

from __future__ import annotations

import logging
from typing import Callable

from polyspell.constants import SUGGESTION_LIMIT
from polyspell.errors import LanguageDetectionError
from polyspell.registry import DictionaryRegistry

log = logging.getLogger("polyspell")


class CheckResult:
    """Outcome of checking a single token."""

    __slots__ = (
        "token", "detected", "language", "fell_back",
        "is_valid", "suggestions", "available", "error",
    )

    def __init__(
        self,
        token: str,
        detected: str | None = None,
        language: str | None = None,
        fell_back: bool = False,
        is_valid: bool = False,
        suggestions: list[str] | None = None,
        available: bool = True,
        error: str | None = None,
    ):
        self.token = token
        self.detected = detected    # code reported by the detector (or forced)
        self.language = language    # code whose dictionary answered
        self.fell_back = fell_back
        self.is_valid = is_valid
        self.suggestions = suggestions or []
        self.available = available  # False when the word list could not be read
        self.error = error          # detection failure message

    def __repr__(self) -> str:
        if self.error:
            return f"CheckResult({self.token!r}, error={self.error!r})"
        verdict = "valid" if self.is_valid else f"invalid, suggestions={self.suggestions}"
        return f"CheckResult({self.token!r}, {self.language}, {verdict})"


class SpellChecker:
    """Checks tokens against the registry's per-language dictionaries."""

    def __init__(
        self,
        registry: DictionaryRegistry,
        detector: Callable[[str], str],
        limit: int = SUGGESTION_LIMIT,
    ):
        self.registry = registry
        self.detector = detector
        self.limit = limit

    def check(self, token: str, language: str | None = None) -> CheckResult:
        """Check *token*; a detection failure is reported in the result.

        Suggestions are only computed for tokens that are not valid words.
        """
        if language is None:
            try:
                language = self.detector(token)
            except LanguageDetectionError as exc:
                log.warning("%s", exc)
                return CheckResult(token, error=str(exc))

        resolved, fell_back = self.registry.resolve_language(language)
        dictionary = self.registry.ensure_loaded(resolved)
        result = CheckResult(
            token,
            detected=language,
            language=resolved,
            fell_back=fell_back,
            available=dictionary.available,
        )
        if not dictionary.available:
            return result

        result.is_valid = self.registry.is_valid_word(resolved, token)
        if not result.is_valid:
            result.suggestions = self.registry.suggest(resolved, token, self.limit)
        return result
