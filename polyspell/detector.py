"""Language detection for input tokens (langdetect)."""

from __future__ import annotations

import logging

from langdetect import DetectorFactory, detect
from langdetect.lang_detect_exception import LangDetectException

from polyspell.errors import LanguageDetectionError

log = logging.getLogger("polyspell")


class LanguageDetector:
    """Best-effort language guess for a single token.

    Short tokens are often misdetected; callers fall back to a default
    language when the guess has no dictionary.
    """

    def __init__(self, seed: int | None = 0):
        # langdetect is randomised unless seeded.
        if seed is not None:
            DetectorFactory.seed = seed

    def __call__(self, token: str) -> str:
        return self.detect(token)

    def detect(self, token: str) -> str:
        if not token or not token.strip():
            raise LanguageDetectionError("cannot detect the language of an empty token")
        try:
            code = detect(token)
        except LangDetectException as exc:
            raise LanguageDetectionError(f"could not detect language of {token!r}: {exc}") from exc
        log.debug("Detected %s for %r", code, token)
        return code
