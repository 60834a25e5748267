"""Defaults shared by the configuration and the CLI."""

from __future__ import annotations

SUGGESTION_LIMIT = 5
DEFAULT_LANGUAGE = "hi"
DEFAULT_DATA_DIR = "dictionaries"
SYSTEM_WORDS = "/usr/share/dict/words"

# Languages with a word list out of the box, each read from
# <data dir>/<code>.txt unless configured otherwise.
SUPPORTED_LANGUAGES: tuple[str, ...] = ("en", "gu", "hi", "mr", "sa", "kn", "ne")

EXIT_COMMAND = "exit"
PROMPT = "Enter a word to spell check (type 'exit' to quit): "
