"""polyspell -- multilingual spell checker with trie-based suggestions."""

from polyspell.constants import DEFAULT_LANGUAGE, SUGGESTION_LIMIT, SUPPORTED_LANGUAGES
from polyspell.trie import Trie, TrieNode
from polyspell.dictionary import Dictionary
from polyspell.registry import DictionaryRegistry
from polyspell.sources import FileWordListSource, StaticWordListSource
from polyspell.config import SpellConfig, load_config
from polyspell.checker import CheckResult, SpellChecker
from polyspell.errors import (
    ConfigError,
    DictionaryNotLoaded,
    LanguageDetectionError,
    SpellCheckError,
    WordListUnavailable,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "SUGGESTION_LIMIT",
    "SUPPORTED_LANGUAGES",
    "CheckResult",
    "ConfigError",
    "Dictionary",
    "DictionaryNotLoaded",
    "DictionaryRegistry",
    "FileWordListSource",
    "LanguageDetectionError",
    "SpellCheckError",
    "SpellChecker",
    "SpellConfig",
    "StaticWordListSource",
    "Trie",
    "TrieNode",
    "WordListUnavailable",
    "load_config",
]
