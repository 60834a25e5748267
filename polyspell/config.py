"""Dictionary configuration: which word list serves which language."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field

from polyspell.constants import (
    DEFAULT_DATA_DIR,
    DEFAULT_LANGUAGE,
    SUGGESTION_LIMIT,
    SUPPORTED_LANGUAGES,
    SYSTEM_WORDS,
)
from polyspell.errors import ConfigError

log = logging.getLogger("polyspell")


@dataclass
class SpellConfig:
    dictionary_paths: dict[str, str] = field(default_factory=dict)
    default_language: str = DEFAULT_LANGUAGE
    suggestion_limit: int = SUGGESTION_LIMIT

    @property
    def languages(self) -> list[str]:
        return sorted(self.dictionary_paths)

    def validate(self) -> None:
        """Check the configuration before any dictionary is loaded.

        Missing word-list files are only warned about: that language loads
        as unavailable and the session carries on.
        """
        if not self.dictionary_paths:
            raise ConfigError("no dictionaries configured")
        for code, path in self.dictionary_paths.items():
            if not code.strip():
                raise ConfigError("blank language code in dictionary configuration")
            if not path:
                raise ConfigError(f"no path given for language '{code}'")
        if self.default_language not in self.dictionary_paths:
            raise ConfigError(
                f"default language '{self.default_language}' has no dictionary configured"
            )
        limit = self.suggestion_limit
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ConfigError(f"suggestion limit must be a positive integer, got {limit!r}")
        for code, path in sorted(self.dictionary_paths.items()):
            if not os.path.exists(os.path.expanduser(path)):
                log.warning("Word list for %s not found at %s", code, path)


def default_paths(data_dir: str = DEFAULT_DATA_DIR) -> dict[str, str]:
    paths = {code: os.path.join(data_dir, f"{code}.txt") for code in SUPPORTED_LANGUAGES}
    if not os.path.exists(paths["en"]) and os.path.exists(SYSTEM_WORDS):
        paths["en"] = SYSTEM_WORDS
    return paths


def parse_dict_option(value: str) -> tuple[str, str]:
    """Split a ``CODE=PATH`` command-line value."""
    code, sep, path = value.partition("=")
    code, path = code.strip(), path.strip()
    if not sep or not code or not path:
        raise ConfigError(f"expected CODE=PATH, got {value!r}")
    return code, path


def _read_config_file(path: str) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a JSON object")
    dictionaries = data.get("dictionaries", {})
    if not isinstance(dictionaries, dict):
        raise ConfigError(f"{path}: 'dictionaries' must map language codes to paths")
    return data


def load_config(
    config_path: str | None = None,
    data_dir: str = DEFAULT_DATA_DIR,
    dict_options: list[str] | None = None,
    default_language: str | None = None,
    suggestion_limit: int | None = None,
) -> SpellConfig:
    """Merge built-in defaults, an optional JSON file and CLI overrides."""
    config = SpellConfig(dictionary_paths=default_paths(data_dir))

    if config_path:
        data = _read_config_file(config_path)
        base_dir = os.path.dirname(os.path.abspath(config_path))
        for code, path in data.get("dictionaries", {}).items():
            path = str(path)
            if not os.path.isabs(os.path.expanduser(path)):
                path = os.path.join(base_dir, path)
            config.dictionary_paths[str(code)] = path
        if "default_language" in data:
            config.default_language = str(data["default_language"])
        if "suggestion_limit" in data:
            config.suggestion_limit = data["suggestion_limit"]
        log.debug("Read configuration from %s", config_path)

    for value in dict_options or []:
        code, path = parse_dict_option(value)
        config.dictionary_paths[code] = path

    if default_language:
        config.default_language = default_language
    if suggestion_limit is not None:
        config.suggestion_limit = suggestion_limit

    config.validate()
    return config
