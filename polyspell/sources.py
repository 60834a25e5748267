"""Word-list sources: where a language's raw word list comes from."""

from __future__ import annotations

import logging
import os

from polyspell.errors import WordListUnavailable

log = logging.getLogger("polyspell")


class FileWordListSource:
    """Reads UTF-8 word lists from a language -> path mapping."""

    def __init__(self, paths: dict[str, str]):
        self.paths = dict(paths)

    @property
    def languages(self) -> list[str]:
        return sorted(self.paths)

    def describe(self, language: str) -> str:
        return self.paths.get(language, "<unconfigured>")

    def read(self, language: str) -> str:
        path = self.paths.get(language)
        if not path:
            raise WordListUnavailable(language, "no word list configured")
        log.debug("Reading word list for %s from %s", language, path)
        try:
            with open(os.path.expanduser(path), "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise WordListUnavailable(language, f"{path}: {exc}") from exc


class StaticWordListSource:
    """Serves word lists held in memory, e.g. embedded lists."""

    def __init__(self, texts: dict[str, str]):
        self.texts = dict(texts)

    @property
    def languages(self) -> list[str]:
        return sorted(self.texts)

    def describe(self, language: str) -> str:
        return f"<memory:{language}>"

    def read(self, language: str) -> str:
        try:
            return self.texts[language]
        except KeyError:
            raise WordListUnavailable(language, "no word list in memory") from None
