"""Tests for configuration loading and validation."""

import json
import os
import tempfile
import unittest
from unittest.mock import patch

from polyspell.config import SpellConfig, default_paths, load_config, parse_dict_option
from polyspell.constants import SUPPORTED_LANGUAGES
from polyspell.errors import ConfigError


class TestDefaults(unittest.TestCase):
    """Test built-in dictionary paths."""

    def test_every_supported_language_has_a_path(self):
        """Test defaults cover the bundled languages under the data dir."""
        with tempfile.TemporaryDirectory() as data_dir:
            open(os.path.join(data_dir, "en.txt"), "w").close()
            paths = default_paths(data_dir)
        self.assertEqual(set(paths), set(SUPPORTED_LANGUAGES))
        self.assertEqual(paths["hi"], os.path.join(data_dir, "hi.txt"))
        self.assertEqual(paths["en"], os.path.join(data_dir, "en.txt"))

    @patch("polyspell.config.os.path.exists", side_effect=lambda p: p == "/usr/share/dict/words")
    def test_english_falls_back_to_system_words(self, _exists):
        """Test English uses the system word list when no data file exists."""
        self.assertEqual(default_paths("nowhere")["en"], "/usr/share/dict/words")


class TestParseDictOption(unittest.TestCase):
    """Test CODE=PATH parsing."""

    def test_valid(self):
        """Test surrounding whitespace is stripped."""
        self.assertEqual(parse_dict_option(" gu = /data/gu.txt "), ("gu", "/data/gu.txt"))

    def test_invalid(self):
        """Test malformed values are rejected."""
        for value in ("gu", "=x.txt", "gu="):
            with self.assertRaises(ConfigError):
                parse_dict_option(value)


class TestValidate(unittest.TestCase):
    """Test SpellConfig.validate."""

    def test_no_dictionaries(self):
        """Test an empty mapping is rejected."""
        with self.assertRaises(ConfigError):
            SpellConfig().validate()

    def test_default_language_must_be_configured(self):
        """Test the default language needs a dictionary."""
        config = SpellConfig({"en": "en.txt"}, default_language="hi")
        with self.assertRaises(ConfigError):
            config.validate()

    def test_bad_limit(self):
        """Test non-positive limits are rejected."""
        for limit in (0, -3, "5"):
            config = SpellConfig({"hi": "hi.txt"}, suggestion_limit=limit)
            with self.assertRaises(ConfigError):
                config.validate()

    def test_missing_file_only_warns(self):
        """Test a missing word list is a warning, not an error."""
        config = SpellConfig({"hi": "/nonexistent/polyspell/hi.txt"})
        with self.assertLogs("polyspell", level="WARNING") as logs:
            config.validate()
        self.assertIn("hi", logs.output[0])


class TestLoadConfig(unittest.TestCase):
    """Test merging defaults, JSON file and overrides."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def _write_config(self, data):
        path = os.path.join(self.tmp.name, "polyspell.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f)
        return path

    def test_defaults(self):
        """Test the defaults validate with 'hi' as default language."""
        config = load_config(data_dir=self.tmp.name)
        self.assertEqual(config.default_language, "hi")
        self.assertEqual(config.suggestion_limit, 5)
        self.assertIn("ne", config.languages)

    def test_json_file(self):
        """Test file entries override defaults; relative paths are file-relative."""
        path = self._write_config({
            "dictionaries": {"fr": "words/fr.txt"},
            "default_language": "fr",
            "suggestion_limit": 3,
        })
        config = load_config(config_path=path, data_dir=self.tmp.name)
        self.assertEqual(config.dictionary_paths["fr"], os.path.join(self.tmp.name, "words/fr.txt"))
        self.assertEqual(config.default_language, "fr")
        self.assertEqual(config.suggestion_limit, 3)

    def test_cli_overrides_win(self):
        """Test --dict, --default-language and --limit take precedence."""
        path = self._write_config({"suggestion_limit": 3})
        config = load_config(
            config_path=path,
            data_dir=self.tmp.name,
            dict_options=["en=/tmp/en.txt"],
            default_language="en",
            suggestion_limit=8,
        )
        self.assertEqual(config.dictionary_paths["en"], "/tmp/en.txt")
        self.assertEqual(config.default_language, "en")
        self.assertEqual(config.suggestion_limit, 8)

    def test_invalid_json(self):
        """Test malformed JSON raises ConfigError."""
        path = os.path.join(self.tmp.name, "bad.json")
        with open(path, "w", encoding="utf-8") as f:
            f.write("{not json")
        with self.assertRaises(ConfigError):
            load_config(config_path=path, data_dir=self.tmp.name)

    def test_wrong_shape(self):
        """Test non-object configuration is rejected."""
        with self.assertRaises(ConfigError):
            load_config(config_path=self._write_config(["en"]), data_dir=self.tmp.name)
        with self.assertRaises(ConfigError):
            load_config(
                config_path=self._write_config({"dictionaries": ["en"]}),
                data_dir=self.tmp.name,
            )

    def test_missing_config_file(self):
        """Test an unreadable config file raises ConfigError."""
        with self.assertRaises(ConfigError):
            load_config(config_path=os.path.join(self.tmp.name, "absent.json"))


if __name__ == "__main__":
    unittest.main()
