"""Terminal mode for polyspell."""

from __future__ import annotations

import argparse
import logging
import sys

from polyspell.checker import CheckResult, SpellChecker
from polyspell.config import load_config
from polyspell.constants import DEFAULT_DATA_DIR, EXIT_COMMAND, PROMPT
from polyspell.detector import LanguageDetector
from polyspell.errors import ConfigError
from polyspell.registry import DictionaryRegistry
from polyspell.sources import FileWordListSource

log = logging.getLogger("polyspell")


def render(result: CheckResult) -> None:
    """Print the outcome of one check."""
    if result.error:
        print(f"Could not detect the language of '{result.token}'.")
        return

    print(f"Detected Language: {result.detected}")
    if result.fell_back:
        print(f"Unsupported language: {result.detected}. Falling back to default language.")

    if not result.available:
        print(f"Dictionary for '{result.language}' is unavailable.")
        return

    if result.is_valid:
        print(f"The spelling of '{result.token}' is correct.")
        return

    print(f"The spelling of '{result.token}' is incorrect. Suggestions:")
    if not result.suggestions:
        print("  (no suggestions)")
    for i, word in enumerate(result.suggestions):
        print(f"{i + 1}. {word}")


def run_cli(checker: SpellChecker, language: str | None = None) -> None:
    """Prompt for words until 'exit' or end of input."""
    while True:
        try:
            word = input(PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not word:
            continue
        if word.lower() == EXIT_COMMAND:
            print("Exiting spell checker...")
            break

        render(checker.check(word, language))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polyspell",
        description="Multilingual spell checker with prefix suggestions",
    )
    parser.add_argument("words", nargs="*",
                        help="Words to check once; omit for interactive mode")
    parser.add_argument("--lang", type=str, default=None,
                        help="Language code to use instead of detecting one")
    parser.add_argument("--dict", dest="dicts", action="append", default=[], metavar="CODE=PATH",
                        help="Word list for a language (repeatable)")
    parser.add_argument("--config", type=str, default=None,
                        help="JSON file with 'dictionaries', 'default_language', 'suggestion_limit'")
    parser.add_argument("--data-dir", type=str, default=DEFAULT_DATA_DIR,
                        help="Directory holding <code>.txt word lists (default: %(default)s)")
    parser.add_argument("--default-language", type=str, default=None,
                        help="Language used when the detected one has no dictionary")
    parser.add_argument("--limit", type=int, default=None,
                        help="Maximum number of suggestions")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Only log warnings and errors")
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    elif args.quiet:
        logging.getLogger().setLevel(logging.WARNING)

    try:
        config = load_config(
            config_path=args.config,
            data_dir=args.data_dir,
            dict_options=args.dicts,
            default_language=args.default_language,
            suggestion_limit=args.limit,
        )
    except ConfigError as exc:
        print(f"polyspell: {exc}", file=sys.stderr)
        return 2

    registry = DictionaryRegistry(
        FileWordListSource(config.dictionary_paths),
        languages=config.languages,
        default_language=config.default_language,
    )
    checker = SpellChecker(registry, LanguageDetector(), limit=config.suggestion_limit)
    log.debug("Configured languages: %s", ", ".join(config.languages))

    if args.words:
        for word in args.words:
            render(checker.check(word, args.lang))
        return 0

    run_cli(checker, args.lang)
    return 0


if __name__ == "__main__":
    sys.exit(main())
