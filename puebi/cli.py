"""Command-line interface for the PUEBI sanitizer.

WHY: Copywriters and template reviewers want to run a message through the
sanitizer without writing Python, and shell pipelines want to clean a file
of templates line by line.

HOW: argparse collects the texts (positional arguments, or stdin when none
are given or "-" is passed), the mode (sanitize, --check, --title) and the
rule sources (--rules JSON file, --exceptions / --heads terms files). The
rule sources are merged with rules.build_config() and each input is
processed independently.

RULES:
- Usage:
    python -m puebi "hai budi,transfer Real Time rp 5.000"
    cat templates.txt | python -m puebi
    python -m puebi --check "kalimat ini"
    python -m puebi --demo
- Results go to stdout, one per input (stdin is processed line by line).
- Status and errors go to stderr. Exit codes: 0 = success, 1 = error,
  or, with --check, 1 when any input is not capitalized.
- PUEBI_RULES_FILE supplies the default for --rules; PUEBI_LOG_LEVEL the
  default for --log-level (both may come from a .env file).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import sanitize
from .capitalization import is_sentence_capitalized, title_case
from .config import DEFAULT_LOG_LEVEL, DEFAULT_RULES_FILE, DEMO_MESSAGE, LOG_FORMAT
from .rules import build_config, load_rules, load_terms

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="puebi",
        description="Normalize Indonesian text toward PUEBI spelling and punctuation.",
    )

    parser.add_argument(
        "texts",
        nargs="*",
        help="Texts to process. Reads stdin line by line when omitted or '-'.",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--check",
        action="store_true",
        help="Print whether each text starts with a capital letter.",
    )
    mode.add_argument(
        "--title",
        action="store_true",
        help="Title-case each text instead of sanitizing it.",
    )
    mode.add_argument(
        "--demo",
        action="store_true",
        help="Sanitize a sample transfer notification and print the result.",
    )

    parser.add_argument(
        "--rules",
        default=DEFAULT_RULES_FILE or None,
        help="JSON rules file extending the built-in word lists "
             "(default: $PUEBI_RULES_FILE).",
    )

    parser.add_argument(
        "--exceptions",
        action="append",
        default=None,
        help="Terms file of words kept capitalized anywhere. Can be repeated.",
    )

    parser.add_argument(
        "--heads",
        action="append",
        default=None,
        help="Terms file of protected head words. Can be repeated.",
    )

    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level for stderr (default: %(default)s).",
    )

    return parser


def _load_config(args: argparse.Namespace) -> dict:
    rules = load_rules(args.rules) if args.rules else None

    extra_exceptions: List[str] = []
    for path in args.exceptions or []:
        extra_exceptions.extend(load_terms(path))

    extra_heads: List[str] = []
    for path in args.heads or []:
        extra_heads.extend(load_terms(path))

    return build_config(rules, extra_exceptions, extra_heads)


def _read_inputs(texts: List[str]) -> List[str]:
    if not texts or texts == ["-"]:
        return sys.stdin.read().splitlines()
    return list(texts)


def main(argv: Optional[List[str]] = None) -> None:
    """Run the PUEBI sanitizer CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    if args.title:
        for text in _read_inputs(args.texts):
            print(title_case(text))
        return

    if args.check:
        all_ok = True
        for text in _read_inputs(args.texts):
            ok = is_sentence_capitalized(text)
            all_ok = all_ok and ok
            print("true" if ok else "false")
        if not all_ok:
            sys.exit(1)
        return

    try:
        config = _load_config(args)
    except (ValueError, OSError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    if args.demo:
        print(sanitize(DEMO_MESSAGE, config=config))
        return

    inputs = _read_inputs(args.texts)
    logger.info("Sanitizing %d text(s)", len(inputs))
    for text in inputs:
        print(sanitize(text, config=config))


if __name__ == "__main__":
    main()
