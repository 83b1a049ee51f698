"""
PASSGAUGE Main Entry Point
==========================
Command-line front end for the evaluation engine.

Usage:
  python main.py "S3cret-Phrase"
  python main.py --user-input alice --min-length 12 --json
  python main.py --lang ar               (prompts for the password)
  python main.py --weight common=5 --disable entropy "hunter22"

Exit codes: 0 evaluated, 2 invalid options/configuration.
"""
import sys
import json
import argparse
import getpass
import logging
from typing import List, Optional

from core.config import validate_config
from core.logging_config import LoggingConfig
from core.translator import load_catalog, supported_languages
from exceptions import ConfigurationError
from services.evaluator import evaluate
from utils.dictionary import load_wordlist
from version import APP_NAME, VERSION

logger = logging.getLogger(__name__)


def _parse_weight(text: str):
    name, sep, value = text.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected RULE=WEIGHT, got {text!r}")
    try:
        return name, float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"weight for {name!r} is not a number: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="passgauge",
        description=f"{APP_NAME} — explainable password strength evaluation",
    )
    ap.add_argument("password", nargs="?",
                    help="password to evaluate (prompted for when omitted)")
    ap.add_argument("--min-length", type=int, help="minimum accepted length")
    ap.add_argument("--max-length", type=int, help="maximum accepted length")
    ap.add_argument("--blacklist", action="append", default=[], metavar="TERM",
                    help="forbidden term (repeatable)")
    ap.add_argument("--user-input", action="append", default=[], metavar="TERM",
                    help="personal term such as a name or username (repeatable)")
    ap.add_argument("--disable", action="append", default=[], metavar="RULE",
                    help="rule name to skip (repeatable)")
    ap.add_argument("--weight", action="append", default=[], type=_parse_weight,
                    metavar="RULE=WEIGHT", help="rule weight override (repeatable)")
    ap.add_argument("--dictionary", metavar="FILE",
                    help="word list replacing the built-in common-password list")
    ap.add_argument("--lang", default="en",
                    help=f"feedback language ({', '.join(sorted(supported_languages()))})")
    ap.add_argument("--json", action="store_true", help="print the full result as JSON")
    ap.add_argument("--log-level", help="DEBUG, INFO, WARNING, ... (default: LOG_LEVEL or WARNING)")
    ap.add_argument("--log-file", help="also write logs to this rotating file")
    ap.add_argument("--version", action="version", version=f"{APP_NAME} {VERSION}")
    return ap


def options_from_args(args: argparse.Namespace) -> dict:
    options = {
        "blacklist": args.blacklist,
        "user_inputs": args.user_input,
        "disabled_rules": args.disable,
        "rule_weights": dict(args.weight),
        "i18n": load_catalog(args.lang),
    }
    if args.min_length is not None:
        options["min_length"] = args.min_length
    if args.max_length is not None:
        options["max_length"] = args.max_length
    if args.dictionary:
        options["dictionary"] = load_wordlist(args.dictionary)
    return options


def render_report(result) -> str:
    lines = [
        f"Strength : {result.strength} ({result.percentage}%)",
        f"Score    : {result.score:.2f}",
    ]
    for title, messages in (("Warnings", result.feedback.warnings),
                            ("Suggestions", result.feedback.suggestions)):
        if messages:
            lines.append(f"{title}:")
            lines.extend(f"  - {m}" for m in messages)
    lines.append("Rules:")
    for outcome in result.details:
        mark = "ok  " if outcome.is_valid else "FAIL"
        line = f"  [{mark}] {outcome.rule_name:<10} {outcome.raw_score:5.2f}"
        if outcome.diagnostic:
            line += f"  ({outcome.diagnostic})"
        lines.append(line)
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    LoggingConfig.setup_logging(log_level=args.log_level, log_file=args.log_file)

    try:
        validate_config()
        options = options_from_args(args)
        password = args.password
        if password is None:
            password = getpass.getpass("Password to analyze: ")
        result = evaluate(password, options)
    except ConfigurationError as e:
        logger.debug(f"Configuration error: {e}", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(render_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
