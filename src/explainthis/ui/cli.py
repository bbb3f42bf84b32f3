from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from explainthis.app import explain_subject, explain_subjects
from explainthis.config import ConfigurationError, configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from explainthis.domain import ExplainResult

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="explain-this",
        description="Explain words and phrases using Wiktionary and Wikipedia",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output, including per-page relevance scores",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    single = subparsers.add_parser("explain", help="Explain a single subject")
    single.add_argument("subject", type=str, help="Word or phrase to explain")
    single.add_argument(
        "--context",
        nargs="*",
        default=[],
        metavar="WORD",
        help="Related words used to pick the most relevant article",
    )
    single.add_argument("--json", action="store_true", help="Print the full result as JSON")

    many = subparsers.add_parser(
        "many",
        help="Explain related subjects, using the whole list as context",
    )
    many.add_argument("subjects", nargs="+", type=str, help="Words or phrases to explain")
    many.add_argument("--json", action="store_true", help="Print each result as JSON")

    return parser.parse_args(list(argv))


def format_result(result: ExplainResult, *, as_json: bool = False) -> str:
    if as_json:
        return json.dumps(result.to_dict(), ensure_ascii=False)
    return f"{result.input}: [{result.type}] {result.value}"


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    def emit(result: ExplainResult) -> None:
        print(format_result(result, as_json=parsed_args.json))  # noqa: T201

    try:
        if parsed_args.command == "explain":
            emit(explain_subject(parsed_args.subject, parsed_args.context))
        elif parsed_args.command == "many":
            explain_subjects(parsed_args.subjects, emit)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except ConfigurationError:
        log.exception("Invalid configuration")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error while explaining")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
