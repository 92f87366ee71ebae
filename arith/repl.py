import argparse
import logging
import sys
from typing import Optional, TextIO

from arith.config import Settings
from arith.nodes import to_source
from arith.session import Outcome, Session

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="arith", description="Interactive arithmetic evaluator")
    parser.add_argument("--prompt", help="Prompt printed before each input line")
    parser.add_argument("--show-tokens", action="store_true", default=None, help="Print the tokens of each line")
    parser.add_argument("--show-ast", action="store_true", default=None, help="Print the parsed tree of each line")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level for diagnostics written to stderr",
    )
    return parser


def load_settings(args: argparse.Namespace, settings: Settings) -> Settings:
    if args.prompt is not None:
        settings.prompt = args.prompt
    if args.show_tokens is not None:
        settings.show_tokens = args.show_tokens
    if args.show_ast is not None:
        settings.show_ast = args.show_ast
    if args.log_level is not None:
        settings.log_level = args.log_level
    return settings


def format_value(value: float) -> str:
    return f"{value:f}"


def report(outcome: Outcome, settings: Settings, stdout: TextIO) -> None:
    if settings.show_tokens and outcome.tokens is not None:
        print(f"tokens: {' '.join(t.describe(outcome.code) for t in outcome.tokens)}", file=stdout)
    if settings.show_ast and outcome.tree is not None:
        print(f"ast: {to_source(outcome.tree)}", file=stdout)

    if outcome.error is not None:
        print(outcome.error, file=stdout)
    elif outcome.value is not None:
        print(format_value(outcome.value), file=stdout)


def run(session: Session, settings: Settings, stdin: TextIO, stdout: TextIO) -> None:
    print(f'Type "{settings.quit_command}" to leave.', file=stdout)
    while True:
        stdout.write(settings.prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break

        code = line.rstrip("\r\n")
        if code.strip() == settings.quit_command:
            break
        if not code.strip():
            continue

        report(session.execute(code), settings, stdout)

    logger.debug("Session ended with variables %r", session.environment.snapshot())


def main(argv: Optional[list[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    settings = load_settings(args, Settings.from_env())
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    run(Session(), settings, sys.stdin, sys.stdout)
    return 0
