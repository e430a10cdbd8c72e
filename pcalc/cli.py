#!/usr/bin/env python3
"""
pcalc CLI - Evaluate prefix arithmetic expressions

Usage:
    pcalc eval "+ 2 3"
    pcalc run script.lisp
    pcalc tokens "(+ 1 2)"
    pcalc ast "- 10 (+ 1 2)"
    pcalc repl
"""

import argparse
import logging
import sys
from pathlib import Path

from .lexer import tokenize
from .errors import CalcError
from .parser import parse
from .interpreter import run

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_INPUT = 1
EXIT_DATA_ERROR = 65

PROMPT = "> "


def max_value_for(args: argparse.Namespace) -> int:
    """Largest representable value for the selected width."""
    return 2**args.bits - 1


def strip_line_ending(text: str) -> str:
    """Drop one trailing newline (and carriage return) from input."""
    if text.endswith("\n"):
        text = text[:-1]
    if text.endswith("\r"):
        text = text[:-1]
    return text


def report(error: CalcError) -> None:
    """Print a pipeline error for the user."""
    print(error.report(), file=sys.stderr)
    logger.debug("%s: %s", error.kind.value, error)


def cmd_eval(args: argparse.Namespace) -> int:
    """Evaluate a single expression."""
    try:
        print(run(args.expression, "<eval>", max_value_for(args)))
    except CalcError as e:
        report(e)
        return EXIT_DATA_ERROR
    return EXIT_OK


def cmd_run(args: argparse.Namespace) -> int:
    """Evaluate a script file."""
    source_file = Path(args.source)
    if not source_file.exists():
        print(f"Error: {source_file} not found", file=sys.stderr)
        return EXIT_NO_INPUT

    try:
        source = strip_line_ending(source_file.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {source_file}: {e}", file=sys.stderr)
        return EXIT_NO_INPUT

    try:
        print(run(source, str(source_file), max_value_for(args)))
    except CalcError as e:
        report(e)
        return EXIT_DATA_ERROR
    return EXIT_OK


def cmd_tokens(args: argparse.Namespace) -> int:
    """Print the token stream."""
    try:
        tokens = tokenize(args.expression, "<tokens>")
    except CalcError as e:
        report(e)
        return EXIT_DATA_ERROR
    for tok in tokens:
        print(tok)
    return EXIT_OK


def cmd_ast(args: argparse.Namespace) -> int:
    """Print the parsed tree in canonical form."""
    try:
        expr = parse(args.expression, "<ast>", max_value_for(args))
    except CalcError as e:
        report(e)
        return EXIT_DATA_ERROR
    print(f"{type(expr).__name__}: {expr}")
    return EXIT_OK


def cmd_repl(args: argparse.Namespace) -> int:
    """Read-eval-print loop; errors are reported and the loop goes on."""
    max_value = max_value_for(args)
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            return EXIT_OK
        except KeyboardInterrupt:
            print()
            return EXIT_OK

        line = strip_line_ending(line)
        if line == "exit":
            return EXIT_OK
        if not line:
            continue

        try:
            print(run(line, "<stdin>", max_value))
        except CalcError as e:
            report(e)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pcalc",
        description="pcalc - prefix arithmetic evaluator"
    )
    parser.add_argument("--bits", type=int, choices=(8, 16, 32, 64), default=32,
                        help="Unsigned integer width (default: 32)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log pipeline stages to stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Eval command
    eval_parser = subparsers.add_parser("eval", help="Evaluate an expression")
    eval_parser.add_argument("expression", help="Expression text, e.g. '+ 2 3'")
    eval_parser.set_defaults(func=cmd_eval)

    # Run command
    run_parser = subparsers.add_parser("run", help="Evaluate a script file")
    run_parser.add_argument("source", help="Source file (.lisp)")
    run_parser.set_defaults(func=cmd_run)

    # Tokens command
    tokens_parser = subparsers.add_parser("tokens", help="Print the token stream")
    tokens_parser.add_argument("expression", help="Expression text")
    tokens_parser.set_defaults(func=cmd_tokens)

    # Ast command
    ast_parser = subparsers.add_parser("ast", help="Print the parsed tree")
    ast_parser.add_argument("expression", help="Expression text")
    ast_parser.set_defaults(func=cmd_ast)

    # Repl command
    repl_parser = subparsers.add_parser("repl", help="Interactive prompt")
    repl_parser.set_defaults(func=cmd_repl)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
