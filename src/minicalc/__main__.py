"""Command-line entry point for MiniCalc."""

import argparse
import logging
from logging.handlers import RotatingFileHandler
import sys
from typing import List

from minicalc.minicalc import MiniCalc
from minicalc.minicalc_error import MiniCalcEvalError, MiniCalcTokenError


DEFAULT_EXPRESSION = "2 + 2 * 2"


def setup_logging(level: str, log_file: str | None = None) -> None:
    """Configure logging to stderr, or to a rotating log file if one is given."""
    handlers: List[logging.Handler] = []
    if log_file:
        # Keep up to 6 log files, max 1MB each
        handlers.append(RotatingFileHandler(
            log_file,
            maxBytes=1024*1024,  # 1MB
            backupCount=5,
            encoding='utf-8'
        ))

    else:
        handlers.append(logging.StreamHandler(sys.stderr))

    logging.basicConfig(
        level=getattr(logging, level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="minicalc",
        description="Tokenize and evaluate a binary integer expression",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "2 + 2"                       # Prints Result = 4
  %(prog)s "5 - 3" -t                    # Also prints the tokens
  %(prog)s "2 + X" --strict              # Rejects unrecognised characters
        """
    )

    parser.add_argument(
        'expression',
        nargs='?',
        default=DEFAULT_EXPRESSION,
        help=f'Expression to evaluate (default: "{DEFAULT_EXPRESSION}")'
    )

    parser.add_argument(
        '-t', '--tokens',
        action='store_true',
        help='Print the tokens before evaluating'
    )

    parser.add_argument(
        '--strict',
        action='store_true',
        help='Treat unrecognised characters as tokenization errors'
    )

    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Logging level (default: WARNING)'
    )

    parser.add_argument(
        '--log-file',
        help='Write logs to this file (rotated at 1MB) instead of stderr'
    )

    return parser


def main(argv: List[str] | None = None) -> int:
    """Main entry point for CLI."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    calc = MiniCalc(strict=args.strict)

    print(f"Tokenizing: {args.expression}")

    try:
        tokens = calc.tokenize(args.expression)

    except MiniCalcTokenError as e:
        print(f"Could not parse: {e.message}", file=sys.stderr)
        return 1

    if args.tokens:
        for token in tokens:
            print(f"  {token.describe()}")

    try:
        result = calc.interpret(tokens)

    except MiniCalcEvalError as e:
        print(f"Could not evaluate: {e.message}", file=sys.stderr)
        return 1

    print(f"Result = {result}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
