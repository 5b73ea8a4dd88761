#!/usr/bin/env python3
"""
Command-line interface for dicepool.

With no arguments, rolls 2d20 ten times and prints one result per line.
"""

import argparse
import json
import sys

from dicepool.core.config import get_config, parse_max_value
from dicepool.core.logging_config import get_logger, setup_logging
from dicepool.modules.rng import (
    FACE_TABLES,
    DiceNotationError,
    DiceRoller,
    validate_roll_record,
)

logger = get_logger(__name__)

DEFAULT_NOTATION = '2d20'
DEFAULT_TIMES = 10
# Largest count or sides the CLI accepts unless told otherwise (16-bit unsigned)
CLI_MAX_VALUE = 65535
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def _max_value_arg(text):
    try:
        return parse_max_value(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid max value: {text!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='dicepool',
        description='dicepool - roll numeric (2d6) and narrative (bd, sb, dd, pd, cd, fd) dice'
    )
    parser.add_argument('notation', nargs='?', default=DEFAULT_NOTATION,
                        help=f'Die notation (default: {DEFAULT_NOTATION})')
    parser.add_argument('-n', '--times', type=int, default=DEFAULT_TIMES,
                        help=f'Number of rolls (default: {DEFAULT_TIMES})')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducible rolls')
    parser.add_argument('--max-value', type=_max_value_arg, default=argparse.SUPPRESS,
                        help=f"Largest accepted count or sides (default: {CLI_MAX_VALUE}, 'none' for unbounded)")

    output = parser.add_mutually_exclusive_group()
    output.add_argument('--json', action='store_true',
                        help='Print each roll as a JSON record')
    output.add_argument('--breakdown', action='store_true',
                        help='Print individual dice alongside each result')

    parser.add_argument('--list-dice', action='store_true',
                        help='List the narrative dice codes and their faces, then exit')
    parser.add_argument('--log-level', default=None,
                        choices=LOG_LEVELS,
                        help='Logging level (default: LOG_LEVEL or WARNING)')
    return parser


def cmd_list_dice():
    """Print every narrative die with its faces."""
    for kind, faces in FACE_TABLES.items():
        print(f"{kind.code}  {kind.value:<12} {' '.join(faces)}")


def cmd_roll(args, max_value):
    """Roll the requested die and print results."""
    roller = DiceRoller(seed=args.seed, max_value=max_value)
    results = roller.roll_many(args.notation, args.times)

    for result in results:
        if args.json:
            record = result.to_dict()
            validate_roll_record(record)
            print(json.dumps(record, ensure_ascii=False))
        elif args.breakdown:
            print(result.get_breakdown())
        else:
            print(result.result)


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = get_config()
    level = args.log_level or config.log_level
    if level not in LOG_LEVELS:
        level = 'WARNING'
    setup_logging(level=level, log_file=config.log_file)

    if args.list_dice:
        cmd_list_dice()
        return 0

    if args.times < 0:
        parser.error('--times must be non-negative')

    if args.seed is None:
        args.seed = config.seed

    # Flag first, then DICEPOOL_MAX_VALUE, then the CLI default
    if hasattr(args, 'max_value'):
        max_value = args.max_value
    elif config.max_value_explicit:
        max_value = config.max_value
    else:
        max_value = CLI_MAX_VALUE

    try:
        cmd_roll(args, max_value)
    except DiceNotationError as e:
        logger.debug(f"Notation rejected: {e.code}")
        print(f"✗ Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
