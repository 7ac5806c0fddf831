"""palindrome-filter — select the integers whose decimal digits read the same reversed.

Usage: palindrome-filter <strategy> [NUMBERS...] [options]

Strategies are auto-discovered from palindrome_filter/strategies/.
Each strategy module's docstring is its documentation.
Run `palindrome-filter help <strategy>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, palindrome-filter looks for a .env file starting
  from the current directory and walking up, stopping at the nearest .git
  boundary. Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import logging
import sys

from palindrome_filter import registry
from palindrome_filter.core.env import FilterSettings, load_env
from palindrome_filter.core.numbers import parse_numbers, read_numbers
from palindrome_filter.core.report import format_json, format_text
from palindrome_filter.core.types import InvalidArgumentError, Report


def _load_strategy_module(name: str) -> object:
    """Load the raw module for a strategy (for docstring access)."""
    return importlib.import_module(f'palindrome_filter.strategies.{name}')


def _short_doc(name: str, fallback: str) -> str:
    doc = (_load_strategy_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    strategies = registry.all_strategies()

    epilog = (
        'Examples:\n'
        '  palindrome-filter sequential 121 -121 123 0 7 12321\n'
        '  palindrome-filter concurrent -f numbers.txt --workers 8\n'
        '  palindrome-filter vectorized -f numbers.txt --json\n'
        '  seq 1 100000 | palindrome-filter all -f -\n'
        '  palindrome-filter help concurrent\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  PALINDROME_FILTER_WORKERS     thread pool size (default: cpu count)\n'
        '  PALINDROME_FILTER_CHUNK_SIZE  numbers per worker task\n'
    )
    parser = argparse.ArgumentParser(
        prog='palindrome-filter',
        description='Select the integers whose decimal digits form a palindrome.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug output to stderr')
    sub = parser.add_subparsers(dest='strategy', help='Strategy to run')

    for name, strat in sorted(strategies.items()):
        p = sub.add_parser(name, help=_short_doc(name, strat.help))
        p.add_argument('numbers', nargs='*', help='Integers to filter (space or comma separated)')
        p.add_argument('-f', '--file', help="Read integers from a file ('-' for stdin)")
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('-w', '--workers', type=int, default=None, metavar='N', help='Thread pool size')
        p.add_argument('-c', '--chunk-size', type=int, default=None, metavar='N', help='Numbers per worker task')

    help_parser = sub.add_parser('help', help='Print full docs for a strategy')
    help_parser.add_argument('command', nargs='?', help='Strategy name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a strategy."""
    strategies = registry.all_strategies()

    if command is None:
        print('Available strategies:\n')
        for name, strat in sorted(strategies.items()):
            print(f'  {name:<12} {_short_doc(name, strat.help)}')
        print('\nRun: palindrome-filter help <strategy> for full docs.')
        return

    if command not in strategies:
        print(f'Unknown strategy: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(strategies))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_strategy_module(command).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {command!r})')
        return
    print(doc)


def _load_numbers(args: argparse.Namespace) -> tuple[list[int], str]:
    """Collect integers from positional args and --file, in that order."""
    numbers = parse_numbers(' '.join(args.numbers), source='<args>')
    source = 'args'
    if args.file:
        numbers.extend(read_numbers(args.file))
        source = 'stdin' if args.file == '-' else args.file
    return numbers, source


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'palindrome-filter: loaded {env_path}', file=sys.stderr)

    if not args.strategy:
        parser.print_help()
        sys.exit(1)

    if args.strategy == 'help':
        _print_help(args.command)
        return

    settings = FilterSettings.from_env().override(workers=args.workers, chunk_size=args.chunk_size)

    try:
        numbers, source = _load_numbers(args)
        report = Report(source=source, input_count=len(numbers))
        registry.get(args.strategy).execute(numbers, report, settings)
    except InvalidArgumentError as exc:
        print(f'palindrome-filter: error: {exc}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    # Agreement gate — after output so the report is visible even on failure
    if not report.agree():
        print('\nFAIL: strategies selected different values', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
