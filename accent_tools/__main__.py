"""accent-tool — Perceptual colour analysis and light transforms for a single image.

Usage: accent-tool <command> <image> [options]

Commands are auto-discovered from accent_tools/commands/.
Each command module's docstring is its documentation.
Run `accent-tool help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, accent-tool looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys

from loguru import logger

from accent_tools import registry
from accent_tools.core.env import Settings, load_env
from accent_tools.core.errors import AccentToolError
from accent_tools.core.report import format_json, format_text
from accent_tools.core.types import Report


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'accent_tools.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  accent-tool accents logo.png\n'
        '  accent-tool accents photo.jpg -n 8 --max-brightness 200 --json\n'
        '  accent-tool average photo.jpg\n'
        '  accent-tool info logo.png\n'
        '  accent-tool trim scan.png -f 0.2 -o trimmed.png\n'
        '  accent-tool transform logo.png -o mono.png --colorize white\n'
        "  accent-tool colour '#0f0' 2563eb\n"
        '  accent-tool help accents\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  ACCENT_TMP_DIR        where the temporary accent sample is written\n'
        '  ACCENT_SAMPLE_PIXELS  pixels sampled for k-means (default 5000)\n'
        '  ACCENT_SEED           sampling seed (default 42)\n'
        '  ACCENT_LOG_LEVEL      DEBUG, INFO, WARNING (default), ERROR\n'
    )
    parser = argparse.ArgumentParser(
        prog='accent-tool',
        description='Perceptual colour analysis and light transforms for a single image.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each command as a subcommand using module docstring
    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        cmd.configure(p)
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    # `help` subcommand — prints full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print('\nRun: accent-tool help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level, format='{time:HH:mm:ss} | {level: <7} | {message}')


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=args.env_file)

    try:
        settings = Settings.from_env()
        _configure_logging(settings.log_level)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)
    if env_path:
        logger.info(f'loaded {env_path}')

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    report = Report(command=args.command)
    try:
        registry.get(args.command).execute(args, report)
    except (AccentToolError, ValueError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
