"""Command lookup for the CLI.

A command is any module under accent_tools/commands/ that exposes a
module-level `command` (a Command). Modules whose name starts with an
underscore are helpers and are skipped. Two modules claiming the same
command name is a programming error and fails loudly.
"""

from __future__ import annotations

import importlib
import pkgutil
from functools import cache
from types import ModuleType

from accent_tools.core.types import Command


def scan(package: ModuleType) -> dict[str, Command]:
    """Import every public module in `package` and collect its Command."""
    found: dict[str, Command] = {}
    for info in pkgutil.iter_modules(package.__path__):
        if info.name.startswith('_'):
            continue
        module = importlib.import_module(f'{package.__name__}.{info.name}')
        cmd = getattr(module, 'command', None)
        if not isinstance(cmd, Command):
            continue
        if cmd.name in found:
            raise RuntimeError(f'Command name {cmd.name!r} defined twice (second in {module.__name__})')
        found[cmd.name] = cmd
    return found


@cache
def all_commands() -> dict[str, Command]:
    """Every command shipped in accent_tools.commands, keyed by name."""
    import accent_tools.commands

    return scan(accent_tools.commands)


def get(name: str) -> Command:
    commands = all_commands()
    try:
        return commands[name]
    except KeyError:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(commands))}') from None
