"""Shared types for accent-tool: Command and Report."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from accent_tools.core.analyzer import ImageAnalyzer


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='average', help='Average colour of an image')

        @command.arguments
        def arguments(parser):
            parser.add_argument('image')

        @command.run
        def run(args, report):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._args_fn: Callable[[argparse.ArgumentParser], None] | None = None
        self._run_fn: Callable | None = None

    def arguments(self, fn: Callable[[argparse.ArgumentParser], None]) -> Callable:
        """Decorator to register the argument builder."""
        self._args_fn = fn
        return fn

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def configure(self, parser: argparse.ArgumentParser) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, args: Any, report: Report) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(args, report)


@dataclass
class Report:
    """Accumulates command results for text/JSON output."""

    command: str
    image_path: str | None = None
    image_width: int = 0
    image_height: int = 0
    image_format: str | None = None
    data: dict[str, Any] = field(default_factory=dict)

    def describe(self, analyzer: ImageAnalyzer) -> None:
        """Record path, size and format of the analyzed image."""
        self.image_path = analyzer.image_path
        self.image_width, self.image_height = analyzer.get_image_size()
        self.image_format = analyzer.get_format()

    def add(self, key: str, value: Any) -> None:
        self.data[key] = value
