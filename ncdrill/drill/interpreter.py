"""
Main drill program interpreter

Feeds drill program lines through the block parser and handlers, owns the
shared format state, drill mode and stash resolver, and collects the
resulting commands and warnings.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from ncdrill import config

from . import hints, tools
from .commands import Command
from .directives import apply_directive, apply_units_directive
from .parser import CoordinateOp, DrillBlockParser
from .resolver import StashResolver
from .state import DrillMode, FormatState
from .translator import translate

logger = logging.getLogger(__name__)


class DrillInterpreter:
    """Stateful parser turning drill program lines into commands"""

    def __init__(
        self,
        on_command: Callable[[Command], None] | None = None,
        stash_limit: int | None = None,
        drill_mode: DrillMode | None = DrillMode.DRILL,
    ):
        """
        Initialize drill interpreter

        Args:
            on_command: Optional callback invoked for every emitted command
            stash_limit: Coordinate blocks held before trailing suppression
                is assumed (defaults to ``config.STASH_LIMIT``)
            drill_mode: Initial drill mode; Excellon programs start in drill mode
        """
        self.parser = DrillBlockParser()
        self.format = FormatState()
        self.drill_mode = drill_mode

        # Output and diagnostics
        self.commands: list[Command] = []
        self.warnings: list[str] = []
        self.on_command = on_command

        self.resolver = StashResolver(
            self.format,
            emit=self.push_command,
            translate=self._translate,
            warn=self.warn,
            capacity=stash_limit if stash_limit is not None else config.STASH_LIMIT,
        )
        self.line_number = 0
        self.flushed = False

    def push_command(self, command: Command) -> None:
        self.commands.append(command)
        if self.on_command is not None:
            self.on_command(command)

    def warn(self, message: str, line: int = 0) -> None:
        self.warnings.append(message)
        logger.warning(f"Line {line}: {message}" if line else message)

    def process(self, block: str) -> None:
        """
        Process a single drill program line

        Args:
            block: One line of the program
        """
        self.line_number += 1
        line = self.line_number
        parsed = self.parser.parse_line(block)

        if parsed.comment is not None:
            result = hints.extract_hints(parsed.comment, line)
            self.format.merge(result.proposals)
            self.resolver.release(result.commands, line)
            return

        if parsed.tool_definition is not None:
            self.resolver.release([tools.define_tool(parsed.tool_definition, line)], line)
            return

        # A selection may share the line with a hit and must precede it
        emitted: list[Command] = []
        if parsed.tool_selection is not None:
            emitted.append(tools.select_tool(parsed.tool_selection, line))

        if parsed.coordinate is not None:
            self.resolver.submit(parsed.coordinate, line, emitted)
            return

        if parsed.directive is not None:
            emitted.append(apply_directive(self.format, parsed.directive, line))
        elif parsed.units is not None:
            emitted.append(apply_units_directive(self.format, parsed.units, line))

        self.resolver.release(emitted, line)

    def flush(self) -> None:
        """Resolve any unknown format at end of input and drain held blocks"""
        self.resolver.flush(self.line_number)
        self.flushed = True

    def parse_program(self, program: str | list[str]) -> list[Command]:
        """
        Parse a complete drill program

        Args:
            program: Program as string or list of lines

        Returns:
            List of all commands emitted for the program
        """
        if isinstance(program, str):
            lines = program.splitlines()
        else:
            lines = program

        start = len(self.commands)
        for line in lines:
            self.process(line)
        self.flush()
        return self.commands[start:]

    def load_file(self, filepath: str | Path) -> list[Command]:
        """
        Parse a drill program from file

        Args:
            filepath: Path to the drill file

        Returns:
            List of all commands emitted for the program
        """
        path = Path(filepath)
        logger.info(f"Parsing drill file {path}")
        program = path.read_text(encoding="utf-8", errors="replace")
        return self.parse_program(program)

    def get_status(self) -> dict:
        """Get current parser state as dictionary for status reporting"""
        return {
            "format": self.format.get_status(),
            "drill_mode": self.drill_mode.name.lower() if self.drill_mode else None,
            "line_number": self.line_number,
            "pending": self.resolver.pending,
            "commands": len(self.commands),
            "warnings": list(self.warnings),
            "flushed": self.flushed,
        }

    def _translate(self, coordinate: CoordinateOp, line: int) -> None:
        emitted, self.drill_mode = translate(coordinate, self.format, self.drill_mode, line)
        for command in emitted:
            self.push_command(command)
