"""
ncdrill Python Package

Parses Excellon NC drill programs (as written by PCB CAD tools) into a
normalized stream of unit, tool, operation and end-of-program commands,
resolving missing number formats from vendor hints, header directives or
the coordinate digits themselves.

Key components:
- DrillInterpreter: Line-by-line parser with end-of-input flush
- parse_drill: Convenience function to parse a whole program
- summarize: Hit/slot/tool statistics for a parsed program
"""

from ._version import __version__
from .drill import Command, DrillInterpreter, summarize


def parse_drill(program: str | list[str]) -> list[Command]:
    """Parse a complete drill program and return its commands"""
    return DrillInterpreter().parse_program(program)


__all__ = [
    "__version__",
    "Command",
    "DrillInterpreter",
    "parse_drill",
    "summarize",
]
