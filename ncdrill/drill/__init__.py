"""
Excellon drill program parsing

This module turns NC drill program lines into a normalized command stream.

Main components:
- parser.py: Block classification into facets
- state.py: Format state and drill mode
- hints.py: Format hints from CAD comments
- tools.py: Tool definitions and selections
- directives.py: Units and notation directives
- coordinates.py: Fixed-point coordinate decoding and zero detection
- resolver.py: Stash/replay of blocks while zero suppression is unknown
- translator.py: Coordinate and drill mode to operations
- interpreter.py: Main drill interpreter
- summary.py: Statistics over a parsed program
"""

from .commands import Command, DoneCommand, OpCommand, SetCommand, ToolCommand
from .interpreter import DrillInterpreter
from .parser import DrillBlock, DrillBlockParser
from .state import DrillMode, FormatState, Notation, Units, ZeroSuppression
from .summary import summarize

__all__ = [
    "Command",
    "DoneCommand",
    "OpCommand",
    "SetCommand",
    "ToolCommand",
    "DrillInterpreter",
    "DrillBlock",
    "DrillBlockParser",
    "DrillMode",
    "FormatState",
    "Notation",
    "Units",
    "ZeroSuppression",
    "summarize",
]
