"""
Tool table handling: definitions (``T01C0.8``) and selections (``T01``).
"""

import logging

from . import commands
from .commands import SetCommand, ToolCommand
from .coordinates import normalize
from .parser import ToolDefinition

logger = logging.getLogger(__name__)


def define_tool(definition: ToolDefinition, line: int = 0) -> ToolCommand:
    """
    Build the Tool command for a definition line

    The diameter is always a plain number, so it is read with ``normalize``
    rather than the fixed-point coordinate decoder.
    """
    diameter = normalize(definition.diameter)
    logger.debug(f"Tool T{definition.code}: circle {diameter}")
    return commands.tool(definition.code, commands.circle(diameter), line)


def select_tool(code: str, line: int = 0) -> SetCommand:
    return commands.set_command("tool", code, line)
