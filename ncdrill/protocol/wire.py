"""
Wire format helpers for drill commands.

This module centralizes the pipe-delimited text encoding of emitted commands
and decoding it back, e.g.::

    SET|units|in
    TOOL|1|circle|0.8
    OP|flash|x=1.5,y=0.25
    DONE
"""

import json
import logging
from collections.abc import Iterable

from ncdrill.drill import commands
from ncdrill.drill.commands import Command, DoneCommand, OpCommand, SetCommand, ToolCommand
from ncdrill.protocol.types import AxisKey

logger = logging.getLogger(__name__)

__all__ = [
    "encode_command",
    "encode_program",
    "encode_json",
    "decode_command",
    "format_number",
]

SET_PROPS = ("units", "nota", "backupNota", "backupUnits", "tool", "mode")
OP_KINDS = ("flash", "move", "int")
AXES: tuple[AxisKey, ...] = ("x", "y", "i", "j", "a")


def format_number(value: float) -> str:
    """Shortest round-trippable text for a coordinate value"""
    text = f"{value:.10g}"
    return "0" if text == "-0" else text


# =========================
# Encoding helpers
# =========================
def encode_command(command: Command) -> str:
    """
    Encode one command as a single line of text

    SET|<prop>|<value>
    OP|<op>|<axis>=<value>,...
    TOOL|<code>|<shape>|<param>,...
    DONE
    """
    if isinstance(command, SetCommand):
        return f"SET|{command.prop}|{command.value}"
    if isinstance(command, OpCommand):
        coord = ",".join(f"{axis}={format_number(command.coord[axis])}" for axis in AXES if axis in command.coord)
        return f"OP|{command.op}|{coord}"
    if isinstance(command, ToolCommand):
        params = ",".join(format_number(p) for p in command.tool["params"])
        return f"TOOL|{command.code}|{command.tool['shape']}|{params}"
    if isinstance(command, DoneCommand):
        return "DONE"
    raise TypeError(f"Cannot encode {type(command).__name__}")


def encode_program(program: Iterable[Command]) -> str:
    """Encode a command stream, one command per line"""
    return "\n".join(encode_command(command) for command in program)


def encode_json(command: Command) -> str:
    """Encode one command as a JSON object on a single line"""
    return json.dumps(command.to_dict(), separators=(",", ":"))


# =========================
# Decoding helpers
# =========================
def decode_command(text: str, line: int = 0) -> Command | None:
    """
    Decode one line produced by ``encode_command``

    Returns:
        The command, or None if the text is not a valid encoding
    """
    if not text:
        logger.debug("decode_command: Empty input")
        return None

    parts = text.strip().split("|")
    kind = parts[0]
    try:
        if kind == "DONE" and len(parts) == 1:
            return commands.done(line)

        if kind == "SET" and len(parts) == 3 and parts[1] in SET_PROPS:
            return commands.set_command(parts[1], parts[2], line)  # type: ignore[arg-type]

        if kind == "OP" and len(parts) == 3 and parts[1] in OP_KINDS:
            coord = {}
            for pair in filter(None, parts[2].split(",")):
                axis, value = pair.split("=", 1)
                if axis not in AXES:
                    raise ValueError(f"unknown axis {axis!r}")
                coord[axis] = float(value)
            return commands.op(parts[1], coord, line)  # type: ignore[arg-type]

        if kind == "TOOL" and len(parts) == 4 and parts[2] == "circle":
            params = [float(p) for p in parts[3].split(",")]
            return commands.tool(parts[1], commands.circle(params[0]), line)
    except ValueError as e:
        logger.error(f"decode_command: Failed to parse '{text}': {e}")
        return None

    logger.warning(f"decode_command: Invalid command format: '{text}'")
    return None
