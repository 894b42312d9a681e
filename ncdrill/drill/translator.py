"""
Coordinate/mode translation.

Turns a coordinate facet into Op commands using a resolved format and the
current drill mode. Slots (``G85``) bypass mode dispatch entirely.
"""

import logging

from ncdrill.protocol.types import InterpMode
from ncdrill.utils.errors import CoordinateDecodeError

from . import commands
from .commands import Command
from .coordinates import parse_coord
from .parser import CoordinateOp
from .state import DrillMode, FormatState

logger = logging.getLogger(__name__)

# Interpolation mode emitted before an Op{int} for each routing mode
INTERP_MODES: dict[DrillMode, InterpMode] = {
    DrillMode.LINEAR: "i",
    DrillMode.CW_ARC: "cw",
    DrillMode.CCW_ARC: "ccw",
}


def translate(
    coordinate: CoordinateOp,
    fmt: FormatState,
    drill_mode: DrillMode | None,
    line: int = 0,
) -> tuple[list[Command], DrillMode | None]:
    """
    Translate one coordinate block

    Args:
        coordinate: Coordinate facet of the block
        fmt: Resolved format state
        drill_mode: Drill mode carried over from the previous block
        line: Source line number

    Returns:
        (commands, drill mode for the next block)

    Raises:
        CoordinateDecodeError: If a value cannot be decoded; ``line`` is set
            to the block's source line
    """
    try:
        coord = parse_coord(coordinate.first, fmt)
        end = parse_coord(coordinate.second, fmt) if coordinate.is_slot else None
    except CoordinateDecodeError as e:
        e.line = line
        raise

    if end is not None:
        return [
            commands.op("move", coord, line),
            commands.set_command("mode", "i", line),
            commands.op("int", end, line),
        ], drill_mode

    if coordinate.route_code is not None:
        drill_mode = DrillMode.from_route_code(coordinate.route_code)

    if drill_mode is DrillMode.DRILL:
        return [commands.op("flash", coord, line)], drill_mode
    if drill_mode is DrillMode.MOVE:
        return [commands.op("move", coord, line)], drill_mode
    if drill_mode in INTERP_MODES:
        return [
            commands.set_command("mode", INTERP_MODES[drill_mode], line),
            commands.op("int", coord, line),
        ], drill_mode

    logger.debug(f"Line {line}: no drill mode for {coordinate.first}; skipped")
    return [], drill_mode
