"""
Program summary statistics

Digests a command stream into hit/slot/route counts, per-tool usage and the
bounding box of all visited points. Extents far outside what a PCB can be
usually mean the units, places or zero suppression were guessed wrong, so
those produce warnings.
"""

import logging
from collections.abc import Iterable

import numpy as np

from ncdrill import config
from ncdrill.protocol.types import ProgramSummary, ToolUsage

from .commands import Command, OpCommand, SetCommand, ToolCommand

logger = logging.getLogger(__name__)


def _track(position: list[float], coord: dict, incremental: bool) -> None:
    for index, axis in enumerate(("x", "y")):
        if axis in coord:
            position[index] = position[index] + coord[axis] if incremental else coord[axis]


def summarize(commands: Iterable[Command]) -> ProgramSummary:
    """
    Build summary statistics for a parsed program

    Args:
        commands: Commands in emission order

    Returns:
        ProgramSummary with counts, tool usage, bounds and sanity warnings
    """
    units = None
    incremental = False
    current_tool = None
    tools: dict[str, ToolUsage] = {}
    hits = slots = routes = 0
    position = [0.0, 0.0]
    points: list[tuple[float, float]] = []
    last_move_line = None

    def usage(code: str) -> ToolUsage:
        return tools.setdefault(code, {"code": code, "diameter": None, "hits": 0, "slots": 0})

    for command in commands:
        if isinstance(command, ToolCommand):
            usage(command.code)["diameter"] = command.tool["params"][0]
        elif isinstance(command, SetCommand):
            if command.prop == "units" or (command.prop == "backupUnits" and units is None):
                units = command.value
            elif command.prop == "nota":
                incremental = command.value == "I"
            elif command.prop == "tool":
                current_tool = command.value
        elif isinstance(command, OpCommand):
            _track(position, command.coord, incremental)
            points.append((position[0], position[1]))

            if command.op == "flash":
                hits += 1
                if current_tool is not None:
                    usage(current_tool)["hits"] += 1
            elif command.op == "move":
                last_move_line = command.line
            elif command.line == last_move_line:
                # Slot: move and interpolation on the same block
                slots += 1
                if current_tool is not None:
                    usage(current_tool)["slots"] += 1
            else:
                routes += 1

    bounds = None
    warnings: list[str] = []
    if points:
        xy = np.asarray(points, dtype=float)
        lo = xy.min(axis=0)
        hi = xy.max(axis=0)
        bounds = (float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1]))

        scale = config.MM_PER_INCH if units == "in" else 1.0
        width, height = (hi - lo) * scale
        if width > config.EXTENT_MAX_MM or height > config.EXTENT_MAX_MM:
            warnings.append(
                f"very large extents ({width:.1f} x {height:.1f} mm). Check units/format/zero suppression."
            )
        if len(points) > 1 and width < config.EXTENT_MIN_MM and height < config.EXTENT_MIN_MM:
            warnings.append(
                f"very small extents ({width:.6f} x {height:.6f} mm). Check units/format/zero suppression."
            )

    for message in warnings:
        logger.warning(message)

    return {
        "units": units,
        "hits": hits,
        "slots": slots,
        "routes": routes,
        "tools": sorted(tools.values(), key=lambda t: int(t["code"])),
        "bounds": bounds,
        "warnings": warnings,
    }
