"""
Type definitions for the ncdrill command stream.

Defines literals and TypedDicts shared by the parser and the wire helpers.
"""

from typing import Literal, TypedDict

# Set command properties
SetProp = Literal["units", "nota", "backupNota", "backupUnits", "tool", "mode"]

# Operation kinds: flash a hole, move without cutting, interpolate (route)
OpKind = Literal["flash", "move", "int"]

# Interpolation modes carried by Set{mode}
InterpMode = Literal["i", "cw", "ccw"]

# Unit values carried by Set{units}
UnitsValue = Literal["mm", "in"]

# Axis keys that may appear in a decoded coordinate
AxisKey = Literal["x", "y", "i", "j", "a"]


class ToolShape(TypedDict):
    """Tool definition record."""
    shape: Literal["circle"]
    params: list[float]  # [diameter]
    holes: list[float]


class Coordinate(TypedDict, total=False):
    """Decoded coordinate; only axes present in the block are set."""
    x: float
    y: float
    i: float
    j: float
    a: float  # arc radius


class ToolUsage(TypedDict):
    """Per-tool statistics in a program summary."""
    code: str
    diameter: float | None
    hits: int
    slots: int


class ProgramSummary(TypedDict):
    """Aggregate statistics for a parsed program."""
    units: UnitsValue | None
    hits: int
    slots: int
    routes: int
    tools: list[ToolUsage]
    bounds: tuple[float, float, float, float] | None  # min_x, min_y, max_x, max_y
    warnings: list[str]
