"""
Drill Command Values

Structured commands emitted by the drill parser. Every command records the
1-based line of the block that produced it.
"""

from dataclasses import dataclass, field
from typing import Union

from ncdrill.protocol.types import Coordinate, OpKind, SetProp, ToolShape


@dataclass
class DrillCommand:
    """Base class for emitted drill commands"""

    line: int = field(default=0, kw_only=True)

    type = "command"

    def to_dict(self) -> dict:
        """
        Convert to a plain dictionary

        Returns:
            Dictionary with a ``type`` key and the command fields
        """
        return {"type": self.type, "line": self.line}


@dataclass
class SetCommand(DrillCommand):
    """Set a modal property (units, notation, tool, interpolation mode)"""

    prop: SetProp
    value: str

    type = "set"

    def to_dict(self) -> dict:
        return {**super().to_dict(), "prop": self.prop, "value": self.value}


@dataclass
class OpCommand(DrillCommand):
    """Drawing operation at a coordinate"""

    op: OpKind
    coord: Coordinate

    type = "op"

    def to_dict(self) -> dict:
        return {**super().to_dict(), "op": self.op, "coord": dict(self.coord)}


@dataclass
class ToolCommand(DrillCommand):
    """Tool definition"""

    code: str
    tool: ToolShape

    type = "tool"

    def to_dict(self) -> dict:
        return {**super().to_dict(), "code": self.code, "tool": dict(self.tool)}


@dataclass
class DoneCommand(DrillCommand):
    """End of program"""

    type = "done"


Command = Union[SetCommand, OpCommand, ToolCommand, DoneCommand]


def set_command(prop: SetProp, value: str, line: int = 0) -> SetCommand:
    return SetCommand(prop, value, line=line)


def op(kind: OpKind, coord: Coordinate, line: int = 0) -> OpCommand:
    return OpCommand(kind, coord, line=line)


def tool(code: str, shape: ToolShape, line: int = 0) -> ToolCommand:
    return ToolCommand(code, shape, line=line)


def done(line: int = 0) -> DoneCommand:
    return DoneCommand(line=line)


def circle(diameter: float) -> ToolShape:
    """Build a circular tool shape record"""
    return {"shape": "circle", "params": [diameter], "holes": []}
