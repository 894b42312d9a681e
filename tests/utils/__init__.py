"""
Test utilities package.

Provides helpers for inspecting emitted drill command streams.
"""

from ncdrill.drill.commands import Command, OpCommand, SetCommand
from ncdrill.protocol import wire


def encoded(commands: list[Command]) -> list[str]:
    """Wire-encode a command list for compact assertions."""
    return [wire.encode_command(c) for c in commands]


def ops(commands: list[Command]) -> list[OpCommand]:
    return [c for c in commands if isinstance(c, OpCommand)]


def sets(commands: list[Command], prop: str) -> list[str]:
    return [c.value for c in commands if isinstance(c, SetCommand) and c.prop == prop]


__all__ = [
    "encoded",
    "ops",
    "sets",
]
