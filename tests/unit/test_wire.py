import json

import pytest

from ncdrill.drill import commands
from ncdrill.drill.commands import DoneCommand, OpCommand, SetCommand, ToolCommand
from ncdrill.protocol import wire


def test_encode_set():
    assert wire.encode_command(commands.set_command("units", "in")) == "SET|units|in"
    assert wire.encode_command(commands.set_command("backupNota", "A")) == "SET|backupNota|A"


def test_encode_op_orders_axes():
    cmd = commands.op("int", {"j": -0.5, "x": 1.0, "i": 0.25, "y": -2.5})
    assert wire.encode_command(cmd) == "OP|int|x=1,y=-2.5,i=0.25,j=-0.5"


def test_encode_tool_and_done():
    assert wire.encode_command(commands.tool("12", commands.circle(0.8))) == "TOOL|12|circle|0.8"
    assert wire.encode_command(commands.done()) == "DONE"


def test_format_number_normalizes_negative_zero():
    assert wire.format_number(-0.0) == "0"
    assert wire.format_number(0.1 + 0.2) == "0.3"


def test_encode_program():
    program = [commands.set_command("units", "mm"), commands.done()]
    assert wire.encode_program(program) == "SET|units|mm\nDONE"


def test_encode_json():
    cmd = commands.op("flash", {"x": 1.5, "y": 2.0}, line=9)
    assert json.loads(wire.encode_json(cmd)) == {
        "type": "op",
        "line": 9,
        "op": "flash",
        "coord": {"x": 1.5, "y": 2.0},
    }


@pytest.mark.parametrize(
    "text,expected_type",
    [
        ("SET|tool|3", SetCommand),
        ("OP|move|x=1,y=-2", OpCommand),
        ("TOOL|1|circle|0.4", ToolCommand),
        ("DONE", DoneCommand),
    ],
)
def test_decode_success(text, expected_type):
    cmd = wire.decode_command(text, line=4)
    assert isinstance(cmd, expected_type)
    assert cmd.line == 4
    assert wire.encode_command(cmd) == text


@pytest.mark.parametrize(
    "text",
    [
        "",
        None,
        "SET|color|red",
        "SET|units",
        "OP|drill|x=1",
        "OP|flash|z=1",
        "OP|flash|x=abc",
        "TOOL|1|square|0.4",
        "TOOL|1|circle|",
        "DONE|now",
        "WHAT",
    ],
)
def test_decode_fail(text):
    assert wire.decode_command(text) is None


def test_encode_rejects_unknown_objects():
    with pytest.raises(TypeError):
        wire.encode_command(object())
