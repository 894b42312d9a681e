import pytest

from ncdrill import parse_drill
from ncdrill.drill import summarize


def test_counts_and_tool_usage(kicad_program):
    stats = summarize(parse_drill(kicad_program))
    assert stats["units"] == "mm"
    assert stats["hits"] == 2
    assert stats["slots"] == 1
    assert stats["routes"] == 0
    assert stats["tools"] == [
        {"code": "1", "diameter": 0.4, "hits": 2, "slots": 0},
        {"code": "2", "diameter": 1.0, "hits": 0, "slots": 1},
    ]
    assert stats["bounds"] == pytest.approx((5.0, -20.32, 12.7, -5.0))
    assert stats["warnings"] == []


def test_routes_are_not_slots(altium_program):
    stats = summarize(parse_drill(altium_program))
    assert stats["units"] == "in"
    assert stats["hits"] == 2
    assert stats["slots"] == 0
    assert stats["routes"] == 1
    assert stats["bounds"] == pytest.approx((1.15, 2.55, 3.0, 3.0))


def test_incremental_positions_accumulate():
    stats = summarize(parse_drill(["METRIC", "G91", "X1.0Y1.0", "X1.0", "Y2.0"]))
    assert stats["bounds"] == pytest.approx((1.0, 1.0, 2.0, 3.0))


def test_implausible_extents_warn():
    # A wrong places guess turns a 2 inch board into a 200 inch one
    stats = summarize(parse_drill(["INCH", "X0.0Y0.0", "X200.0Y1.0"]))
    assert len(stats["warnings"]) == 1
    assert stats["warnings"][0].startswith("very large extents")

    stats = summarize(parse_drill(["METRIC", "X0.001Y0.001", "X0.002Y0.002"]))
    assert stats["warnings"][0].startswith("very small extents")


def test_empty_program():
    stats = summarize([])
    assert stats["hits"] == 0
    assert stats["bounds"] is None
    assert stats["tools"] == []
