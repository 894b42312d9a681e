from ncdrill.drill.hints import extract_hints
from ncdrill.drill.state import Notation, Units, ZeroSuppression


def _props(result):
    return [(c.prop, c.value) for c in result.commands]


def test_kicad_decimal_hint_without_places():
    result = extract_hints(";FORMAT={-:-/ absolute / metric / decimal}", line=3)
    assert "places" not in result.proposals
    assert result.proposals["zero_suppression"] is ZeroSuppression.DECIMAL
    assert result.proposals["backup_notation"] is Notation.ABSOLUTE
    assert result.proposals["backup_units"] is Units.METRIC
    assert _props(result) == [("backupNota", "A"), ("backupUnits", "mm")]
    assert all(c.line == 3 for c in result.commands)


def test_kicad_suppression_words():
    trailing = extract_hints(";FORMAT={2:4/ absolute / inch / suppress trailing zeros}")
    assert trailing.proposals["places"] == (2, 4)
    assert trailing.proposals["zero_suppression"] is ZeroSuppression.TRAILING
    assert _props(trailing) == [("backupNota", "A"), ("backupUnits", "in")]

    leading = extract_hints(";FORMAT={3:3/ absolute / metric / suppress leading zeros}")
    assert leading.proposals["zero_suppression"] is ZeroSuppression.LEADING

    keep = extract_hints(";FORMAT={3:3/ absolute / metric / keep zeros}")
    assert keep.proposals["zero_suppression"] is ZeroSuppression.LEADING


def test_kicad_incremental_hint():
    result = extract_hints(";FORMAT={3:3/ incremental / metric / keep zeros}")
    assert _props(result)[0] == ("backupNota", "I")


def test_kicad_hint_without_suppression_word_is_decimal():
    result = extract_hints(";FORMAT={3:3/ absolute / metric / }")
    assert result.proposals["places"] == (3, 3)
    assert result.proposals["zero_suppression"] is ZeroSuppression.DECIMAL


def test_file_format_hint_sets_places_only():
    result = extract_hints(";FILE_FORMAT=2:4")
    assert result.proposals == {"places": (2, 4)}
    assert result.commands == []


def test_unrelated_comment_yields_nothing():
    result = extract_hints(";Layer_Color=9474304")
    assert result.proposals == {}
    assert result.commands == []
