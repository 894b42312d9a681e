"""
Format hints from CAD-generated comments.

KiCad writes the whole number format into a ``;FORMAT={...}`` comment;
Altium and EasyEDA write only the places as ``;FILE_FORMAT=n:m``.
"""

import logging
import re
from dataclasses import dataclass, field

from . import commands
from .commands import SetCommand
from .state import Notation, Units, ZeroSuppression

logger = logging.getLogger(__name__)

KICAD_HINT = re.compile(
    r";FORMAT=\{(.):(.)/ (absolute|.+)? / (metric|inch) /(?:.+(trailing|leading|decimal|keep))?"
)
ALTIUM_HINT = re.compile(r";FILE_FORMAT=(\d):(\d)")


@dataclass
class HintResult:
    proposals: dict = field(default_factory=dict)
    commands: list[SetCommand] = field(default_factory=list)


def extract_hints(comment: str, line: int = 0) -> HintResult:
    """
    Read format hints from a comment block

    Args:
        comment: Block text starting with ``;``
        line: Source line number for emitted commands

    Returns:
        Format proposals (``places``, ``zero_suppression``, backups) and the
        backup Set commands to emit
    """
    result = HintResult()

    kicad = KICAD_HINT.search(comment)
    if kicad:
        leading, trailing, absolute, unit_set, suppression = kicad.groups()

        if leading.isdigit() and trailing.isdigit():
            result.proposals["places"] = (int(leading), int(trailing))

        notation = Notation.ABSOLUTE if absolute == "absolute" else Notation.INCREMENTAL
        units = Units.METRIC if unit_set == "metric" else Units.INCH
        result.proposals["backup_notation"] = notation
        result.proposals["backup_units"] = units
        result.commands.append(commands.set_command("backupNota", notation.value, line))
        result.commands.append(commands.set_command("backupUnits", units.value, line))

        if suppression in ("leading", "keep"):
            result.proposals["zero_suppression"] = ZeroSuppression.LEADING
        elif suppression == "trailing":
            result.proposals["zero_suppression"] = ZeroSuppression.TRAILING
        else:
            result.proposals["zero_suppression"] = ZeroSuppression.DECIMAL

        logger.debug(f"KiCad format hint: {result.proposals}")
        return result

    altium = ALTIUM_HINT.search(comment)
    if altium:
        result.proposals["places"] = (int(altium.group(1)), int(altium.group(2)))
        logger.debug(f"FILE_FORMAT hint: places={result.proposals['places']}")

    return result
