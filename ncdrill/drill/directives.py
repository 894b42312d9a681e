"""
Units and notation directives.

Handles the exact-match codes (M00/M30, M71/M72, G90/G91) and the
``INCH``/``METRIC`` header token with its optional zero suffix.
"""

import logging

from ncdrill import config

from . import commands
from .commands import Command, SetCommand
from .parser import Directive, UnitsDirective
from .state import FormatState, Notation, Units, ZeroSuppression

logger = logging.getLogger(__name__)

# The suffix names the zeros written out, so it maps to the opposite
# suppression: ,TZ keeps trailing zeros and suppresses leading ones.
KEPT_ZEROS_TO_SUPPRESSION = {
    "T": ZeroSuppression.LEADING,
    "L": ZeroSuppression.TRAILING,
}


def set_units(fmt: FormatState, units: Units, line: int = 0) -> SetCommand:
    """
    Record the unit system and default places if none are known yet

    Args:
        fmt: Format state to update
        units: Unit system named by the directive
        line: Source line number

    Returns:
        Set{units} command
    """
    default_places = config.METRIC_PLACES if units is Units.METRIC else config.INCH_PLACES
    fmt.propose("places", default_places)
    fmt.units = units
    return commands.set_command("units", units.value, line)


def apply_directive(fmt: FormatState, directive: Directive, line: int = 0) -> Command:
    """Apply an exact-match directive and return its command"""
    if directive is Directive.END:
        return commands.done(line)
    if directive is Directive.METRIC:
        return set_units(fmt, Units.METRIC, line)
    if directive is Directive.INCH:
        return set_units(fmt, Units.INCH, line)

    fmt.notation = Notation.ABSOLUTE if directive is Directive.ABSOLUTE else Notation.INCREMENTAL
    return commands.set_command("nota", fmt.notation.value, line)


def apply_units_directive(fmt: FormatState, directive: UnitsDirective, line: int = 0) -> SetCommand:
    """Apply an ``INCH``/``METRIC`` header token, e.g. ``INCH,LZ``"""
    units = Units.METRIC if directive.units == "METRIC" else Units.INCH
    command = set_units(fmt, units, line)

    if directive.kept_zeros in KEPT_ZEROS_TO_SUPPRESSION:
        fmt.propose("zero_suppression", KEPT_ZEROS_TO_SUPPRESSION[directive.kept_zeros])

    return command
