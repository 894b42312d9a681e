"""
Drill Format State

Tracks the number format and modal state shared by every block handler:
- Units (metric/inch)
- Places (integer and fractional digit counts)
- Zero suppression convention
- Notation (absolute/incremental) and the backup values taken from hints
- Drill mode (drill, move, linear, cw/ccw arc)

``places`` and ``zero_suppression`` are first-write-wins: once set by any
source, later proposals are ignored.
"""

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class Units(Enum):
    METRIC = "mm"
    INCH = "in"


class Notation(Enum):
    ABSOLUTE = "A"
    INCREMENTAL = "I"


class ZeroSuppression(Enum):
    """Which zeros are omitted from a digit string without a decimal point."""
    LEADING = "L"
    TRAILING = "T"
    DECIMAL = "D"  # explicit decimal point, nothing to pad

    @property
    def label(self) -> str:
        return {"L": "leading", "T": "trailing", "D": "decimal"}[self.value]


class DrillMode(Enum):
    """Route modes, keyed by the digit of their G0x code."""
    MOVE = "0"
    LINEAR = "1"
    CW_ARC = "2"
    CCW_ARC = "3"
    DRILL = "5"

    @classmethod
    def from_route_code(cls, digit: str) -> "DrillMode":
        return cls(digit)


@dataclass
class FormatState:
    """Number format and notation for the program being parsed"""

    units: Units | None = None
    places: tuple[int, int] | None = None
    zero_suppression: ZeroSuppression | None = None
    notation: Notation = Notation.ABSOLUTE
    backup_notation: Notation | None = None
    backup_units: Units | None = None

    def propose(self, name: str, value) -> bool:
        """
        Set a format field unless it already holds a value

        Args:
            name: Field name (``places``, ``zero_suppression``, ``backup_notation``, ``backup_units``)
            value: Proposed value

        Returns:
            True if the value was taken, False if the field was already set
        """
        if getattr(self, name) is not None:
            logger.debug(f"Ignoring {name}={value!r}; already {getattr(self, name)!r}")
            return False
        setattr(self, name, value)
        logger.debug(f"Format {name} set to {value!r}")
        return True

    def merge(self, proposals: dict) -> list[str]:
        """
        Apply a map of proposals with first-write-wins

        Returns:
            Names of the fields that were taken
        """
        return [name for name, value in proposals.items() if self.propose(name, value)]

    @property
    def is_resolved(self) -> bool:
        """True once both places and zero suppression are known"""
        return self.places is not None and self.zero_suppression is not None

    def get_status(self) -> dict:
        """Get current state as dictionary for status reporting"""
        return {
            "units": self.units.value if self.units else None,
            "places": list(self.places) if self.places else None,
            "zero_suppression": self.zero_suppression.label if self.zero_suppression else None,
            "notation": self.notation.value,
            "backup_notation": self.backup_notation.value if self.backup_notation else None,
            "backup_units": self.backup_units.value if self.backup_units else None,
        }
