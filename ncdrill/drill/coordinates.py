"""
Coordinate decoding for drill programs

Turns fixed-point digit strings into numbers given the places format and
zero suppression, and guesses the suppression convention from raw digits
when a program never states it.
"""

import logging
import re

from ncdrill.protocol.types import Coordinate
from ncdrill.utils.errors import CoordinateDecodeError

from .state import FormatState, ZeroSuppression

logger = logging.getLogger(__name__)

AXIS_PATTERN = re.compile(r"([XYIJA])([+-]?[\d.]+)")
XY_VALUE_PATTERN = re.compile(r"[XY][+-]?([\d.]+)")


def normalize(token: str) -> float:
    """
    Read a plain numeric field (e.g. a tool diameter)

    Args:
        token: Number text, with or without a decimal point

    Returns:
        The value as a float

    Raises:
        CoordinateDecodeError: If the text is not a number
    """
    try:
        return float(token)
    except (TypeError, ValueError):
        raise CoordinateDecodeError(str(token)) from None


def decode(
    token: str,
    places: tuple[int, int] | None,
    zero: ZeroSuppression | None,
) -> float:
    """
    Decode one coordinate value

    Tokens with a decimal point are read as-is. Otherwise the digits are
    padded back to ``sum(places)`` on the side the zeros were suppressed
    from and split into integer and fractional parts.

    Args:
        token: Signed digit string, e.g. ``-0125`` or ``1.5``
        places: (integer digits, fractional digits)
        zero: Zero suppression convention

    Returns:
        Decoded value

    Raises:
        CoordinateDecodeError: If the token holds no valid number
    """
    text = token.strip()
    sign = ""
    if text[:1] in ("+", "-"):
        sign = "-" if text[0] == "-" else ""
        text = text[1:]

    if "." in text or places is None or zero in (None, ZeroSuppression.DECIMAL):
        return normalize(sign + text)

    if not text.isdigit():
        raise CoordinateDecodeError(token, "expected digits")

    int_digits, frac_digits = places
    total = int_digits + frac_digits

    if zero is ZeroSuppression.TRAILING:
        # Leading zeros are kept, so the integer part is anchored on the left
        digits = text.ljust(total, "0")
        integer, fraction = digits[:int_digits], digits[int_digits:]
    else:
        # Trailing zeros are kept, so the fraction is anchored on the right
        digits = text.rjust(total, "0")
        split = len(digits) - frac_digits
        integer, fraction = digits[:split], digits[split:]

    return normalize(f"{sign}{integer or '0'}.{fraction or '0'}")


def parse_coord(coord_string: str, fmt: FormatState) -> Coordinate:
    """
    Decode an axis group like ``X012Y-034`` into a coordinate dict

    Args:
        coord_string: Axis letters followed by digit strings
        fmt: Current format state

    Returns:
        Coordinate with one lower-case key per axis present
    """
    coord: Coordinate = {}
    for match in AXIS_PATTERN.finditer(coord_string):
        axis = match.group(1).lower()
        coord[axis] = decode(match.group(2), fmt.places, fmt.zero_suppression)  # type: ignore[literal-required]
    return coord


def detect_zero(block: str) -> ZeroSuppression | None:
    """
    Guess zero suppression from the digits of one block

    A multi-digit X/Y value starting with 0 proves leading zeros are kept
    (trailing suppression). One ending with 0 proves trailing zeros are kept
    (leading suppression). Values with a decimal point say nothing.

    Returns:
        The detected convention, or None if the block is inconclusive
    """
    values = [v for v in XY_VALUE_PATTERN.findall(block) if "." not in v and len(v) > 1]

    if any(v.startswith("0") for v in values):
        return ZeroSuppression.TRAILING
    if any(v.endswith("0") for v in values):
        return ZeroSuppression.LEADING
    return None
