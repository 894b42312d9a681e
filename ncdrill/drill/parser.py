"""
Drill Block Parser

Classifies one trimmed line of a drill program into the facets it carries.
Classification is pure: it reads no parser state. A line may carry more
than one facet (a tool selection sharing a line with a hit), so the parser
extracts all of them and the interpreter applies them in a fixed order.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum

from ncdrill.config import TRACE

logger = logging.getLogger(__name__)


class Directive(Enum):
    """Exact-match directive lines"""
    END = "end"
    METRIC = "metric"
    INCH = "inch"
    ABSOLUTE = "absolute"
    INCREMENTAL = "incremental"


@dataclass
class ToolDefinition:
    code: str
    diameter: str  # raw text, normalized by the tool handler


@dataclass
class CoordinateOp:
    """Coordinate facet of a block"""
    first: str  # e.g. "X0125Y-005"
    second: str | None = None  # slot end point after G85
    route_code: str | None = None  # digit of a leading G0x code

    @property
    def is_slot(self) -> bool:
        return self.second is not None


@dataclass
class UnitsDirective:
    """INCH/METRIC header token with optional ,TZ/,LZ suffix"""
    units: str  # "INCH" or "METRIC"
    kept_zeros: str | None = None  # "T" or "L": the zeros written out


@dataclass
class DrillBlock:
    """Facets extracted from one block; unset facets are None"""
    raw: str
    comment: str | None = None
    tool_definition: ToolDefinition | None = None
    tool_selection: str | None = None
    coordinate: CoordinateOp | None = None
    directive: Directive | None = None
    units: UnitsDirective | None = None

    @property
    def is_recognized(self) -> bool:
        return any(
            facet is not None
            for facet in (
                self.comment,
                self.tool_definition,
                self.tool_selection,
                self.coordinate,
                self.directive,
                self.units,
            )
        )


class DrillBlockParser:
    """Excellon block classifier"""

    # Regex patterns for parsing
    TOOL_DEF_PATTERN = re.compile(r"T0*(\d+)\S*C([\d.]+)")
    TOOL_SET_PATTERN = re.compile(r"T0*(\d+)(?!\S*C)")
    COORD_PATTERN = re.compile(
        r"((?:[XYIJA][+-]?[\d.]+){1,4})(?:G85((?:[XY][+-]?[\d.]+){1,2}))?"
    )
    ROUTE_PATTERN = re.compile(r"^G0([01235])")
    UNITS_PATTERN = re.compile(r"(INCH|METRIC)(?:,([TL])Z)?")

    DIRECTIVES = {
        "M00": Directive.END,
        "M30": Directive.END,
        "M71": Directive.METRIC,
        "M72": Directive.INCH,
        "G90": Directive.ABSOLUTE,
        "G91": Directive.INCREMENTAL,
    }

    def __init__(self):
        self.line_count = 0

    def parse_line(self, line: str) -> DrillBlock:
        """
        Classify a single drill program line

        Args:
            line: Raw line; surrounding whitespace is ignored

        Returns:
            DrillBlock with every facet the line carries
        """
        self.line_count += 1
        return self.classify(line)

    @classmethod
    def classify(cls, line: str) -> DrillBlock:
        block = DrillBlock(raw=line.strip())
        text = block.raw

        if not text:
            return block

        # Comments carry hints only
        if text.startswith(";"):
            block.comment = text
            return block

        # A definition line carries nothing else
        tool_def = cls.TOOL_DEF_PATTERN.search(text)
        if tool_def:
            block.tool_definition = ToolDefinition(code=tool_def.group(1), diameter=tool_def.group(2))
            return block

        tool_set = cls.TOOL_SET_PATTERN.search(text)
        if tool_set:
            block.tool_selection = tool_set.group(1)

        coord = cls.COORD_PATTERN.search(text)
        if coord:
            route = cls.ROUTE_PATTERN.match(text)
            block.coordinate = CoordinateOp(
                first=coord.group(1),
                second=coord.group(2),
                route_code=route.group(1) if route else None,
            )
        elif text in cls.DIRECTIVES:
            block.directive = cls.DIRECTIVES[text]
        else:
            units = cls.UNITS_PATTERN.search(text)
            if units:
                block.units = UnitsDirective(units=units.group(1), kept_zeros=units.group(2))

        if logger.isEnabledFor(TRACE):
            logger.trace(f"classified {text!r}: {block}")  # type: ignore[attr-defined]
        return block
