"""
Stash/replay resolution of unknown zero suppression.

Coordinate blocks cannot be decoded until the zero suppression convention is
known, and a program may only reveal it after several such blocks (through a
late header, a detectable coordinate, or not at all). Until then blocks are
held in a bounded FIFO stash. Commands from other blocks that arrive in the
meantime are stashed too, so the output keeps arrival order. Once the
convention resolves, the stash is drained in order and discarded for good.
"""

import logging
from collections import deque
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field

from ncdrill import config

from .commands import Command
from .coordinates import detect_zero
from .parser import CoordinateOp
from .state import FormatState, ZeroSuppression

logger = logging.getLogger(__name__)

ASSUME_TRAILING = "zero suppression missing and not detectable; assuming trailing suppression"
ASSUME_PLACES = "places format missing; assuming [{}, {}]"
DETECTED_ZERO = "zero suppression missing; detected {} suppression"


@dataclass
class StashEntry:
    """One held block: its commands, then its coordinate facet if any"""
    line: int
    coordinate: CoordinateOp | None = None
    commands: list[Command] = field(default_factory=list)


class Stash:
    """
    Bounded FIFO of held blocks

    Args:
        capacity: Coordinate blocks held before the stash is full
        max_entries: Total entries, command-only blocks included, before the
            stash is full (never below ``capacity``)
    """

    def __init__(self, capacity: int, max_entries: int | None = None):
        self.capacity = capacity
        self.max_entries = max(max_entries or config.STASH_ENTRY_LIMIT, capacity)
        self._entries: deque[StashEntry] = deque()
        self.coordinate_count = 0

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def is_full(self) -> bool:
        return self.coordinate_count >= self.capacity or len(self._entries) >= self.max_entries

    def push(self, entry: StashEntry) -> None:
        self._entries.append(entry)
        if entry.coordinate is not None:
            self.coordinate_count += 1

    def drain(self) -> Iterator[StashEntry]:
        """Yield held entries oldest first, emptying the stash"""
        while self._entries:
            entry = self._entries.popleft()
            if entry.coordinate is not None:
                self.coordinate_count -= 1
            yield entry


class StashResolver:
    """
    Gate between block handlers and the coordinate translator

    Args:
        fmt: Shared format state
        emit: Sink for commands that are ready
        translate: Translates and emits one coordinate facet
        warn: Diagnostic sink; receives (message, line)
        capacity: Coordinate blocks held before trailing suppression is assumed
        max_entries: Total held entries before trailing suppression is assumed
    """

    def __init__(
        self,
        fmt: FormatState,
        emit: Callable[[Command], None],
        translate: Callable[[CoordinateOp, int], None],
        warn: Callable[[str, int], None],
        capacity: int | None = None,
        max_entries: int | None = None,
    ):
        self.format = fmt
        self._emit = emit
        self._translate = translate
        self._warn = warn
        self.capacity = capacity if capacity is not None else config.STASH_LIMIT
        self.max_entries = max_entries
        self.stash: Stash | None = None

    @property
    def pending(self) -> int:
        """Number of held entries"""
        return len(self.stash) if self.stash is not None else 0

    def submit(self, coordinate: CoordinateOp, line: int, leading: Sequence[Command] = ()) -> None:
        """
        Handle a coordinate block

        Args:
            coordinate: Coordinate facet of the block
            line: Source line number
            leading: Commands from the same block that precede the coordinate
                (a tool selection)
        """
        fmt = self.format

        if fmt.zero_suppression is None:
            if self.stash is not None and self.stash.is_full:
                self._assume_trailing(line)
            else:
                detected = detect_zero(coordinate.first + (coordinate.second or ""))
                if detected is not None:
                    fmt.propose("zero_suppression", detected)
                    self._warn(DETECTED_ZERO.format(detected.label), line)
                else:
                    self._hold(StashEntry(line, coordinate, list(leading)))
                    if not self.stash.is_full:
                        return
                    self._assume_trailing(line)
                    self.resolve_and_drain(line)
                    return

        self.resolve_and_drain(line)
        self._ensure_places(line)
        for command in leading:
            self._emit(command)
        self._translate(coordinate, line)

    def release(self, commands: Sequence[Command], line: int) -> None:
        """
        Emit commands from a non-coordinate block, or hold them behind the
        stash while zero suppression is still unknown
        """
        if self.stash is not None:
            if self.format.zero_suppression is None:
                if commands:
                    self._hold(StashEntry(line, commands=list(commands)))
                    if self.stash.is_full:
                        self._assume_trailing(line)
                        self.resolve_and_drain(line)
                return
            self.resolve_and_drain(line)

        for command in commands:
            self._emit(command)

    def flush(self, line: int = 0) -> None:
        """Force resolution at end of input and drain anything held"""
        if self.format.zero_suppression is None:
            self._assume_trailing(line)
        self.resolve_and_drain(line)

    def resolve_and_drain(self, line: int = 0) -> None:
        """
        Replay every held entry in arrival order and discard the stash

        Zero suppression must already be resolved. Places default to the
        fallback format if a held coordinate needs them. Entries leave the
        stash one at a time, so if decoding one raises, the entries after it
        stay held for the next drain.
        """
        stash = self.stash
        if stash is None:
            return

        if stash.coordinate_count:
            self._ensure_places(line)

        logger.debug(f"Draining {len(stash)} held block(s) at line {line}")
        for entry in stash.drain():
            for command in entry.commands:
                self._emit(command)
            if entry.coordinate is not None:
                self._translate(entry.coordinate, entry.line)
        self.stash = None

    def _hold(self, entry: StashEntry) -> None:
        if self.stash is None:
            self.stash = Stash(self.capacity, self.max_entries)
            logger.debug(f"Zero suppression unknown at line {entry.line}; holding blocks")
        self.stash.push(entry)

    def _assume_trailing(self, line: int) -> None:
        self.format.propose("zero_suppression", ZeroSuppression.TRAILING)
        self._warn(ASSUME_TRAILING, line)

    def _ensure_places(self, line: int) -> None:
        if self.format.places is None:
            self.format.propose("places", config.FALLBACK_PLACES)
            self._warn(ASSUME_PLACES.format(*config.FALLBACK_PLACES), line)
