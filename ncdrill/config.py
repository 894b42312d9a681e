"""
Central configuration for ncdrill tunables and shared constants.
"""

import logging
import os

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")
# Add Logger.trace if missing
if not hasattr(logging.Logger, "trace"):

    def _trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    logging.Logger.trace = _trace  # type: ignore[attr-defined]
    logging.TRACE = TRACE  # type: ignore[attr-defined]

TRACE_ENABLED = str(os.getenv("NCDRILL_TRACE", "0")).lower() in ("1", "true", "yes", "on")

logger = logging.getLogger(__name__)

LOG_LEVEL_DEFAULT: str = os.getenv("NCDRILL_LOG_LEVEL", "INFO").upper()


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={raw!r}; using {default}")
        return default
    return max(minimum, value)


# Coordinate blocks held while zero suppression is unknown
STASH_LIMIT: int = _env_int("NCDRILL_STASH_LIMIT", 1000)

# Total held entries, command-only blocks included
STASH_ENTRY_LIMIT: int = _env_int("NCDRILL_STASH_ENTRY_LIMIT", 10 * STASH_LIMIT)

# Places defaults (integer digits, fractional digits)
METRIC_PLACES: tuple[int, int] = (3, 3)
INCH_PLACES: tuple[int, int] = (2, 4)
FALLBACK_PLACES: tuple[int, int] = (2, 4)

# Summary sanity thresholds (mm)
EXTENT_MAX_MM: float = float(os.getenv("NCDRILL_EXTENT_MAX_MM", "1000"))
EXTENT_MIN_MM: float = float(os.getenv("NCDRILL_EXTENT_MIN_MM", "0.5"))
MM_PER_INCH: float = 25.4
