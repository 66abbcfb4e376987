import logging
import math
import numbers
from datetime import datetime
from decimal import Decimal
from typing import Any, Literal

from dateutil.parser import isoparse

from vaguetime.clock import Clock, SystemClock
from vaguetime.units import JUST_NOW, THRESHOLDS
from vaguetime.util import SECOND

_LOG = logging.getLogger(__name__)


class VagueTimeFormatter:
    """Turns precise timestamps into vague times such as "3 weeks ago".

    The clock is only consulted when a call omits the reference timestamp.
    """

    def __init__(self, clock: Clock | None = None):
        self.clock: Clock = clock if clock is not None else SystemClock()

    def format(self, timestamp: Any, reference_timestamp: Any = None) -> str:
        """Return a vague time for `timestamp` relative to `reference_timestamp`.

        Args:
            timestamp: When the event happened, in seconds since the epoch
                (or a timezone-aware datetime / ISO-8601 string with offset)
            reference_timestamp: The instant treated as "now", same forms as
                `timestamp`. Defaults to the formatter's clock.

        Returns:
            A phrase such as "just now", "2 minutes ago" or
            "1 year and 3 months ago"

        Raises:
            TypeError: If either timestamp is of an unsupported type or lacks
                timezone information
            ValueError: If a string timestamp cannot be parsed
        """
        then = _coerce_timestamp(timestamp, "timestamp")
        if reference_timestamp is None:
            now = self.clock.now_ms()
        else:
            now = (
                _coerce_timestamp(reference_timestamp, "reference_timestamp") * SECOND
            )

        # NaN and infinities compare false against every threshold
        if not (math.isfinite(then) and math.isfinite(now)):
            _LOG.debug("non-finite timestamp %r or reference %r", then, now)
            return JUST_NOW

        return self.describe(now - then * SECOND)

    def describe(self, difference: int) -> str:
        """Return a vague time for a difference given in milliseconds.

        Negative differences (future timestamps) fall through every threshold
        and read as "just now".
        """
        for unit, renderer in THRESHOLDS:
            if difference >= unit.ms:
                _LOG.debug("difference %dms rendered in %ss", difference, unit.name)
                return renderer.render(difference)

        _LOG.debug("difference %dms is under a minute", difference)
        return JUST_NOW

    def __call__(self, timestamp: Any, reference_timestamp: Any = None) -> str:
        return self.format(timestamp, reference_timestamp)

    def __repr__(self) -> str:
        return f"VagueTimeFormatter(clock={self.clock!r})"


def _coerce_timestamp(
    value: Any, name: Literal["timestamp", "reference_timestamp"]
) -> int | float:
    """Convert a timestamp argument to integer seconds since the epoch.

    Accepts:
    - int: Passed through as-is (Unix seconds)
    - float, Decimal, Fraction: Floored to whole seconds; NaN and
      infinities are returned unchanged as floats
    - datetime: Must be timezone-aware, converted to timestamp
    - str: ISO-8601 with a UTC offset, e.g. "2025-01-06T09:00:00+00:00"

    Raises:
        TypeError: If value is an unsupported type or has no timezone
        ValueError: If a string is not valid ISO-8601
    """
    if isinstance(value, bool):
        raise TypeError(
            f"{name} must be a number of seconds, not a bool.\nGot: {value!r}"
        )
    if isinstance(value, int):
        return value
    if isinstance(value, (numbers.Real, Decimal)):
        if not math.isfinite(value):
            return float(value)
        return math.floor(value)
    if isinstance(value, str):
        try:
            parsed = isoparse(value)
        except ValueError as exc:
            raise ValueError(
                f"{name} string is not valid ISO-8601: {value!r}\n"
                f"Example: '2025-01-06T09:00:00+00:00'"
            ) from exc
        return _datetime_seconds(parsed, name)
    if isinstance(value, datetime):
        return _datetime_seconds(value, name)
    raise TypeError(
        f"{name} must be a real number, datetime, or str.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  get(1735689600)  # int (Unix seconds)\n"
        f"  get(datetime(2025,1,1,tzinfo=timezone.utc))  # timezone-aware datetime\n"
        f"  get('2025-01-01T00:00:00Z')  # ISO-8601 with offset"
    )


def _datetime_seconds(
    value: datetime, name: Literal["timestamp", "reference_timestamp"]
) -> int:
    if value.tzinfo is None:
        raise TypeError(
            f"{name} must be timezone-aware.\n"
            f"Got naive datetime: {value!r}\n"
            f"Hint: Add timezone info:\n"
            f"  from zoneinfo import ZoneInfo\n"
            f"  dt = datetime(..., tzinfo=ZoneInfo('UTC'))  "
            f"# or 'US/Pacific', etc.\n"
            f"  # Or append an offset to strings: '2025-01-01T00:00:00Z'"
        )
    return math.floor(value.timestamp())


_default = VagueTimeFormatter()


def get(timestamp: Any, reference_timestamp: Any = None) -> str:
    """Return a vague time such as 'just now' or '3 weeks ago'.

    Uses the system clock when `reference_timestamp` is omitted.

    Example:
        >>> get(1700000000, 1700000120)
        '2 minutes ago'
        >>> get(1700000000 - 34187400, 1700000000)
        '1 year and 1 month ago'
    """
    return _default.format(timestamp, reference_timestamp)
