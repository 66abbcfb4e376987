"""Tests for units, pluralisation and phrase renderers."""

import pytest

from vaguetime.units import THRESHOLDS, MixedUnits, Unit, Units, months, pluralise, years
from vaguetime.util import DAY, HOUR, MINUTE, MONTH, WEEK, YEAR


def test_constants_in_milliseconds() -> None:
    assert MINUTE == 60 * 1000
    assert HOUR == 60 * MINUTE
    assert DAY == 24 * HOUR
    assert WEEK == 7 * DAY
    assert YEAR * 4 == 1461 * DAY
    assert MONTH * 12 == YEAR


@pytest.mark.parametrize(
    ("amount", "expected"),
    [(0, "month"), (1, "month"), (2, "months"), (11, "months")],
)
def test_pluralise_only_above_one(amount: int, expected: str) -> None:
    assert pluralise(amount, "month") == expected


def test_unit_count_floors() -> None:
    hour = Unit(name="hour", ms=HOUR)
    assert hour.count(HOUR - 1) == 0
    assert hour.count(2 * HOUR + HOUR // 2) == 2


def test_unit_requires_positive_duration() -> None:
    with pytest.raises(ValueError, match="positive duration"):
        Unit(name="never", ms=0)


def test_units_renderer() -> None:
    assert Units(years).render(YEAR) == "1 year ago"
    assert Units(months).render(5 * MONTH + 1) == "5 months ago"


def test_mixed_units_drops_minor_on_exact_boundary() -> None:
    renderer = MixedUnits(years, months)
    assert renderer.render(2 * YEAR) == "2 years ago"
    assert renderer.render(2 * YEAR + 3 * MONTH) == "2 years and 3 months ago"
    assert renderer.render(YEAR + 1) == "1 year and 0 month ago"


def test_thresholds_descend() -> None:
    sizes = [unit.ms for unit, _ in THRESHOLDS]
    assert sizes == sorted(sizes, reverse=True)
    assert [unit.name for unit, _ in THRESHOLDS] == [
        "year",
        "month",
        "week",
        "day",
        "hour",
        "minute",
    ]


def test_unit_prints_as_dataclass_repr() -> None:
    assert str(years) == repr(years) == "Unit(name='year', ms=31557600000)"
