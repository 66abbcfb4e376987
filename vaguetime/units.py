from abc import ABC, abstractmethod
from dataclasses import dataclass

from typing_extensions import override

from vaguetime.util import DAY, HOUR, MINUTE, MONTH, WEEK, YEAR

JUST_NOW = "just now"


@dataclass(frozen=True, kw_only=True)
class Unit:
    name: str
    ms: int

    def __post_init__(self) -> None:
        if self.ms <= 0:
            raise ValueError(f"Unit '{self.name}' must span a positive duration")

    def count(self, difference: int) -> int:
        """Whole units contained in `difference` (floor division, no rounding)."""
        return difference // self.ms


def pluralise(amount: int, noun: str) -> str:
    # Counts of 0 and 1 both stay singular
    return noun + ("s" if amount > 1 else "")


class Renderer(ABC):

    @abstractmethod
    def render(self, difference: int) -> str:
        """Phrase describing `difference` milliseconds in the past."""
        pass


class Units(Renderer):
    def __init__(self, unit: Unit):
        self.unit: Unit = unit

    def phrase(self, difference: int) -> str:
        amount = self.unit.count(difference)
        return f"{amount} {pluralise(amount, self.unit.name)}"

    @override
    def render(self, difference: int) -> str:
        return f"{self.phrase(difference)} ago"


class MixedUnits(Renderer):
    """Render a major unit plus the remainder in a minor unit.

    Differences landing exactly on a major boundary drop the minor part,
    so 2 years renders as "2 years ago" rather than "2 years and 0 month ago".
    """

    def __init__(self, major: Unit, minor: Unit):
        self.major: Units = Units(major)
        self.minor: Units = Units(minor)

    @override
    def render(self, difference: int) -> str:
        remainder = difference % self.major.unit.ms
        if remainder == 0:
            return self.major.render(difference)

        return (
            f"{self.major.phrase(difference)} and {self.minor.phrase(remainder)} ago"
        )


years = Unit(name="year", ms=YEAR)
months = Unit(name="month", ms=MONTH)
weeks = Unit(name="week", ms=WEEK)
days = Unit(name="day", ms=DAY)
hours = Unit(name="hour", ms=HOUR)
minutes = Unit(name="minute", ms=MINUTE)

# Scanned top to bottom; the first threshold <= difference wins
THRESHOLDS: tuple[tuple[Unit, Renderer], ...] = (
    (years, MixedUnits(years, months)),
    (months, Units(months)),
    (weeks, Units(weeks)),
    (days, Units(days)),
    (hours, Units(hours)),
    (minutes, Units(minutes)),
)
