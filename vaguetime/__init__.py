from importlib.resources import files

from .clock import Clock, FixedClock, SystemClock
from .core import VagueTimeFormatter, get
from .units import Unit, pluralise
from .util import DAY, HOUR, MINUTE, MONTH, WEEK, YEAR

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "get",
    "VagueTimeFormatter",
    "Clock",
    "SystemClock",
    "FixedClock",
    "Unit",
    "pluralise",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
    "docs",
]
