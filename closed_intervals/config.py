"""
Step table files for closed-intervals.

Handles TOML parsing of point tables and turns them into an IntervalIndex.

A table looks like::

    [General]
    unique = false
    timezone = "Europe/Amsterdam"

    [[Point]]
    at = 2024-01-01T08:00:00
    data = "open"

    [[Point]]
    at = 2024-01-01T17:00:00
    data = "closed"
"""

import tomllib
import os
import sys
from datetime import date
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional

import pytz

from .compare import Indexed, eq_by, idx_of, order_by
from .index import IntervalIndex
from .interval import InvalidArgument
from .timezone_utils import set_timezone, to_utc_datetime


def position_kind(at) -> Optional[str]:
    """Kind of a point position: "number", "datetime" (dates included) or None."""
    if isinstance(at, date):
        return "datetime"
    if isinstance(at, (int, float)) and not isinstance(at, bool):
        return "number"
    return None


@dataclass
class GeneralConfig:
    """Configuration shared by all points of a table."""
    unique: bool = True        # False reports every interval touching a duplicated point
    timezone: str = "UTC"      # Timezone for local datetimes and dates


@dataclass
class StepTable:
    """A parsed step table: its points plus the general settings."""

    points: list[Indexed] = field(default_factory=list)
    general: GeneralConfig = field(default_factory=GeneralConfig)

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Get the default table file path."""
        xdg_config = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return Path(xdg_config) / 'closed-intervals' / 'table.toml'

    @classmethod
    def load(cls, config_path: Optional[Path] = None, debug: bool = False) -> 'StepTable':
        """Load a step table from a TOML file."""
        if config_path is None:
            config_path = cls.get_default_config_path()

        if not config_path.exists():
            raise FileNotFoundError(f"Table file not found: {config_path}")

        with open(config_path, 'rb') as f:
            data = tomllib.load(f)

        return cls.from_dict(data, debug=debug)

    @classmethod
    def from_dict(cls, data: dict, debug: bool = False) -> 'StepTable':
        """Build a step table from already parsed TOML data."""
        if debug:
            print(f"DEBUG: TOML data keys: {list(data.keys())}", file=sys.stderr)

        # Parse General section
        general_data = data.get('General', {})
        general = GeneralConfig(
            unique=general_data.get('unique', GeneralConfig.unique),
            timezone=general_data.get('timezone', GeneralConfig.timezone),
        )
        if not isinstance(general.unique, bool):
            raise InvalidArgument(f"General.unique must be a boolean, got {general.unique!r}")
        try:
            if not isinstance(general.timezone, str):
                raise pytz.UnknownTimeZoneError(general.timezone)
            set_timezone(general.timezone)
        except pytz.UnknownTimeZoneError:
            raise InvalidArgument(f"General.timezone: unknown timezone {general.timezone!r}") from None

        # Parse points; each [[Point]] needs an 'at' position of the table's kind
        points = []
        table_kind = None
        for number, entry in enumerate(data.get('Point', []), start=1):
            if not isinstance(entry, dict) or 'at' not in entry:
                raise InvalidArgument(f"Point #{number} has no 'at' value")
            at = entry['at']
            kind = position_kind(at)
            if kind is None:
                raise InvalidArgument(f"Point #{number}: 'at' must be a number, date or datetime, got {at!r}")
            if table_kind is None:
                table_kind = kind
            elif kind != table_kind:
                raise InvalidArgument(
                    f"Point #{number}: 'at' is a {kind} but earlier points are {table_kind}s"
                )
            if kind == "datetime":
                at = to_utc_datetime(at)
            if debug:
                print(f"DEBUG: Found point #{number}: at={at} data={entry.get('data')!r}", file=sys.stderr)
            points.append(Indexed(at, entry.get('data')))

        if debug:
            print(f"DEBUG: Total points found: {len(points)}", file=sys.stderr)

        if len(points) < 2:
            raise InvalidArgument("A step table needs at least two points")

        return cls(points=points, general=general)

    def check_value(self, value):
        """Return ``value`` if it can be looked up in this table, else raise InvalidArgument."""
        kind = position_kind(value)
        table_kind = position_kind(self.points[0].idx)
        if kind != table_kind:
            raise InvalidArgument(f"Cannot look up {value!r} in a table of {table_kind}s")
        return value

    def build_index(self) -> IntervalIndex:
        """Create the lookup index; duplicated positions tie only when the table is not unique."""
        eq = None if self.general.unique else eq_by(idx_of)
        return IntervalIndex.from_points(self.points, order=order_by(idx_of), eq=eq)
