"""
Step tables from iCalendar data.

Every VEVENT contributes two points: its start and its end. Looking up a
time in the resulting index tells which stretch between event boundaries it
falls into. A time sitting exactly on one or more boundaries reports all
adjacent stretches, since equality on the instant is used as ``eq``.
"""

import sys
from dataclasses import dataclass
from datetime import timedelta
from typing import List

from icalendar import Calendar as ICalCalendar

from .compare import Indexed, eq_by, idx_of, order_by
from .index import IntervalIndex
from .timezone_utils import to_utc_datetime


@dataclass(frozen=True)
class EventBoundary:
    """Which event a point belongs to and whether it starts or ends it."""
    summary: str
    uid: str
    kind: str  # "start" or "end"


def parse_icalendar(ical_text: str) -> ICalCalendar:
    """Parse iCalendar text into an icalendar.Calendar object."""
    return ICalCalendar.from_ical(ical_text)


def points_from_ical(ical_text: str, debug: bool = False) -> List[Indexed]:
    """
    Extract start and end points of all events.

    Args:
        ical_text: Raw iCalendar text (VCALENDAR)
        debug: Print every extracted boundary to stderr

    Returns:
        Indexed points keyed by aware UTC datetimes, in file order.
    """
    calendar = parse_icalendar(ical_text)
    points = []
    for event in calendar.walk('VEVENT'):
        uid = str(event.get('UID', ''))
        summary = str(event.get('SUMMARY', 'Untitled'))

        dtstart = event.get('DTSTART')
        if dtstart is None:
            if debug:
                print(f"DEBUG: Skipping event without DTSTART: {uid!r}", file=sys.stderr)
            continue
        start = to_utc_datetime(dtstart.dt)

        dtend = event.get('DTEND')
        if dtend is None:
            # No end time - use start + 1 hour
            end = start + timedelta(hours=1)
        else:
            end = to_utc_datetime(dtend.dt)

        if debug:
            print(f"DEBUG: Event {summary!r}: {start.isoformat()} - {end.isoformat()}", file=sys.stderr)

        points.append(Indexed(start, EventBoundary(summary, uid, "start")))
        points.append(Indexed(end, EventBoundary(summary, uid, "end")))

    if debug:
        print(f"DEBUG: Total boundary points found: {len(points)}", file=sys.stderr)
    return points


def index_from_ical(ical_text: str, debug: bool = False) -> IntervalIndex:
    """
    Build an index over the event boundaries of a calendar.

    Raises:
        InvalidArgument: the calendar holds no event.
    """
    points = points_from_ical(ical_text, debug=debug)
    return IntervalIndex.from_points(points, order=order_by(idx_of), eq=eq_by(idx_of))
