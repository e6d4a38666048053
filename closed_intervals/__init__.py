"""
Closed Intervals

Immutable lookup of the closed interval a value belongs to:
- Interval types and sentinels (interval.py)
- Balanced tree of adjacent intervals (tree.py)
- IntervalIndex facade with order/eq relations (index.py)
- Indexed points and comparison helpers (compare.py)
- Step tables from TOML files (config.py) and iCalendar data (ical.py)
"""

from .interval import NEG_INF, POS_INF, Infinity, Interval, InvalidArgument, Ordering, is_ray
from .index import IntervalIndex
from .compare import Indexed, compare, eq_by, idx_of, navigator, order_by
from .config import GeneralConfig, StepTable
from .ical import EventBoundary, index_from_ical, points_from_ical
from . import tree

__all__ = [
    'NEG_INF',
    'POS_INF',
    'Infinity',
    'Interval',
    'InvalidArgument',
    'Ordering',
    'is_ray',
    'IntervalIndex',
    'tree',
    # Points and relations
    'Indexed',
    'compare',
    'navigator',
    'order_by',
    'eq_by',
    'idx_of',
    # Step table sources
    'GeneralConfig',
    'StepTable',
    'EventBoundary',
    'index_from_ical',
    'points_from_ical',
]
