"""Value normalization applied to every constraint value.

Search engines only understand a handful of native types. `normalize`
converts domain values into one of those before any constraint logic runs,
trying a fixed sequence of recognized categories:

1. absent (``None``)       -> `ABSENT`
2. enum member             -> member name
3. entity / entity ref     -> entity id
4. aware ``datetime``      -> naive civil date-time in the configured zone, then 5.
5. ``datetime`` / ``date`` -> ISO-8601 local date-time / date string
6. anything else           -> unchanged
"""

from datetime import date, datetime, tzinfo
from enum import Enum
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .entity import Entity, EntityRef
from .exceptions import InvalidConfigError
from .settings import settings

__all__ = ("ABSENT", "NormalizedValue", "is_absent", "normalize")


class _Absent:
    """Marker for "no value supplied". Distinct from an empty string."""

    _instance: Optional["_Absent"] = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __str__(self) -> str:
        return "None"

    def __copy__(self) -> "_Absent":
        return self

    def __deepcopy__(self, memo: Any) -> "_Absent":
        return self

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()

# Either `ABSENT` or an engine-comparable value
NormalizedValue = Any


def is_absent(value: Any) -> bool:
    return value is None or value is ABSENT


def _local_zone() -> Optional[tzinfo]:
    """Return the configured zone, or None for the system default zone."""
    name = settings.TIME_ZONE
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidConfigError("Unknown time zone", config_key="TIME_ZONE", value=name) from e


def _is_instant(value: Any) -> bool:
    return isinstance(value, datetime) and value.tzinfo is not None and value.utcoffset() is not None


def normalize(value: Any) -> NormalizedValue:
    """Convert `value` into the form used to compare against indexed data.

    Args:
        value: any domain value

    Returns:
        `ABSENT` for missing values, a string for enums, entities and
        dates, otherwise the value itself
    """
    if is_absent(value):
        return ABSENT
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, (Entity, EntityRef)):
        return ABSENT if value.id is None else value.id
    if _is_instant(value):
        value = value.astimezone(_local_zone()).replace(tzinfo=None)
    # datetime is a subclass of date, so it has to be checked first
    if isinstance(value, datetime):
        return value.replace(tzinfo=None).isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value
