"""Timezone utilities using IANA tzdata."""

import logging
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from timedate_status.config import get_config
from timedate_status.errors import InvalidTimezoneError, TimestampParseError

logger = logging.getLogger(__name__)


def resolve_timezone(tz_name: str) -> ZoneInfo:
    """Resolve an IANA timezone identifier.

    Args:
        tz_name: IANA timezone identifier (e.g., "America/New_York")

    Returns:
        ZoneInfo for the identifier

    Raises:
        InvalidTimezoneError: If the name is empty, malformed or unknown
    """
    if not tz_name:
        raise InvalidTimezoneError(tz_name, "empty timezone name")

    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        # ValueError covers keys zoneinfo rejects outright (absolute paths, "..")
        raise InvalidTimezoneError(tz_name, str(e)) from e


def parse_timestamp(value: str, tz: tzinfo, layout: str | None = None) -> datetime:
    """Parse a timedatectl timestamp in the given timezone.

    timedatectl prints timestamps as ``Mon 2024-01-15 10:30:00 EST``. The
    wall-clock part is attached to ``tz``; the trailing abbreviation only picks
    between the two readings of an ambiguous wall time (DST fold).

    Args:
        value: Timestamp text as printed by ``timedatectl show``
        tz: Resolved timezone the wall time is expressed in
        layout: strptime layout for the part before the abbreviation

    Returns:
        Timezone-aware datetime

    Raises:
        TimestampParseError: If the text does not match the layout
    """
    if layout is None:
        layout = get_config().timestamp_format

    wall, _, abbreviation = value.strip().rpartition(" ")
    if not wall or not abbreviation:
        raise TimestampParseError(value, "missing timezone abbreviation")

    try:
        naive = datetime.strptime(wall, layout)
    except ValueError as e:
        raise TimestampParseError(value, str(e)) from e

    # strptime accepts %a without checking it against the date
    if layout.startswith("%a ") and naive.strftime("%a") != wall.split(" ", 1)[0]:
        raise TimestampParseError(value, "weekday does not match date")

    candidates = [naive.replace(tzinfo=tz, fold=fold) for fold in (0, 1)]
    for candidate in candidates:
        if candidate.tzname() == abbreviation:
            return candidate

    logger.warning(
        "Timezone abbreviation %r does not match %s at %s, using %s",
        abbreviation,
        tz,
        wall,
        candidates[0].tzname(),
    )
    return candidates[0]
