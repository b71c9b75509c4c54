import logging
from datetime import timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

from persian_calendar.exceptions import InvalidZone

logger = logging.getLogger(__name__)

IRAN = timezone(timedelta(hours=3, minutes=30), "Asia/Tehran")
AFGHANISTAN = timezone(timedelta(hours=4, minutes=30), "Asia/Kabul")
UTC = timezone.utc

_FIXED_ZONES = {
    "Asia/Tehran": IRAN,
    "Asia/Kabul": AFGHANISTAN,
    "UTC": UTC,
}


def get_zone(name: str) -> tzinfo:
    """
    Resolve a zone name.

    Tehran and Kabul resolve to the fixed-offset zones above; any other name
    goes to the IANA database through ``zoneinfo`` (unknown names raise
    ``zoneinfo.ZoneInfoNotFoundError``).
    """
    if not name:
        raise InvalidZone("get_zone")
    zone = _FIXED_ZONES.get(name)
    if zone is not None:
        return zone
    logger.debug("🌐 get_zone: %s not fixed, loading from zoneinfo", name)
    return ZoneInfo(name)


def zone_name(zone: tzinfo) -> str:
    """Display name of a zone: the IANA key, or the name a fixed offset was given."""
    return str(zone)
