from datetime import datetime
from email.utils import parsedate_to_datetime
from zoneinfo import ZoneInfo
from typing import Optional

DEFAULT_TIMEZONE = "UTC"

def utc_to_local(dt_utc: datetime, tz_name: str = DEFAULT_TIMEZONE) -> datetime:
    """Converte datetime UTC para timezone local."""
    return dt_utc.astimezone(ZoneInfo(tz_name))

def rfc822_to_local_str(pub_date: str, tz_name: str = DEFAULT_TIMEZONE) -> Optional[str]:
    """Converte pubDate RSS (RFC 822) para data local legível, ex.: 'Jan 5, 2024'."""
    try:
        dt = parsedate_to_datetime(pub_date)
    except (TypeError, ValueError):
        return None
    if dt is None:
        return None
    if dt.tzinfo is not None:
        dt = utc_to_local(dt, tz_name)
    return f"{dt:%b} {dt.day}, {dt.year}"
