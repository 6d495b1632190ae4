# ABOUTME: Daily challenge seed and reset countdown in the fixed reference timezone
# ABOUTME: Everyone playing on the same reference calendar day gets the same seed

from datetime import date, datetime, time, timedelta, timezone
from typing import Optional

from paintingguessr.config import Config
from paintingguessr.sampling.seeded_random import TWO_POW_32, UINT32_MASK

# "EST" year-round: fixed UTC-5, no DST
REFERENCE_TZ = timezone(timedelta(hours=Config.REFERENCE_UTC_OFFSET_HOURS), name="EST")


def _require_aware(now: datetime) -> datetime:
    if not isinstance(now, datetime):
        raise TypeError(f"Expected a datetime, got {type(now).__name__}")
    if now.tzinfo is None or now.tzinfo.utcoffset(now) is None:
        raise ValueError("Daily challenge dates must be timezone-aware")
    return now


def reference_date(now: datetime) -> date:
    """Calendar date of an instant in the reference timezone."""
    return _require_aware(now).astimezone(REFERENCE_TZ).date()


def today_date_string(now: Optional[datetime] = None) -> str:
    """Today's date as YYYY-MM-DD in the reference timezone."""
    if now is None:
        now = datetime.now(timezone.utc)
    return reference_date(now).isoformat()


def string_hash(text: str) -> int:
    """
    Java-style string hash: h = h * 31 + code, kept as a signed 32-bit int.

    Returns:
        Signed 32-bit integer
    """
    h = 0
    for char in text:
        h = ((h << 5) - h + ord(char)) & UINT32_MASK
    if h >= 2 ** 31:
        h -= TWO_POW_32
    return h


def daily_seed(now: datetime, version: Optional[str] = None) -> int:
    """
    Seed for the daily challenge containing `now`.

    Args:
        now: Timezone-aware instant
        version: Suffix mixed into the hash; bump it to serve new daily sets

    Returns:
        Non-negative integer seed
    """
    if version is None:
        version = Config.DAILY_SEED_VERSION
    return abs(string_hash(reference_date(now).isoformat() + version))


def time_until_next_daily(now: Optional[datetime] = None) -> dict[str, int]:
    """
    Time left until the next reference-timezone midnight.

    Returns:
        {"hours": int, "minutes": int, "seconds": int}
    """
    if now is None:
        now = datetime.now(timezone.utc)
    local_now = _require_aware(now).astimezone(REFERENCE_TZ)
    next_midnight = datetime.combine(local_now.date() + timedelta(days=1), time(0), tzinfo=REFERENCE_TZ)

    remaining = int((next_midnight - local_now).total_seconds())
    return {
        "hours": remaining // 3600,
        "minutes": (remaining % 3600) // 60,
        "seconds": remaining % 60,
    }
