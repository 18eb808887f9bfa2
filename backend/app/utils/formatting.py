"""
Display formatting helpers shared by the API and the CLI
"""

from datetime import datetime, date, timedelta
from typing import Optional, Union

DateLike = Union[datetime, date]


def _as_date(value: DateLike) -> date:
    return value.date() if isinstance(value, datetime) else value


def format_date(value: Optional[DateLike]) -> str:
    """dd/mm/yyyy, or N/A when there is no date"""
    if value is None:
        return "N/A"
    return value.strftime("%d/%m/%Y")


def format_relative_date(value: datetime, now: Optional[datetime] = None) -> str:
    """
    Human friendly due date.

        Today, 14:30
        Tomorrow, 09:00
        Friday, 24/10/2026
    """
    today = (now or datetime.now()).date()
    day = value.date()
    if day == today:
        return f"Today, {value:%H:%M}"
    if day == today + timedelta(days=1):
        return f"Tomorrow, {value:%H:%M}"
    return f"{value:%A}, {format_date(value)}"


def is_past_date(value: Optional[DateLike], now: Optional[datetime] = None) -> bool:
    if value is None:
        return False
    now = now or datetime.now()
    if isinstance(value, datetime):
        return value.timestamp() < now.timestamp()
    return value < now.date()


def days_between(start: DateLike, end: DateLike) -> int:
    """Whole calendar days from start to end (negative when end is earlier)"""
    return (_as_date(end) - _as_date(start)).days


def truncate(text: Optional[str], length: int = 50) -> str:
    if not text:
        return ""
    if len(text) <= length:
        return text
    return text[:length].rstrip() + "..."


def format_clock(seconds: int) -> str:
    """Seconds as MM:SS"""
    seconds = max(0, int(seconds))
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"
