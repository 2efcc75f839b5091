# ABOUTME: Render-time formatting for weather values: rounding, sentinels, icons, local times.
# ABOUTME: Stored snapshots keep full precision and epoch seconds; conversion happens only here.

import math
from datetime import datetime, timedelta, timezone

from src.models import FALLBACK_ICON

SENTINEL = "--"
ICON_BASE_URL = "https://openweathermap.org/img/wn"


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (15.5 -> 16, -0.5 -> 0)."""
    return math.floor(value + 0.5)


def format_number(value: float | None) -> str:
    """Rounded integer text, or "--" when the reading is missing or not finite."""
    if value is None or not math.isfinite(value):
        return SENTINEL
    return str(round_half_up(value))


def format_temperature(value: float | None) -> str:
    """Temperature as shown on the dashboard, e.g. "15°C"."""
    return f"{format_number(value)}°C"


def format_humidity(value: float | None) -> str:
    """Relative humidity with a percent sign."""
    return f"{format_number(value)}%"


def format_wind(value: float | None) -> str:
    """Wind speed in metres per second."""
    return f"{format_number(value)} m/s"


def icon_url(code: str | None, large: bool = False) -> str:
    """OpenWeatherMap icon URL; `large` picks the @2x image used for current conditions."""
    suffix = "@2x.png" if large else ".png"
    return f"{ICON_BASE_URL}/{code or FALLBACK_ICON}{suffix}"


def _local(timestamp: int, offset: int) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=timezone(timedelta(seconds=offset)))


def format_clock(timestamp: int | None, offset: int = 0) -> str:
    """Local HH:MM at the location's UTC offset."""
    if not timestamp:
        return SENTINEL
    return _local(timestamp, offset).strftime("%H:%M")


def format_time_of_day(timestamp: int | None, offset: int = 0) -> str:
    """Local HH:MM:SS, used for sunrise and sunset."""
    if not timestamp:
        return SENTINEL
    return _local(timestamp, offset).strftime("%H:%M:%S")


def format_weekday(timestamp: int | None, offset: int = 0) -> str:
    """Short local weekday name, e.g. "Tue", for the 7-day strip."""
    if not timestamp:
        return SENTINEL
    return _local(timestamp, offset).strftime("%a")


def title_case_query(text: str) -> str:
    """Upper-case the first character of the query, leaving the rest as typed."""
    text = text.strip()
    if not text:
        return "Unknown Location"
    return text[0].upper() + text[1:]
