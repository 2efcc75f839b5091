# ABOUTME: Service layer for OpenWeatherMap geocoding and One Call API calls.
# ABOUTME: Turns untrusted JSON payloads into validated snapshot models with sentinel defaults.

import math

import httpx

from src.deps import LookupDeps
from src.models import (
    FALLBACK_ICON,
    ConditionSnapshot,
    Coordinate,
    DailySnapshot,
    GeoLocation,
    WeatherBundle,
)

HOURLY_LIMIT = 24
DAILY_LIMIT = 7
EXCLUDED_SECTIONS = "minutely,alerts"
UNITS = "metric"

# Largest epoch second that still converts to a date at any UTC offset
MAX_TIMESTAMP = 253402214400
MAX_OFFSET = 86400


async def geocode(deps: LookupDeps, city_name: str) -> GeoLocation | None:
    """Resolve a city name to its first geocoding match, or None if nothing matched.

    Raises httpx.HTTPError on transport failures and non-2xx responses, and
    ValueError when the body is not a JSON array of locations.
    """
    resp = await deps.http_client.get(
        deps.geocoding_url,
        params={"q": city_name, "limit": 1, "appid": deps.api_key},
    )
    resp.raise_for_status()
    data = resp.json()

    if not isinstance(data, list):
        raise ValueError(f"Geocoding response is not a list: {type(data).__name__}")
    if not data:
        return None

    r = data[0]
    if not isinstance(r, dict):
        raise ValueError("Geocoding entry is not an object")
    return GeoLocation(
        name=r.get("name") or "",
        latitude=r.get("lat"),
        longitude=r.get("lon"),
        country=r.get("country"),
        state=r.get("state"),
    )


async def get_weather_bundle(deps: LookupDeps, coordinate: Coordinate) -> WeatherBundle:
    """Fetch current, hourly and daily weather for a coordinate in metric units."""
    resp = await deps.http_client.get(
        deps.onecall_url,
        params={
            "lat": coordinate.latitude,
            "lon": coordinate.longitude,
            "exclude": EXCLUDED_SECTIONS,
            "units": UNITS,
            "appid": deps.api_key,
        },
    )
    resp.raise_for_status()
    return parse_bundle(resp.json())


def parse_bundle(raw) -> WeatherBundle:
    """Build a WeatherBundle from a One Call payload.

    Only a payload that is not a JSON object is rejected (ValueError). Anything
    missing or malformed below the top level degrades to sentinel values.
    """
    if not isinstance(raw, dict):
        raise ValueError(f"Weather response is not an object: {type(raw).__name__}")

    timezone = raw.get("timezone")
    offset = _integer(raw.get("timezone_offset"))
    if offset is not None and abs(offset) >= MAX_OFFSET:
        offset = None
    return WeatherBundle(
        current=parse_condition(raw.get("current")),
        hourly=tuple(parse_condition(h) for h in _sequence(raw.get("hourly"))[:HOURLY_LIMIT]),
        daily=tuple(parse_daily(d) for d in _sequence(raw.get("daily"))[:DAILY_LIMIT]),
        timezone=timezone if isinstance(timezone, str) else "UTC",
        timezone_offset=offset if offset is not None else 0,
    )


def parse_condition(raw) -> ConditionSnapshot:
    """Parse a current or hourly entry into a ConditionSnapshot."""
    if not isinstance(raw, dict):
        return ConditionSnapshot()
    description, icon = _first_weather(raw)
    return ConditionSnapshot(
        timestamp=_timestamp(raw.get("dt")),
        temperature=_number(raw.get("temp")),
        humidity=_number(raw.get("humidity")),
        wind_speed=_number(raw.get("wind_speed")),
        description=description,
        icon=icon,
        sunrise=_timestamp(raw.get("sunrise")),
        sunset=_timestamp(raw.get("sunset")),
    )


def parse_daily(raw) -> DailySnapshot:
    """Parse a daily entry, whose `temp` is an object of day/min/max/... values."""
    if not isinstance(raw, dict):
        return DailySnapshot()
    temp = raw.get("temp")
    if isinstance(temp, dict):
        day, low, high = _number(temp.get("day")), _number(temp.get("min")), _number(temp.get("max"))
    else:
        day, low, high = _number(temp), None, None
    description, icon = _first_weather(raw)
    return DailySnapshot(
        timestamp=_timestamp(raw.get("dt")),
        temperature=day,
        temperature_min=low,
        temperature_max=high,
        humidity=_number(raw.get("humidity")),
        wind_speed=_number(raw.get("wind_speed")),
        description=description,
        icon=icon,
        sunrise=_timestamp(raw.get("sunrise")),
        sunset=_timestamp(raw.get("sunset")),
    )


def _first_weather(raw: dict) -> tuple[str, str]:
    """Return (description, icon) from the first `weather` condition, with defaults."""
    conditions = _sequence(raw.get("weather"))
    first = conditions[0] if conditions and isinstance(conditions[0], dict) else {}
    description = first.get("description")
    icon = first.get("icon")
    return (
        description if isinstance(description, str) else "",
        icon if isinstance(icon, str) and icon else FALLBACK_ICON,
    )


def _sequence(value) -> list:
    return value if isinstance(value, list) else []


def _number(value) -> float | None:
    # bool is an int subclass but never a valid reading
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def _integer(value) -> int | None:
    number = _number(value)
    return int(number) if number is not None else None


def _timestamp(value) -> int | None:
    """Epoch seconds, or None when the value cannot be rendered as a date."""
    seconds = _integer(value)
    if seconds is None or not 0 <= seconds < MAX_TIMESTAMP:
        return None
    return seconds
