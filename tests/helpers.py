# ABOUTME: Canned OpenWeatherMap responses and mock httpx clients shared by the test modules.
# ABOUTME: Responses are real httpx.Response objects replayed through AsyncMock(spec=httpx.AsyncClient).

from unittest.mock import AsyncMock

import httpx

from src.deps import LookupDeps

LONDON_GEOCODE = [{"name": "London", "lat": 51.5, "lon": -0.12, "country": "GB", "state": "England"}]


def make_response(json_data, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code=status_code, json=json_data, request=httpx.Request("GET", "https://test"))


def make_onecall(hourly_count: int = 2, daily_count: int = 2, current_temp: float = 15.3) -> dict:
    """Build a One Call payload with numbered hourly and daily entries."""
    return {
        "lat": 51.5,
        "lon": -0.12,
        "timezone": "Europe/London",
        "timezone_offset": 3600,
        "current": {
            "dt": 1700000000,
            "sunrise": 1699990000,
            "sunset": 1700020000,
            "temp": current_temp,
            "humidity": 81,
            "wind_speed": 4.6,
            "weather": [{"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}],
        },
        "hourly": [
            {"dt": 1700000000 + i * 3600, "temp": 10.0 + i, "weather": [{"description": "rain", "icon": "10d"}]}
            for i in range(hourly_count)
        ],
        "daily": [
            {
                "dt": 1700000000 + i * 86400,
                "temp": {"day": 12.0 + i, "min": 5.0, "max": 14.0, "night": 6.0},
                "humidity": 70,
                "wind_speed": 3.0,
                "weather": [{"description": "clear sky", "icon": "01d"}],
            }
            for i in range(daily_count)
        ],
    }


def mock_deps(*responses) -> LookupDeps:
    """LookupDeps whose client returns the given responses (or raises given exceptions) in order."""
    client = AsyncMock(spec=httpx.AsyncClient)
    client.get.side_effect = list(responses)
    return LookupDeps(http_client=client, api_key="test-key")
