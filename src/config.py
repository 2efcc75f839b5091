# ABOUTME: Environment configuration for the weather lookup widget.
# ABOUTME: Loads .env and exposes the OpenWeatherMap API key and endpoint URLs.

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_GEOCODING_URL = "https://api.openweathermap.org/geo/1.0/direct"
DEFAULT_ONECALL_URL = "https://api.openweathermap.org/data/2.5/onecall"

# Not validated here: a missing key surfaces as a 401 from the API.
API_KEY = os.environ.get("OPENWEATHER_API_KEY", "")
GEOCODING_URL = os.environ.get("OPENWEATHER_GEOCODING_URL", DEFAULT_GEOCODING_URL)
ONECALL_URL = os.environ.get("OPENWEATHER_ONECALL_URL", DEFAULT_ONECALL_URL)
