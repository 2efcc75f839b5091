# ABOUTME: WeatherLookupController: geocode a city, fetch its weather, and hold the lookup state.
# ABOUTME: Each transition replaces the state value wholesale; stale lookups are discarded by token.

import logging

import httpx

from src.deps import LookupDeps
from src.models import Error, Idle, Loaded, Loading, LookupState, WeatherBundle
from src.weather_service import geocode, get_weather_bundle

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "City not found"
FETCH_FAILURE_MESSAGE = "Failed to fetch weather data"


class WeatherLookupController:
    """Orchestrates the geocode then weather calls for one widget.

    State is one of Idle, Loading, Error or Loaded. Every lookup gets a
    request token; a lookup that has been superseded by a newer lookup or by
    reset() drops its result instead of overwriting the state.
    """

    def __init__(self, deps: LookupDeps):
        self.deps = deps
        self._state: LookupState = Idle()
        self._query = ""
        self._token = 0

    @property
    def state(self) -> LookupState:
        return self._state

    @property
    def query(self) -> str:
        return self._query

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def error(self) -> str:
        return self._state.message if isinstance(self._state, Error) else ""

    @property
    def bundle(self) -> WeatherBundle | None:
        return self._state.bundle if isinstance(self._state, Loaded) else None

    async def lookup(self, city_text: str) -> None:
        """Geocode `city_text` and load its weather. Blank input is ignored."""
        city = city_text.strip()
        if not city:
            return

        self._token += 1
        token = self._token
        self._query = city_text
        self._state = Loading()
        result: LookupState = Loading()
        logger.info("Looking up weather for %r", city)

        try:
            location = await geocode(self.deps, city)
            if location is None:
                logger.info("No geocoding match for %r", city)
                result = Error(message=NOT_FOUND_MESSAGE)
                return
            if token != self._token:
                return
            bundle = await get_weather_bundle(self.deps, location.coordinate)
            result = Loaded(bundle=bundle)
        except (httpx.HTTPError, ValueError):
            logger.exception("Weather lookup for %r failed", city)
            result = Error(message=FETCH_FAILURE_MESSAGE)
        finally:
            if token == self._token:
                # Loading never survives a finished lookup
                self._state = Idle() if isinstance(result, Loading) else result
            else:
                logger.debug("Discarding stale lookup result for %r", city)

    def reset(self) -> None:
        """Return to Idle with an empty query. Supersedes any in-flight lookup."""
        self._token += 1
        self._query = ""
        self._state = Idle()
