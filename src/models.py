# ABOUTME: Pydantic BaseModels for geocoding results, weather snapshots, and lookup state.
# ABOUTME: Defines the validated internal types the controller and web layer work with.

from typing import Literal

from pydantic import BaseModel, ConfigDict

FALLBACK_ICON = "01d"


class Coordinate(BaseModel):
    """Latitude/longitude pair for one lookup."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class GeoLocation(BaseModel):
    """One entry of the OpenWeatherMap direct geocoding response."""

    name: str = ""
    latitude: float
    longitude: float
    country: str | None = None
    state: str | None = None

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)


class ConditionSnapshot(BaseModel):
    """Current or hourly conditions. Numeric fields are None when the API omitted them."""

    model_config = ConfigDict(frozen=True)

    timestamp: int | None = None
    temperature: float | None = None
    humidity: float | None = None
    wind_speed: float | None = None
    description: str = ""
    icon: str = FALLBACK_ICON
    sunrise: int | None = None
    sunset: int | None = None


class DailySnapshot(ConditionSnapshot):
    """One day of forecast. `temperature` holds the daytime value."""

    temperature_min: float | None = None
    temperature_max: float | None = None


class WeatherBundle(BaseModel):
    """Current, hourly and daily conditions for one location."""

    model_config = ConfigDict(frozen=True)

    current: ConditionSnapshot = ConditionSnapshot()
    hourly: tuple[ConditionSnapshot, ...] = ()
    daily: tuple[DailySnapshot, ...] = ()
    timezone: str = "UTC"
    timezone_offset: int = 0


class Idle(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["idle"] = "idle"


class Loading(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["loading"] = "loading"


class Error(BaseModel):
    """A lookup finished with a user-facing message."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    message: str


class Loaded(BaseModel):
    """A lookup finished with a weather bundle."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["loaded"] = "loaded"
    bundle: WeatherBundle


LookupState = Idle | Loading | Error | Loaded
