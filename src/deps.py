# ABOUTME: Dependency container for the lookup controller using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient, API key, and endpoint URLs used by the weather service.

import httpx
from pydantic import BaseModel, ConfigDict

from src import config


class LookupDeps(BaseModel):
    """Collaborators injected into WeatherLookupController."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    api_key: str = ""
    geocoding_url: str = config.DEFAULT_GEOCODING_URL
    onecall_url: str = config.DEFAULT_ONECALL_URL


def create_http_client() -> httpx.AsyncClient:
    """Create a plain httpx client. Failures are reported once, never retried."""
    return httpx.AsyncClient()


def deps_from_env() -> LookupDeps:
    """Build LookupDeps from the environment loaded by src.config."""
    return LookupDeps(
        http_client=create_http_client(),
        api_key=config.API_KEY,
        geocoding_url=config.GEOCODING_URL,
        onecall_url=config.ONECALL_URL,
    )
