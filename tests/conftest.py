# ABOUTME: Shared test fixtures for the weather lookup test suite.
# ABOUTME: Provides LookupDeps whose mock client answers a full London lookup.

import pytest

from src.deps import LookupDeps
from tests.helpers import LONDON_GEOCODE, make_onecall, make_response, mock_deps


@pytest.fixture
def london_deps() -> LookupDeps:
    return mock_deps(make_response(LONDON_GEOCODE), make_response(make_onecall()))
