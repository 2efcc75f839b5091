# ABOUTME: ASGI web entry point for the weather lookup widget.
# ABOUTME: Starlette app rendering the search form or the weather dashboard from controller state.

import contextlib
import logging
from html import escape

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, RedirectResponse
from starlette.routing import Route

from src.controller import WeatherLookupController
from src.deps import deps_from_env
from src.display import (
    format_clock,
    format_humidity,
    format_temperature,
    format_time_of_day,
    format_weekday,
    format_wind,
    icon_url,
    title_case_query,
)
from src.models import WeatherBundle

logger = logging.getLogger(__name__)

TITLE = "🌤️ Weather"

_PAGE = """<!doctype html>
<html lang="en">
<head><meta charset="utf-8"><title>Weather</title></head>
<body>
{body}
</body>
</html>
"""


def render_search(query: str, error: str, loading: bool) -> str:
    """Render the search form shown in the Idle, Loading and Error states."""
    parts = [
        '<div class="search">',
        f"<h1>{TITLE}</h1>",
        '<form method="post" action="/lookup">',
        f'<input type="text" name="city" placeholder="Search city..." value="{escape(query)}">',
    ]
    if error:
        parts.append(f'<p class="error">{escape(error)}</p>')
    if loading:
        parts.append('<p class="loading">Loading...</p>')
    disabled = " disabled" if loading else ""
    parts += [f'<button type="submit"{disabled}>Get Weather</button>', "</form>", "</div>"]
    return "\n".join(parts)


def render_dashboard(query: str, bundle: WeatherBundle) -> str:
    """Render current conditions, the details sidebar, and the hourly and 7-day strips."""
    current = bundle.current
    offset = bundle.timezone_offset
    description = escape(current.description)

    parts = [
        '<div class="dashboard">',
        "<header>",
        f"<h1>{TITLE}</h1>",
        '<form method="post" action="/reset"><button type="submit">New Search</button></form>',
        "</header>",
        "<main>",
        '<section class="current">',
        f"<h2>{escape(title_case_query(query))}</h2>",
        f'<img alt="{description}" src="{icon_url(current.icon, large=True)}">',
        f'<p class="temperature">{format_temperature(current.temperature)}</p>',
        f"<p>{description}</p>",
        "</section>",
        '<aside class="details">',
        "<h2>Details</h2>",
        "<ul>",
        f"<li>🌡️ Temp: {format_temperature(current.temperature)}</li>",
        f"<li>💧 Humidity: {format_humidity(current.humidity)}</li>",
        f"<li>💨 Wind: {format_wind(current.wind_speed)}</li>",
        f"<li>🌅 Sunrise: {format_time_of_day(current.sunrise, offset)}</li>",
        f"<li>🌇 Sunset: {format_time_of_day(current.sunset, offset)}</li>",
        "</ul>",
        "</aside>",
        '<section class="hourly">',
        "<h3>Hourly Forecast</h3>",
    ]
    for hour in bundle.hourly:
        parts.append(
            '<div class="hour">'
            f"<p>{format_clock(hour.timestamp, offset)}</p>"
            f'<img alt="{escape(hour.description)}" src="{icon_url(hour.icon)}">'
            f"<p>{format_temperature(hour.temperature)}</p>"
            "</div>"
        )
    parts += ["</section>", '<section class="daily">', "<h3>7-Day Forecast</h3>"]
    for day in bundle.daily:
        parts.append(
            '<div class="day">'
            f"<p>{format_weekday(day.timestamp, offset)}</p>"
            f'<img alt="{escape(day.description)}" src="{icon_url(day.icon)}">'
            f"<p>{format_temperature(day.temperature)}</p>"
            "</div>"
        )
    parts += ["</section>", "</main>", "</div>"]
    return "\n".join(parts)


def render_page(controller: WeatherLookupController) -> str:
    bundle = controller.bundle
    if bundle is None:
        body = render_search(controller.query, controller.error, controller.is_loading)
    else:
        body = render_dashboard(controller.query, bundle)
    return _PAGE.format(body=body)


def create_app(controller: WeatherLookupController) -> Starlette:
    """Build the Starlette app around a single controller instance."""

    async def homepage(request: Request) -> HTMLResponse:
        return HTMLResponse(render_page(controller))

    async def lookup(request: Request) -> RedirectResponse:
        form = await request.form()
        city = form.get("city") or ""
        await controller.lookup(str(city))
        return RedirectResponse("/", status_code=303)

    async def reset(request: Request) -> RedirectResponse:
        controller.reset()
        logger.info("Lookup state reset")
        return RedirectResponse("/", status_code=303)

    async def state(request: Request) -> JSONResponse:
        return JSONResponse({"query": controller.query, "state": controller.state.model_dump(mode="json")})

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette):
        yield
        await controller.deps.http_client.aclose()

    app = Starlette(
        lifespan=lifespan,
        routes=[
            Route("/", homepage),
            Route("/lookup", lookup, methods=["POST"]),
            Route("/reset", reset, methods=["POST"]),
            Route("/api/state", state),
        ]
    )
    return app


app = create_app(WeatherLookupController(deps_from_env()))
