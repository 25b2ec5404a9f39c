"""Weather dashboard — FastAPI backend serving render-ready views."""

import os
from functools import lru_cache

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from weathernow.chart.svg import render_sparkline_svg
from weathernow.chart.tooltip import resolve_tooltip
from weathernow.config.loader import load_config
from weathernow.models.location import Location
from weathernow.reporting.view import build_dashboard_view, build_sparkline, hourly_samples
from weathernow.state.session import WeatherSession

CONFIG_PATH = os.environ.get("WEATHERNOW_CONFIG", "weathernow.yaml")

app = FastAPI(title="WeatherNow Dashboard", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_session() -> WeatherSession:
    """Process-wide session; favorites live only as long as the process."""
    return WeatherSession.from_config(load_config(CONFIG_PATH))


def _view(session: WeatherSession) -> dict:
    return build_dashboard_view(session.state, session.config).to_dict()


# ── Search ──────────────────────────────────────────────────────


@app.get("/api/search")
async def search(q: str = "", session: WeatherSession = Depends(get_session)):
    """Suggestions for this request's query, resolved without debounce."""
    suggestions = await session.lookup(q)
    return [{"name": s.name, "lat": s.lat, "lon": s.lon} for s in suggestions]


# ── Forecast ────────────────────────────────────────────────────


@app.get("/api/forecast")
async def forecast(
    lat: float | None = None,
    lon: float | None = None,
    name: str | None = None,
    session: WeatherSession = Depends(get_session),
):
    """Dashboard view for a location (or the active one when none is given)."""
    if (lat is None) != (lon is None):
        raise HTTPException(400, "lat and lon must be given together")
    if lat is not None and lon is not None:
        location = Location(name=name or f"{lat:.4f}, {lon:.4f}", lat=lat, lon=lon)
        await session.choose_location(location)
    else:
        await session.refresh()
    return _view(session)


@app.get("/api/view")
def current_view(session: WeatherSession = Depends(get_session)):
    """Dashboard view for the current state without refetching."""
    return _view(session)


@app.get("/api/tooltip")
def tooltip(
    x: float,
    y: float | None = None,
    session: WeatherSession = Depends(get_session),
):
    """Tooltip for a pointer position over the sparkline, or null."""
    samples = hourly_samples(session.state, session.config.chart.hours)
    sparkline = build_sparkline(samples, session.config)
    if sparkline is None:
        return None
    tip = resolve_tooltip(x, sparkline.geometry, samples, pointer_y=y)
    if tip is None:
        return None
    return {"index": tip.index, "x": tip.x, "y": tip.y, "value": tip.value, "label": tip.label}


@app.get("/api/sparkline.svg")
def sparkline_svg(session: WeatherSession = Depends(get_session)):
    samples = hourly_samples(session.state, session.config.chart.hours)
    sparkline = build_sparkline(samples, session.config)
    if sparkline is None:
        raise HTTPException(404, "No hourly data loaded")
    view = build_dashboard_view(session.state, session.config)
    svg = render_sparkline_svg(
        sparkline.geometry,
        samples,
        color=view.theme.curve_color,
        label_every=session.config.chart.label_every,
    )
    return Response(content=svg, media_type="image/svg+xml")


# ── Favorites ───────────────────────────────────────────────────


@app.get("/api/favorites")
def get_favorites(session: WeatherSession = Depends(get_session)):
    return [
        {"name": f.name, "lat": f.lat, "lon": f.lon} for f in session.state.favorites
    ]


@app.post("/api/favorites")
def add_favorite(session: WeatherSession = Depends(get_session)):
    """Add the active location to favorites (no-op if already present)."""
    state = session.add_favorite()
    return [f.name for f in state.favorites]


@app.delete("/api/favorites/{name}")
def remove_favorite(name: str, session: WeatherSession = Depends(get_session)):
    state = session.remove_favorite(name)
    return [f.name for f in state.favorites]


@app.post("/api/favorites/{name}/select")
async def select_favorite(name: str, session: WeatherSession = Depends(get_session)):
    try:
        await session.choose_favorite(name)
    except KeyError:
        raise HTTPException(404, f"No favorite named {name!r}")
    return _view(session)


# ── Config ──────────────────────────────────────────────────────


@app.get("/api/config")
def get_config(session: WeatherSession = Depends(get_session)):
    return session.config.model_dump()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8777)
