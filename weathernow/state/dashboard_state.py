"""Immutable dashboard state and its pure transitions.

Every event produces a new DashboardState via dataclasses.replace; nothing is
mutated in place.
"""

from dataclasses import dataclass, replace

from weathernow.models.forecast import Forecast
from weathernow.models.location import Location, Suggestion


@dataclass(frozen=True)
class DashboardState:
    location: Location
    query: str = ""
    suggestions: tuple[Suggestion, ...] = ()
    forecast: Forecast | None = None
    loading: bool = False
    favorites: tuple[Location, ...] = ()


def with_query(state: DashboardState, query: str) -> DashboardState:
    if not query:
        return replace(state, query="", suggestions=())
    return replace(state, query=query)


def with_suggestions(
    state: DashboardState, suggestions: tuple[Suggestion, ...]
) -> DashboardState:
    return replace(state, suggestions=tuple(suggestions))


def select_suggestion(state: DashboardState, suggestion: Suggestion) -> DashboardState:
    return replace(
        state, location=suggestion.to_location(), suggestions=(), query=""
    )


def select_location(state: DashboardState, location: Location) -> DashboardState:
    return replace(state, location=location)


def add_favorite(state: DashboardState) -> DashboardState:
    """Add the active location to favorites unless one with its name exists."""
    if any(f.name == state.location.name for f in state.favorites):
        return state
    return replace(state, favorites=state.favorites + (state.location,))


def remove_favorite(state: DashboardState, name: str) -> DashboardState:
    return replace(
        state, favorites=tuple(f for f in state.favorites if f.name != name)
    )


def start_loading(state: DashboardState) -> DashboardState:
    return replace(state, loading=True)


def finish_loading(state: DashboardState) -> DashboardState:
    return replace(state, loading=False)


def forecast_loaded(state: DashboardState, forecast: Forecast) -> DashboardState:
    return replace(state, forecast=forecast)


def forecast_failed(state: DashboardState) -> DashboardState:
    return replace(state, forecast=None)
