"""Weather session: owns the dashboard state and wires search to forecasts."""

import logging

from weathernow.config.loader import to_location
from weathernow.config.schema import WeatherNowConfig
from weathernow.ingest.forecast_client import ForecastClient
from weathernow.ingest.forecast_fetcher import ForecastFetcher
from weathernow.ingest.geocoding_client import GeocodingClient
from weathernow.ingest.suggestion_resolver import SuggestionResolver
from weathernow.models.location import Location, Suggestion
from weathernow.search.debounce import Scheduler
from weathernow.search.query_controller import QueryController
from weathernow.state import dashboard_state as ds
from weathernow.state.dashboard_state import DashboardState

logger = logging.getLogger(__name__)


class WeatherSession:
    def __init__(
        self,
        config: WeatherNowConfig,
        fetcher: ForecastFetcher,
        resolver: SuggestionResolver,
        scheduler: Scheduler | None = None,
    ):
        self.config = config
        self.fetcher = fetcher
        self._refresh_seq = 0
        self.state = DashboardState(
            location=to_location(config.default_location),
            favorites=tuple(to_location(f) for f in config.favorites),
        )
        self.search = QueryController(
            resolver,
            on_suggestions=self._on_suggestions,
            quiet_period=config.search.debounce_ms / 1000,
            scheduler=scheduler,
        )

    @classmethod
    def from_config(cls, config: WeatherNowConfig) -> "WeatherSession":
        api = config.api
        geocoder = GeocodingClient(
            base_url=api.geocoding_url,
            timeout=api.timeout_seconds,
            language=api.language,
        )
        resolver = SuggestionResolver(geocoder, count=api.suggestion_count)
        fetcher = ForecastFetcher(
            ForecastClient(base_url=api.forecast_url, timeout=api.timeout_seconds)
        )
        return cls(config, fetcher, resolver)

    def type_query(self, text: str) -> None:
        self.state = ds.with_query(self.state, text)
        self.search.on_input(text)

    async def lookup(self, text: str) -> tuple[Suggestion, ...]:
        """Immediate search for one-shot callers; returns its own results."""
        self.state = ds.with_query(self.state, text)
        return await self.search.lookup(text)

    async def choose_suggestion(self, suggestion: Suggestion) -> DashboardState:
        self.search.select(suggestion)
        self.state = ds.select_suggestion(self.state, suggestion)
        return await self.refresh()

    async def choose_location(self, location: Location) -> DashboardState:
        self.state = ds.select_location(self.state, location)
        return await self.refresh()

    async def choose_favorite(self, name: str) -> DashboardState:
        for fav in self.state.favorites:
            if fav.name == name:
                return await self.choose_location(fav)
        raise KeyError(f"No favorite named {name!r}")

    def add_favorite(self) -> DashboardState:
        self.state = ds.add_favorite(self.state)
        return self.state

    def remove_favorite(self, name: str) -> DashboardState:
        self.state = ds.remove_favorite(self.state, name)
        return self.state

    async def refresh(self) -> DashboardState:
        """Fetch the forecast for the active location.

        Each call is stamped with a refresh number. Only the latest refresh
        applies its reply and releases the loading flag; a superseded reply
        (older location, or an earlier refresh of the same one) is dropped.
        """
        self._refresh_seq += 1
        seq = self._refresh_seq
        location = self.state.location
        self.state = ds.start_loading(self.state)
        try:
            forecast = await self.fetcher.fetch(location)
            if seq != self._refresh_seq:
                logger.debug(
                    "Dropping forecast #%d for %s (latest #%d)",
                    seq, location.name, self._refresh_seq,
                )
            elif forecast is None:
                self.state = ds.forecast_failed(self.state)
            else:
                self.state = ds.forecast_loaded(self.state, forecast)
        finally:
            if seq == self._refresh_seq:
                self.state = ds.finish_loading(self.state)
        return self.state

    def close(self) -> None:
        self.search.close()

    def _on_suggestions(self, suggestions: tuple[Suggestion, ...]) -> None:
        self.state = ds.with_suggestions(self.state, suggestions)
