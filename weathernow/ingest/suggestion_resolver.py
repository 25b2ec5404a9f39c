"""Query string -> formatted location suggestions.

Failures are swallowed here: callers see an empty list for both "nothing
matched" and "the geocoder could not be reached".
"""

import logging

from weathernow.ingest.geocoding_client import DEFAULT_COUNT, GeocodingClient
from weathernow.models.location import Suggestion

logger = logging.getLogger(__name__)


class SuggestionResolver:
    def __init__(self, geocoder: GeocodingClient, count: int = DEFAULT_COUNT):
        self.geocoder = geocoder
        self.count = count

    async def resolve(self, query: str) -> list[Suggestion]:
        if not query:
            return []
        try:
            raw = await self.geocoder.search(query, count=self.count)
            return [_to_suggestion(r) for r in raw[: self.count]]
        except Exception:
            logger.exception("Failed to resolve suggestions for %r", query)
            return []


def format_place_name(
    name: str, admin1: str | None = None, country: str | None = None
) -> str:
    """Join as "Paris, Île-de-France, France", omitting parts the provider left out."""
    return ", ".join(part for part in (name, admin1, country) if part)


def _to_suggestion(raw: dict) -> Suggestion:
    return Suggestion(
        name=format_place_name(raw["name"], raw.get("admin1"), raw.get("country")),
        lat=float(raw["latitude"]),
        lon=float(raw["longitude"]),
    )
