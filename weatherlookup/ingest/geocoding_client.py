"""Open-Meteo geocoding client: place name to coordinates and suggestions."""

import logging

from weatherlookup.config.schema import GeocodingConfig
from weatherlookup.errors import MalformedDataError, NotFoundError
from weatherlookup.ingest.http import http_get
from weatherlookup.models.location import Coordinate, PlaceSuggestion

logger = logging.getLogger(__name__)

MIN_SUGGEST_CHARS = 2


class GeocodingClient:
    def __init__(self, config: GeocodingConfig | None = None):
        self.config = config or GeocodingConfig()

    def resolve(self, place_name: str) -> Coordinate:
        """Resolve a place name to the provider's first matching coordinate."""
        name = place_name.strip()
        if not name:
            raise NotFoundError(place_name)

        results = self._search(name, count=1)
        if not results:
            raise NotFoundError(name)

        first = results[0]
        lat = first.get("latitude")
        lon = first.get("longitude")
        if not _is_number(lat):
            raise MalformedDataError("results[0].latitude", f"got {lat!r}")
        if not _is_number(lon):
            raise MalformedDataError("results[0].longitude", f"got {lon!r}")
        return Coordinate(latitude=float(lat), longitude=float(lon))

    def suggest(self, partial_name: str, limit: int = 5) -> list[PlaceSuggestion]:
        """Return up to `limit` place suggestions in provider order.

        Never raises: suggestions are a convenience, so any provider or
        parse failure is logged and yields an empty list.
        """
        name = partial_name.strip()
        if len(name) < MIN_SUGGEST_CHARS or limit <= 0:
            return []

        try:
            # Ask for extra rows so duplicates don't starve the result
            results = self._search(name, count=limit * 2)
        except Exception as e:
            logger.warning("Suggestion lookup failed for %r: %s", name, e)
            return []

        suggestions: list[PlaceSuggestion] = []
        seen: set[str] = set()
        for r in results:
            display_name = r.get("name")
            if not isinstance(display_name, str) or not display_name:
                continue
            if display_name in seen:
                continue
            seen.add(display_name)
            suggestions.append(
                PlaceSuggestion(
                    display_name=display_name,
                    country=r.get("country") or None,
                    region=r.get("admin1") or None,
                )
            )
            if len(suggestions) >= limit:
                break
        return suggestions

    def _search(self, name: str, count: int) -> list[dict]:
        params = {
            "name": name,
            "count": count,
            "language": self.config.language,
            "format": "json",
        }
        resp = http_get(
            self.config.base_url,
            params,
            user_agent=self.config.user_agent,
            connect_timeout=self.config.connect_timeout,
            read_timeout=self.config.read_timeout,
        )
        try:
            data = resp.json()
        except ValueError as e:
            raise MalformedDataError("body", "geocoding response is not JSON") from e
        if not isinstance(data, dict):
            raise MalformedDataError("body", "expected a JSON object")

        # The provider omits "results" entirely when nothing matches
        results = data.get("results") or []
        if not isinstance(results, list):
            raise MalformedDataError("results", "expected a list")
        return [r for r in results if isinstance(r, dict)]


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
