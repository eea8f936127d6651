# app/services/geo_store.py
"""
Read-only registry of hubs and the cities each hub serves.

Lookups never raise for unknown slugs; they return ``NOT_FOUND``.
"""
from __future__ import annotations

import logging
from typing import Iterable, Mapping

from ..errors import ConfigurationError
from ..models.lookup import NOT_FOUND, Found, Lookup
from ..models.service_area import City, Hub
from ..utils.slug import slugify

logger = logging.getLogger(__name__)


def _check_slug(slug: str) -> None:
    # slugs are URL path segments; they must already be in slugify() form
    if not slug or slugify(slug) != slug:
        raise ConfigurationError(f"Malformed slug: {slug!r}")


class GeoStore:
    def __init__(self, hubs: Iterable[Hub], cities_by_hub: Mapping[str, Iterable[City]]):
        self._hubs: tuple[Hub, ...] = tuple(hubs)
        if not self._hubs:
            raise ConfigurationError("Hub registry is empty")

        self._hub_index: dict[str, Hub] = {}
        for hub in self._hubs:
            _check_slug(hub.slug)
            if hub.slug in self._hub_index:
                raise ConfigurationError(f"Duplicate hub slug: {hub.slug!r}")
            self._hub_index[hub.slug] = hub

        self._cities: dict[str, tuple[City, ...]] = {}
        for hub_slug, cities in cities_by_hub.items():
            if hub_slug not in self._hub_index:
                raise ConfigurationError(f"City list for unknown hub: {hub_slug!r}")
            cities = tuple(cities)
            seen: set[str] = set()
            for city in cities:
                _check_slug(city.slug)
                if city.slug in seen:
                    raise ConfigurationError(f"Duplicate city slug {city.slug!r} under hub {hub_slug!r}")
                seen.add(city.slug)
            self._cities[hub_slug] = cities

        logger.debug(
            "Loaded %d hubs and %d cities",
            len(self._hubs),
            sum(len(c) for c in self._cities.values()),
        )

    @property
    def hubs(self) -> tuple[Hub, ...]:
        return self._hubs

    def get_hub_by_slug(self, slug: str) -> Lookup[Hub]:
        hub = self._hub_index.get(slug)
        if hub is None:
            return NOT_FOUND
        return Found(hub)

    def get_cities_by_hub(self, hub_slug: str) -> tuple[City, ...]:
        return self._cities.get(hub_slug, ())

    def get_city_by_slug(self, hub_slug: str, city_slug: str) -> Lookup[City]:
        # unknown hub and unknown city both mean "no such page"
        for city in self.get_cities_by_hub(hub_slug):
            if city.slug == city_slug:
                return Found(city)
        return NOT_FOUND

    def get_all_hub_slugs(self) -> tuple[str, ...]:
        return tuple(hub.slug for hub in self._hubs)

    def get_all_city_slugs_for_hub(self, hub_slug: str) -> tuple[str, ...]:
        return tuple(city.slug for city in self.get_cities_by_hub(hub_slug))


def default_geo_store() -> GeoStore:
    from ..data.service_areas import CITIES_BY_HUB, HUBS

    return GeoStore(HUBS, CITIES_BY_HUB)
