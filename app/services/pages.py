# app/services/pages.py
from __future__ import annotations

from .geo_store import GeoStore
from ..models.lookup import Found


class PageEnumerator:
    """
    Lists every location page to render and to put in the sitemap.

    Reads straight from the ``GeoStore`` collections, so every emitted slug
    or pair resolves through the same store.
    """

    def __init__(self, store: GeoStore):
        self.store = store

    def enumerate_hub_pages(self) -> tuple[str, ...]:
        return self.store.get_all_hub_slugs()

    def enumerate_city_pages(self) -> tuple[tuple[str, str], ...]:
        pairs: list[tuple[str, str]] = []
        for hub_slug in self.store.get_all_hub_slugs():
            for city_slug in self.store.get_all_city_slugs_for_hub(hub_slug):
                pairs.append((hub_slug, city_slug))
        return tuple(pairs)

    def is_city_indexable(self, hub_slug: str) -> bool:
        # read from the hub record on every call, never cached
        result = self.store.get_hub_by_slug(hub_slug)
        if isinstance(result, Found):
            return result.value.index_city_pages is True
        return False

    def indexable_city_pages(self) -> tuple[tuple[str, str], ...]:
        return tuple(
            (hub_slug, city_slug)
            for hub_slug, city_slug in self.enumerate_city_pages()
            if self.is_city_indexable(hub_slug)
        )
