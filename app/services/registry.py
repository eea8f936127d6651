# app/services/registry.py
from __future__ import annotations

from dataclasses import dataclass

from flask import current_app

from .geo_store import GeoStore, default_geo_store
from .images import ImageResolver, default_image_resolver
from .pages import PageEnumerator

EXTENSION_KEY = "service_areas"


@dataclass(frozen=True)
class ServiceAreas:
    """
    The location registries, built once per app and shared read-only.
    """
    store: GeoStore
    images: ImageResolver
    pages: PageEnumerator


def build_service_areas(store: GeoStore | None = None, images: ImageResolver | None = None) -> ServiceAreas:
    store = store or default_geo_store()
    images = images or default_image_resolver()
    return ServiceAreas(store=store, images=images, pages=PageEnumerator(store))


def get_service_areas() -> ServiceAreas:
    return current_app.extensions[EXTENSION_KEY]
