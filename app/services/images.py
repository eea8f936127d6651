# app/services/images.py
"""
Stable photo selection for service-area pages.

The same slug always gets the same photo: hub slugs listed in the override
table use their hand-picked index, everything else goes through ``hash_slug``.
"""
from __future__ import annotations

from typing import Mapping, Sequence

from ..errors import ConfigurationError
from ..models.image import ImagePoolEntry
from ..utils.slug import hash_slug

SERVICE_AREAS_INDEX_KEY = "service-areas"


def city_image_key(hub_slug: str, city_slug: str) -> str:
    return f"{hub_slug}/{city_slug}"


class ImageResolver:
    def __init__(self, pool: Sequence[ImagePoolEntry], overrides: Mapping[str, int] | None = None):
        self._pool = tuple(pool)
        if not self._pool:
            raise ConfigurationError("Image pool is empty")
        self._overrides = dict(overrides or {})

    @property
    def pool(self) -> tuple[ImagePoolEntry, ...]:
        return self._pool

    def index_for(self, slug: str) -> int:
        size = len(self._pool)
        if slug in self._overrides:
            # modulo keeps old override values valid if the pool shrinks
            return self._overrides[slug] % size
        return hash_slug(slug) % size

    def resolve(self, slug: str) -> ImagePoolEntry:
        return self._pool[self.index_for(slug)]


def default_image_resolver() -> ImageResolver:
    from ..data.service_area_images import HUB_IMAGE_ASSIGNMENTS, SERVICE_AREA_IMAGES

    return ImageResolver(SERVICE_AREA_IMAGES, HUB_IMAGE_ASSIGNMENTS)
