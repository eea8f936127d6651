import pytest

from app.data.service_area_images import HUB_IMAGE_ASSIGNMENTS, SERVICE_AREA_IMAGES
from app.errors import ConfigurationError
from app.models.image import ImagePoolEntry
from app.services.geo_store import default_geo_store
from app.services.images import ImageResolver, city_image_key, default_image_resolver
from app.utils.slug import hash_slug


@pytest.fixture
def resolver():
    return default_image_resolver()


def test_pool_has_26_entries():
    assert len(SERVICE_AREA_IMAGES) == 26


def test_hub_override_is_stable(resolver):
    first = SERVICE_AREA_IMAGES[0]
    for _ in range(1000):
        assert resolver.resolve("chambersburg-pa") is first


def test_every_override_wins_over_hash(resolver):
    for slug, index in HUB_IMAGE_ASSIGNMENTS.items():
        assert resolver.index_for(slug) == index % len(SERVICE_AREA_IMAGES)
        assert resolver.resolve(slug) == SERVICE_AREA_IMAGES[index]


def test_override_index_wraps_when_pool_shrinks():
    pool = [ImagePoolEntry(f"/img/{i}.avif", f"photo {i}") for i in range(3)]
    resolver = ImageResolver(pool, {"big-hub": 7})
    assert resolver.resolve("big-hub") == pool[1]


def test_non_override_slug_uses_hash(resolver):
    slug = city_image_key("chambersburg-pa", "waynesboro-pa")
    assert resolver.index_for(slug) == hash_slug(slug) % 26


def test_resolution_does_not_depend_on_call_order():
    a = default_image_resolver()
    b = default_image_resolver()
    slugs = ["service-areas", "washington-dc/vienna-va", "pittsburgh-pa/plum-pa"]
    forward = [a.resolve(s) for s in slugs]
    backward = [b.resolve(s) for s in reversed(slugs)]
    assert forward == list(reversed(backward))


@pytest.mark.parametrize("slug", ["", "😀", "with spaces", "ÄÖÜ", "\n", "a/b/c"])
def test_resolve_is_total(resolver, slug):
    assert resolver.resolve(slug) in SERVICE_AREA_IMAGES


def test_city_slugs_spread_over_pool(resolver):
    store = default_geo_store()
    indices = {
        resolver.index_for(city_image_key(hub_slug, city_slug))
        for hub_slug in store.get_all_hub_slugs()
        for city_slug in store.get_all_city_slugs_for_hub(hub_slug)
    }
    assert len(indices) > 1


def test_empty_pool_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        ImageResolver([], {})


def test_absolute_src():
    assert ImagePoolEntry("/static/a.jpg", "a").absolute_src("https://example.test/") == "https://example.test/static/a.jpg"
    assert ImagePoolEntry("https://cdn.test/a.jpg", "a").absolute_src("https://example.test") == "https://cdn.test/a.jpg"
