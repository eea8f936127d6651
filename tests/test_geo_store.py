import pytest

from app.data.service_areas import CITIES_BY_HUB, HUBS
from app.errors import ConfigurationError
from app.models.lookup import NOT_FOUND, Found, NotFound
from app.services.geo_store import GeoStore, default_geo_store

from conftest import make_cities, make_hub


@pytest.fixture
def store():
    return default_geo_store()


def test_hub_lookup(store):
    result = store.get_hub_by_slug("baltimore-md")
    assert isinstance(result, Found)
    assert result.value.name == "Baltimore"


def test_unknown_hub_is_not_found(store):
    result = store.get_hub_by_slug("atlantis-xx")
    assert result is NOT_FOUND
    assert isinstance(result, NotFound)
    assert not result


def test_cities_for_unknown_hub_is_empty(store):
    assert store.get_cities_by_hub("atlantis-xx") == ()
    assert store.get_all_city_slugs_for_hub("atlantis-xx") == ()


def test_city_lookup_is_scoped_to_hub(store):
    assert isinstance(store.get_city_by_slug("washington-dc", "arlington-va"), Found)
    # real city, wrong hub
    assert store.get_city_by_slug("chambersburg-pa", "arlington-va") is NOT_FOUND
    assert store.get_city_by_slug("atlantis-xx", "arlington-va") is NOT_FOUND
    assert store.get_city_by_slug("washington-dc", "atlantis-xx") is NOT_FOUND


def test_hub_slugs_follow_declaration_order(store):
    assert store.get_all_hub_slugs() == (
        "chambersburg-pa",
        "washington-dc",
        "baltimore-md",
        "philadelphia-pa",
        "pittsburgh-pa",
    )


def test_every_hub_slug_round_trips(store):
    for slug in store.get_all_hub_slugs():
        result = store.get_hub_by_slug(slug)
        assert isinstance(result, Found)
        assert result.value.slug == slug


def test_city_slugs_keep_declaration_order(store):
    slugs = store.get_all_city_slugs_for_hub("chambersburg-pa")
    assert slugs[:3] == ("waynesboro-pa", "shippensburg-pa", "greencastle-pa")
    assert slugs[-1] == "emmitsburg-md"
    assert len(slugs) == len(CITIES_BY_HUB["chambersburg-pa"])


def test_registry_city_counts():
    store = GeoStore(HUBS, CITIES_BY_HUB)
    counts = {slug: len(store.get_cities_by_hub(slug)) for slug in store.get_all_hub_slugs()}
    assert counts == {
        "chambersburg-pa": 35,
        "washington-dc": 39,
        "baltimore-md": 38,
        "philadelphia-pa": 40,
        "pittsburgh-pa": 39,
    }


def test_empty_registry_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        GeoStore([], {})


def test_duplicate_hub_slug_rejected():
    with pytest.raises(ConfigurationError):
        GeoStore([make_hub(), make_hub()], {})


def test_duplicate_city_slug_within_hub_rejected():
    with pytest.raises(ConfigurationError):
        GeoStore([make_hub()], {"sample-hub": make_cities("a-town", "a-town")})


def test_city_list_for_unknown_hub_rejected():
    with pytest.raises(ConfigurationError):
        GeoStore([make_hub()], {"other-hub": make_cities("a-town")})


@pytest.mark.parametrize("slug", ["", "Sample-Hub", "sample hub", "sample-hub/", "-sample-hub"])
def test_malformed_hub_slug_rejected(slug):
    with pytest.raises(ConfigurationError, match="Malformed slug"):
        GeoStore([make_hub(slug)], {})


def test_malformed_city_slug_rejected():
    with pytest.raises(ConfigurationError, match="Malformed slug"):
        GeoStore([make_hub()], {"sample-hub": make_cities("a-town", "b_town")})


def test_shipped_slugs_are_well_formed():
    # would have raised while loading
    store = default_geo_store()
    assert len(store.get_all_hub_slugs()) == len(HUBS)
