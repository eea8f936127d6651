import pytest

from app import create_app
from app.data.service_area_images import SERVICE_AREA_IMAGES
from app.services.geo_store import GeoStore
from app.services.registry import build_service_areas

from conftest import TestConfig, make_cities, make_hub


@pytest.mark.parametrize("path", ["/", "/about", "/music", "/epk", "/pricing", "/contact", "/service-areas"])
def test_static_pages_render(client, path):
    resp = client.get(path)
    assert resp.status_code == 200
    assert b"DJ Miles Morales" in resp.data
    assert b'application/ld+json' in resp.data or path in ("/music", "/contact")


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}


def test_service_area_index_lists_hubs(client):
    body = client.get("/service-areas").get_data(as_text=True)
    for slug in ("chambersburg-pa", "washington-dc", "baltimore-md", "philadelphia-pa", "pittsburgh-pa"):
        assert f'href="/service-areas/{slug}"' in body


def test_hub_page(client):
    resp = client.get("/service-areas/chambersburg-pa")
    body = resp.get_data(as_text=True)
    assert resp.status_code == 200
    assert "DJ Services in Chambersburg, PA" in body
    assert SERVICE_AREA_IMAGES[0].src in body
    assert '<meta name="robots" content="index,follow" />' in body
    assert '<link rel="canonical" href="https://example.test/service-areas/chambersburg-pa" />' in body
    assert 'href="/service-areas/chambersburg-pa/waynesboro-pa"' in body
    assert '"@type": "FAQPage"' in body or '"@type":"FAQPage"' in body


def test_city_page_is_noindex_by_default(client):
    resp = client.get("/service-areas/washington-dc/arlington-va")
    body = resp.get_data(as_text=True)
    assert resp.status_code == 200
    assert "DJ Services in Arlington, VA" in body
    assert '<meta name="robots" content="noindex,follow" />' in body


def test_city_page_indexable_when_hub_opts_in():
    store = GeoStore([make_hub(index_city_pages=True)], {"sample-hub": make_cities("a-town")})
    app = create_app(TestConfig, service_areas=build_service_areas(store=store))
    body = app.test_client().get("/service-areas/sample-hub/a-town").get_data(as_text=True)
    assert '<meta name="robots" content="index,follow" />' in body


@pytest.mark.parametrize("path", [
    "/service-areas/atlantis-xx",
    "/service-areas/atlantis-xx/waynesboro-pa",
    "/service-areas/chambersburg-pa/arlington-va",
    "/service-areas/chambersburg-pa/atlantis-xx",
])
def test_unknown_locations_404(client, path):
    resp = client.get(path)
    assert resp.status_code == 404
    assert b"Page Not Found" in resp.data


def test_api_404_is_json(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Not found"}


def test_sitemap_route(client):
    resp = client.get("/sitemap.xml")
    body = resp.get_data(as_text=True)
    assert resp.status_code == 200
    assert resp.mimetype == "application/xml"
    assert "<loc>https://example.test/service-areas/baltimore-md</loc>" in body
    assert "/service-areas/baltimore-md/towson-md" not in body
    assert "<lastmod>" in body


def test_robots_route(client):
    resp = client.get("/robots.txt")
    assert resp.mimetype == "text/plain"
    assert "Sitemap: https://example.test/sitemap.xml" in resp.get_data(as_text=True)


def test_empty_image_pool_stops_startup():
    from app.errors import ConfigurationError
    from app.services.images import ImageResolver

    with pytest.raises(ConfigurationError):
        create_app(TestConfig, service_areas=build_service_areas(images=ImageResolver([])))
