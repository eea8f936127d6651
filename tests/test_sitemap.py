from datetime import date

from app.services.geo_store import GeoStore, default_geo_store
from app.services.pages import PageEnumerator
from app.services.sitemap import (
    SitemapEntry,
    build_sitemap_entries,
    render_robots_txt,
    render_sitemap_xml,
)

from conftest import make_cities, make_hub

SITE = "https://example.test"


def _locs(entries):
    return [e.loc for e in entries]


def test_default_sitemap_has_static_index_and_hubs_only():
    entries = build_sitemap_entries(SITE, PageEnumerator(default_geo_store()))
    locs = _locs(entries)

    assert locs[0] == SITE
    assert f"{SITE}/pricing" in locs
    assert f"{SITE}/service-areas" in locs
    assert f"{SITE}/service-areas/pittsburgh-pa" in locs
    # 6 static pages + index + 5 hubs; no city pages while every hub is closed
    assert len(entries) == 12
    assert not any(loc.count("/") > 4 for loc in locs)


def test_city_pages_listed_only_for_open_hubs():
    store = GeoStore(
        [make_hub("open-hub", index_city_pages=True), make_hub("closed-hub")],
        {
            "open-hub": make_cities("a-town", "b-town"),
            "closed-hub": make_cities("c-town"),
        },
    )
    locs = _locs(build_sitemap_entries(SITE + "/", PageEnumerator(store)))

    assert f"{SITE}/service-areas/open-hub/a-town" in locs
    assert f"{SITE}/service-areas/open-hub/b-town" in locs
    assert f"{SITE}/service-areas/closed-hub" in locs
    assert f"{SITE}/service-areas/closed-hub/c-town" not in locs


def test_priorities():
    store = GeoStore([make_hub(index_city_pages=True)], {"sample-hub": make_cities("a-town")})
    by_loc = {e.loc: e for e in build_sitemap_entries(SITE, PageEnumerator(store))}

    assert by_loc[SITE].priority == "1.0"
    assert by_loc[SITE].changefreq == "weekly"
    assert by_loc[f"{SITE}/service-areas"].priority == "0.8"
    assert by_loc[f"{SITE}/service-areas/sample-hub"].priority == "0.9"
    assert by_loc[f"{SITE}/service-areas/sample-hub/a-town"].priority == "0.7"


def test_render_sitemap_xml():
    xml = render_sitemap_xml([
        SitemapEntry(f"{SITE}/a?b=1&c=2", "monthly", "0.5", date(2026, 1, 2)),
        SitemapEntry(f"{SITE}/plain", "weekly", "1.0"),
    ])
    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">' in xml
    assert "<loc>https://example.test/a?b=1&amp;c=2</loc>" in xml
    assert "<lastmod>2026-01-02</lastmod>" in xml
    assert xml.count("<lastmod>") == 1
    assert xml.count("<url>") == 2


def test_robots_txt():
    assert render_robots_txt(SITE + "/") == (
        "User-agent: *\n"
        "Allow: /\n"
        "Sitemap: https://example.test/sitemap.xml\n"
        "Host: https://example.test\n"
    )


def test_city_pages_follow_hub_pages():
    store = GeoStore(
        [make_hub("open-hub", index_city_pages=True), make_hub("second-hub", index_city_pages=True)],
        {"open-hub": make_cities("a-town"), "second-hub": make_cities("b-town")},
    )
    enumerator = PageEnumerator(store)
    locs = _locs(build_sitemap_entries(SITE, enumerator))

    assert locs[-4:] == [
        f"{SITE}/service-areas/open-hub",
        f"{SITE}/service-areas/second-hub",
        f"{SITE}/service-areas/open-hub/a-town",
        f"{SITE}/service-areas/second-hub/b-town",
    ]
    assert len(locs) == 8 + len(enumerator.indexable_city_pages())
