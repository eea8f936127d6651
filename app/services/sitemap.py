# app/services/sitemap.py
from __future__ import annotations

import html
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from .pages import PageEnumerator

# path, changefreq, priority
STATIC_PAGES: tuple[tuple[str, str, str], ...] = (
    ("/", "weekly", "1.0"),
    ("/about", "monthly", "0.7"),
    ("/music", "monthly", "0.8"),
    ("/epk", "monthly", "0.8"),
    ("/pricing", "monthly", "0.9"),
    ("/contact", "monthly", "0.7"),
)

SERVICE_AREAS_PATH = "/service-areas"


@dataclass(frozen=True)
class SitemapEntry:
    loc: str
    changefreq: str
    priority: str
    lastmod: Optional[date] = None


def hub_path(hub_slug: str) -> str:
    return f"{SERVICE_AREAS_PATH}/{hub_slug}"


def city_path(hub_slug: str, city_slug: str) -> str:
    return f"{SERVICE_AREAS_PATH}/{hub_slug}/{city_slug}"


def build_sitemap_entries(
    site_url: str,
    enumerator: PageEnumerator,
    lastmod: Optional[date] = None,
) -> list[SitemapEntry]:
    """
    Static pages, the service-area index and every hub page. City pages are
    listed only under hubs whose ``index_city_pages`` flag is on.
    """
    base = site_url.rstrip("/")
    entries: list[SitemapEntry] = []

    for path, changefreq, priority in STATIC_PAGES:
        loc = base if path == "/" else base + path
        entries.append(SitemapEntry(loc, changefreq, priority, lastmod))

    entries.append(SitemapEntry(base + SERVICE_AREAS_PATH, "monthly", "0.8", lastmod))

    for hub_slug in enumerator.enumerate_hub_pages():
        entries.append(SitemapEntry(base + hub_path(hub_slug), "monthly", "0.9", lastmod))

    for hub_slug, city_slug in enumerator.indexable_city_pages():
        entries.append(SitemapEntry(base + city_path(hub_slug, city_slug), "monthly", "0.7", lastmod))

    return entries


def render_sitemap_xml(entries: Iterable[SitemapEntry]) -> str:
    def esc(s: str) -> str:
        return html.escape(s, quote=True)

    parts = []
    for e in entries:
        lines = [f"    <loc>{esc(e.loc)}</loc>"]
        if e.lastmod is not None:
            lines.append(f"    <lastmod>{e.lastmod.isoformat()}</lastmod>")
        lines.append(f"    <changefreq>{esc(e.changefreq)}</changefreq>")
        lines.append(f"    <priority>{esc(e.priority)}</priority>")
        parts.append("  <url>\n" + "\n".join(lines) + "\n  </url>\n")

    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        + "".join(parts)
        + "</urlset>\n"
    )


def render_robots_txt(site_url: str) -> str:
    base = site_url.rstrip("/")
    return f"User-agent: *\nAllow: /\nSitemap: {base}/sitemap.xml\nHost: {base}\n"
