# app/site.py
"""
Site-wide identity used for metadata, JSON-LD and outgoing mail.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Author:
    name: str = "DJ Miles Morales"
    job_title: str = "DJ / Open-Format DJ"
    email: str = "booking@djmilesmorales.com"


@dataclass(frozen=True)
class SiteIdentity:
    url: str = "https://djmilesmorales.com"
    name: str = "DJ Miles Morales"
    description: str = (
        "Skillful, experienced, and versatile. DJ Miles Morales is one of the premier open-format DJs "
        "in the country. Based in Chambersburg, PA and available nationwide."
    )
    short_description: str = "Open-Format DJ for Corporate, Fashion, & Luxury Events"
    author: Author = field(default_factory=Author)

    city: str = "Chambersburg"
    state: str = "PA"
    country: str = "US"
    service_area: str = "Nationwide"

    # placeholder until a booking line is published
    telephone: str = "(717) 555-0000"

    social: tuple[tuple[str, str], ...] = (
        ("instagram", "https://instagram.com/djmilesmorales"),
        ("tiktok", "https://tiktok.com/@djmilesmorales"),
        ("facebook", "https://facebook.com/djmilesmorales"),
        ("twitter", "https://twitter.com/djmilesmorales"),
    )

    # hosted portrait, also entry 1 of the service-area photo pool
    logo: str = "https://images.bestroi.media/miles-morales/Facetune_14-12-2025-10-45-12.avif"
    og_image: str = "https://images.bestroi.media/miles-morales/Facetune_14-12-2025-10-45-12.avif"

    keywords: tuple[str, ...] = (
        "DJ",
        "Miles Morales",
        "Wedding DJ",
        "Corporate DJ",
        "Event DJ",
        "Open Format DJ",
        "Pennsylvania DJ",
        "Fashion Show DJ",
        "Radio DJ",
        "Chambersburg DJ",
    )

    @property
    def social_links(self) -> list[str]:
        return [href for _, href in self.social if href]

    def absolute(self, path: str) -> str:
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return self.url.rstrip("/") + path


SITE = SiteIdentity()


def site_for_url(url: str | None) -> SiteIdentity:
    if not url:
        return SITE
    return replace(SITE, url=url.rstrip("/"))
