# app/services/schema.py
"""
JSON-LD builders. Every function returns a plain dict ready for ``tojson``.
"""
from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..models.content import PricingTier
from ..site import SiteIdentity

SCHEMA_CONTEXT = "https://schema.org"


def _postal_address(locality: str, region: str, country: str = "US") -> dict:
    return {
        "@type": "PostalAddress",
        "addressLocality": locality,
        "addressRegion": region,
        "addressCountry": country,
    }


def build_person_schema(site: SiteIdentity) -> dict:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Person",
        "name": site.author.name,
        "description": site.description,
        "jobTitle": site.author.job_title,
        "url": site.url,
        "image": site.absolute(site.og_image),
        "sameAs": site.social_links,
        "address": _postal_address(site.city, site.state, site.country),
    }


def build_performing_group_schema(site: SiteIdentity) -> dict:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "PerformingGroup",
        "name": site.name,
        "description": site.description,
        "url": site.url,
        "logo": site.absolute(site.logo),
        "image": site.absolute(site.og_image),
        "sameAs": site.social_links,
        "address": _postal_address(site.city, site.state, site.country),
        "areaServed": site.service_area,
        "contactPoint": {
            "@type": "ContactPoint",
            "email": site.author.email,
            "contactType": "booking",
        },
    }


def build_website_schema(site: SiteIdentity) -> dict:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebSite",
        "name": site.name,
        "url": site.url,
        "description": site.short_description,
    }


def build_entertainment_business_schema(
    site: SiteIdentity,
    *,
    url: str,
    image: str,
    area_name: str,
    state: str,
    nearby_cities: Optional[Sequence[str]] = None,
) -> dict:
    area_served: list[str] = [f"{area_name}, {state}"]
    if nearby_cities:
        area_served.extend(f"{city}, {state}" for city in list(nearby_cities)[:5])

    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "EntertainmentBusiness",
        "name": site.name,
        "description": site.description,
        "url": url,
        "logo": site.absolute(site.logo),
        "image": image,
        "telephone": site.telephone,
        "areaServed": area_served[0] if len(area_served) == 1 else area_served,
        "address": _postal_address(area_name, state),
        "sameAs": site.social_links,
        "contactPoint": {
            "@type": "ContactPoint",
            "email": site.author.email,
            "contactType": "booking",
        },
    }


def build_service_schema(site: SiteIdentity, *, url: str, area_name: str, state: str) -> dict:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Service",
        "name": f"DJ Services in {area_name}",
        "url": url,
        "description": (
            "Professional DJ services for weddings, corporate events, parties, "
            f"and celebrations in {area_name}, {state}."
        ),
        "serviceType": ["Wedding DJ", "Corporate DJ", "Event DJ", "Party DJ"],
        "provider": {
            "@type": "Person",
            "name": site.author.name,
            "url": site.url,
        },
        "areaServed": {
            "@type": "City",
            "name": area_name,
            "addressRegion": state,
        },
    }


def build_breadcrumb_schema(items: Iterable[tuple[str, str]]) -> dict:
    """
    items: (name, url) pairs, outermost first.
    """
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": position,
                "name": name,
                "item": url,
            }
            for position, (name, url) in enumerate(items, start=1)
        ],
    }


def build_faq_schema(items: Iterable[tuple[str, str]]) -> dict:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": question,
                "acceptedAnswer": {"@type": "Answer", "text": answer},
            }
            for question, answer in items
        ],
    }


def build_pricing_offer_schemas(site: SiteIdentity, tiers: Iterable[PricingTier]) -> list[dict]:
    out = []
    for tier in tiers:
        digits = "".join(ch for ch in tier.price if ch.isdigit())
        out.append({
            "@context": SCHEMA_CONTEXT,
            "@type": "Service",
            "name": tier.name,
            "description": tier.description,
            "provider": {"@type": "Person", "name": site.author.name, "url": site.url},
            "offers": {
                "@type": "Offer",
                "price": digits or None,
                "priceCurrency": "USD",
                "url": site.absolute("/pricing"),
            },
        })
    return out
