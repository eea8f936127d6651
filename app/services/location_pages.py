# app/services/location_pages.py
"""
Template context for the service-area index, hub and city pages.
"""
from __future__ import annotations

from typing import Optional

from .images import SERVICE_AREAS_INDEX_KEY, city_image_key
from .registry import ServiceAreas
from .schema import (
    build_breadcrumb_schema,
    build_entertainment_business_schema,
    build_faq_schema,
    build_service_schema,
)
from .sitemap import SERVICE_AREAS_PATH, city_path, hub_path
from ..models.lookup import NOT_FOUND, Found, Lookup
from ..models.service_area import Hub
from ..site import SiteIdentity

TITLE_LIMIT = 60
DESCRIPTION_LIMIT = 155

ROBOTS_INDEX = "index,follow"
ROBOTS_NOINDEX = "noindex,follow"

HUB_NEARBY_LIMIT = 5
CITY_NEARBY_LIMIT = 12

DEFAULT_SETUP_ANSWER = (
    "Setup typically takes 60-90 minutes before your event. "
    "We arrive early to ensure everything is perfect before your guests arrive."
)


def pick_title(preferred: str, fallback: str) -> str:
    return preferred if len(preferred) <= TITLE_LIMIT else fallback


def clamp_description(text: str) -> str:
    if len(text) <= DESCRIPTION_LIMIT:
        return text
    return text[: DESCRIPTION_LIMIT - 3] + "..."


def _first_sentence(text: str) -> str:
    return text.split(".")[0] + "."


def hub_faq_items(hub: Hub) -> list[tuple[str, str]]:
    travel_note: Optional[str] = hub.notes.travel_note if hub.notes else None

    if travel_note:
        setup = f"Setup typically takes 60-90 minutes before your event. {_first_sentence(travel_note)}"
        radius = (
            f"We primarily serve events within approximately 20 miles of {hub.name}. {travel_note} "
            "For events beyond this radius, please contact us to discuss travel arrangements and any additional fees."
        )
    else:
        setup = DEFAULT_SETUP_ANSWER
        radius = (
            f"We primarily serve events within approximately 20 miles of {hub.name}. "
            "For events beyond this radius, please contact us to discuss travel arrangements and any additional fees."
        )

    return [
        (
            "Do you provide speakers and microphones?",
            "Yes! We provide a professional sound system including speakers, wireless microphones, and all "
            "necessary equipment. Our setup is designed to handle events of all sizes, from intimate gatherings "
            "to large venues.",
        ),
        ("How long does setup take?", setup),
        (
            "Do you take song requests?",
            "Absolutely! We encourage song requests and can work with you to create a custom playlist. You can "
            'provide a "must-play" list, a "do-not-play" list, and we\'ll take requests from your guests during '
            "the event.",
        ),
        ("Do you travel outside 20 miles?", radius),
        (
            "Do you provide lighting?",
            "Yes! We offer professional lighting packages including uplighting, dance floor lighting, and special "
            "effects. Lighting can be customized to match your event theme and venue.",
        ),
        (
            "How do deposits work?",
            "We typically require a deposit to secure your date, with the remaining balance due closer to your "
            "event. Specific terms and amounts can be discussed during your consultation. We accept various "
            "payment methods for your convenience.",
        ),
        (
            "What types of events do you DJ?",
            "We DJ a wide variety of events including weddings, corporate events, birthday parties, anniversaries, "
            "school dances, and private celebrations. No event is too big or too small!",
        ),
        (
            "Can you help with event planning?",
            "While we focus on DJ services, we're happy to provide guidance on timing, music selection, and event "
            "flow. We work closely with event planners and coordinators to ensure everything runs smoothly.",
        ),
    ]


def index_page_context(areas: ServiceAreas, site: SiteIdentity) -> dict:
    hubs = []
    for hub in areas.store.hubs:
        hubs.append({
            "hub": hub,
            # same key as the hub page so the listing shows the same photo
            "image": areas.images.resolve(hub.slug),
            "href": hub_path(hub.slug),
            "city_count": len(areas.store.get_cities_by_hub(hub.slug)),
        })

    return {
        "title": f"Service Areas | {site.name}",
        "description": (
            f"{site.name} serves weddings, corporate events, and parties in Pennsylvania, Maryland, "
            "Washington DC, and surrounding areas."
        ),
        "canonical": site.absolute(SERVICE_AREAS_PATH),
        "robots": ROBOTS_INDEX,
        "image": areas.images.resolve(SERVICE_AREAS_INDEX_KEY),
        "hubs": hubs,
        "schemas": [
            build_breadcrumb_schema([
                ("Home", site.url),
                ("Service Areas", site.absolute(SERVICE_AREAS_PATH)),
            ]),
        ],
    }


def hub_page_context(areas: ServiceAreas, site: SiteIdentity, hub_slug: str) -> Lookup[dict]:
    result = areas.store.get_hub_by_slug(hub_slug)
    if not isinstance(result, Found):
        return NOT_FOUND
    hub = result.value

    cities = areas.store.get_cities_by_hub(hub_slug)
    image = areas.images.resolve(hub_slug)
    canonical = site.absolute(hub_path(hub_slug))
    image_url = image.absolute_src(site.url)
    nearby = [c.name for c in cities[:HUB_NEARBY_LIMIT]]
    faq = hub_faq_items(hub)

    title = pick_title(
        f"DJ Services in {hub.name}, {hub.state} | {site.name}",
        f"DJ Services in {hub.name} | {site.name}",
    )
    description = clamp_description(
        f"Professional DJ services for weddings, corporate events, and parties in {hub.name}, {hub.state} "
        "and surrounding areas within 20 miles."
    )

    return Found({
        "hub": hub,
        "cities": [
            {"city": c, "href": city_path(hub_slug, c.slug)}
            for c in cities
        ],
        "image": image,
        "image_url": image_url,
        "title": title,
        "description": description,
        "canonical": canonical,
        "robots": ROBOTS_INDEX,
        "faq": faq,
        "schemas": [
            build_entertainment_business_schema(
                site,
                url=canonical,
                image=image_url,
                area_name=hub.name,
                state=hub.state,
                nearby_cities=nearby,
            ),
            build_service_schema(site, url=canonical, area_name=hub.name, state=hub.state),
            build_breadcrumb_schema([
                ("Home", site.url),
                ("Service Areas", site.absolute(SERVICE_AREAS_PATH)),
                (hub.label, canonical),
            ]),
            build_faq_schema(faq),
        ],
    })


def city_page_context(areas: ServiceAreas, site: SiteIdentity, hub_slug: str, city_slug: str) -> Lookup[dict]:
    hub_result = areas.store.get_hub_by_slug(hub_slug)
    city_result = areas.store.get_city_by_slug(hub_slug, city_slug)
    if not isinstance(hub_result, Found) or not isinstance(city_result, Found):
        return NOT_FOUND
    hub, city = hub_result.value, city_result.value

    image = areas.images.resolve(city_image_key(hub_slug, city_slug))
    canonical = site.absolute(city_path(hub_slug, city_slug))
    image_url = image.absolute_src(site.url)
    others = [c for c in areas.store.get_cities_by_hub(hub_slug) if c.slug != city_slug][:CITY_NEARBY_LIMIT]

    title = pick_title(
        f"DJ Services in {city.name}, {city.state} | {site.name}",
        f"DJ Services in {city.name} | {site.name}",
    )
    description = clamp_description(
        f"Professional DJ services for weddings, corporate events, and parties in {city.name}, {city.state}. "
        f"Serving within 20 miles of {hub.name}."
    )

    return Found({
        "hub": hub,
        "city": city,
        "hub_href": hub_path(hub_slug),
        "nearby": [
            {"city": c, "href": city_path(hub_slug, c.slug)}
            for c in others
        ],
        "image": image,
        "image_url": image_url,
        "title": title,
        "description": description,
        "canonical": canonical,
        "robots": ROBOTS_INDEX if areas.pages.is_city_indexable(hub_slug) else ROBOTS_NOINDEX,
        "schemas": [
            build_entertainment_business_schema(
                site,
                url=canonical,
                image=image_url,
                area_name=city.name,
                state=city.state,
                nearby_cities=[c.name for c in others],
            ),
            build_service_schema(site, url=canonical, area_name=city.name, state=city.state),
            build_breadcrumb_schema([
                ("Home", site.url),
                ("Service Areas", site.absolute(SERVICE_AREAS_PATH)),
                (hub.label, site.absolute(hub_path(hub_slug))),
                (city.label, canonical),
            ]),
        ],
    })
