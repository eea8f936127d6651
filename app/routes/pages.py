# app/routes/pages.py
from flask import Blueprint, current_app, render_template

from ..data.pricing import PRICING_TIERS
from ..data.tracks import EPK_TRACKS, TRACKS
from ..services.schema import (
    build_performing_group_schema,
    build_person_schema,
    build_pricing_offer_schemas,
    build_website_schema,
)

bp = Blueprint("pages", __name__)


def _site():
    return current_app.extensions["site"]


@bp.get("/")
def home():
    site = _site()
    return render_template(
        "home.html",
        nav_key="home",
        title=f"{site.name} | {site.short_description}",
        description=site.description,
        canonical=site.url,
        schemas=[build_website_schema(site), build_performing_group_schema(site)],
    )


@bp.get("/about")
def about():
    site = _site()
    return render_template(
        "about.html",
        nav_key="about",
        title=f"About | {site.name}",
        description=f"Meet {site.name}, an open-format DJ based in {site.city}, {site.state} and available nationwide.",
        canonical=site.absolute("/about"),
        schemas=[build_person_schema(site)],
    )


@bp.get("/music")
def music():
    site = _site()
    return render_template(
        "music.html",
        nav_key="music",
        title=f"Music | {site.name}",
        description=f"Listen to mixes from {site.name}, blending genres and decades for every crowd.",
        canonical=site.absolute("/music"),
        tracks=TRACKS,
        schemas=[],
    )


@bp.get("/epk")
def epk():
    site = _site()
    return render_template(
        "epk.html",
        nav_key="epk",
        title=f"Electronic Press Kit | {site.name}",
        description=f"Electronic press kit for {site.name}: bio, mixes, and booking contact.",
        canonical=site.absolute("/epk"),
        tracks=EPK_TRACKS,
        schemas=[build_person_schema(site)],
    )


@bp.get("/pricing")
def pricing():
    site = _site()
    return render_template(
        "pricing.html",
        nav_key="pricing",
        title=f"Pricing | {site.name}",
        description=(
            f"{site.name} pricing packages for weddings, corporate events, and private parties. "
            "Starting at $1,999 for Essential Events, $3,499 for Signature Events, and $4,999 for Premier & Corporate."
        ),
        canonical=site.absolute("/pricing"),
        tiers=PRICING_TIERS,
        schemas=build_pricing_offer_schemas(site, PRICING_TIERS),
    )


@bp.get("/contact")
def contact():
    site = _site()
    return render_template(
        "contact.html",
        nav_key="contact",
        title=f"Book Now | {site.name}",
        description=f"Request a booking with {site.name}. Share your event details and get a response fast.",
        canonical=site.absolute("/contact"),
        schemas=[],
    )
