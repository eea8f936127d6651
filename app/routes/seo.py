# app/routes/seo.py
from datetime import date

from flask import Blueprint, Response, current_app

from ..services.registry import get_service_areas
from ..services.sitemap import build_sitemap_entries, render_robots_txt, render_sitemap_xml

bp = Blueprint("seo", __name__)


@bp.get("/sitemap.xml")
def sitemap():
    site = current_app.extensions["site"]
    entries = build_sitemap_entries(site.url, get_service_areas().pages, lastmod=date.today())
    return Response(render_sitemap_xml(entries), mimetype="application/xml")


@bp.get("/robots.txt")
def robots():
    site = current_app.extensions["site"]
    return Response(render_robots_txt(site.url), mimetype="text/plain")
