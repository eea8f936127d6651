# app/routes/service_areas.py
from flask import Blueprint, abort, current_app, render_template

from ..models.lookup import Found
from ..services.location_pages import city_page_context, hub_page_context, index_page_context
from ..services.registry import get_service_areas

bp = Blueprint("service_areas", __name__)


@bp.get("")
def service_areas_index():
    ctx = index_page_context(get_service_areas(), current_app.extensions["site"])
    return render_template("service_areas/index.html", nav_key="service_areas", **ctx)


@bp.get("/<hub_slug>")
def hub_page(hub_slug: str):
    result = hub_page_context(get_service_areas(), current_app.extensions["site"], hub_slug)
    if not isinstance(result, Found):
        abort(404)
    return render_template("service_areas/hub.html", nav_key="service_areas", **result.value)


@bp.get("/<hub_slug>/<city_slug>")
def city_page(hub_slug: str, city_slug: str):
    result = city_page_context(get_service_areas(), current_app.extensions["site"], hub_slug, city_slug)
    if not isinstance(result, Found):
        abort(404)
    return render_template("service_areas/city.html", nav_key="service_areas", **result.value)
