import logging

from flask import Flask, jsonify, render_template, request

from .config import Config
from .extensions import cors
from .services.registry import EXTENSION_KEY, build_service_areas
from .site import site_for_url

NAV_LINKS = (
    ("home", "/", "Home"),
    ("about", "/about", "About"),
    ("music", "/music", "Music"),
    ("epk", "/epk", "EPK"),
    ("pricing", "/pricing", "Pricing"),
    ("service_areas", "/service-areas", "Service Areas"),
)


def create_app(config_object=Config, service_areas=None):
    app = Flask(__name__)
    app.config.from_object(config_object)

    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    cors.init_app(
        app,
        resources={
            r"/api/*": {
                "origins": app.config["CORS_ORIGINS"],
                "methods": ["POST", "OPTIONS"],
                "allow_headers": ["Content-Type"],
            }},
    )

    # Static registries are built once here; bad data stops startup
    app.extensions[EXTENSION_KEY] = service_areas or build_service_areas()
    app.extensions["site"] = site_for_url(app.config.get("SITE_URL"))

    @app.context_processor
    def inject_site():
        return {"site": app.extensions["site"], "nav_links": NAV_LINKS}

    # Register blueprints
    from .routes.pages import bp as pages_bp
    from .routes.service_areas import bp as service_areas_bp
    from .routes.seo import bp as seo_bp
    from .routes.contact import bp as contact_bp

    app.register_blueprint(pages_bp)
    app.register_blueprint(service_areas_bp, url_prefix="/service-areas")
    app.register_blueprint(seo_bp)
    app.register_blueprint(contact_bp, url_prefix="/api/contact")

    from .build import register_cli

    register_cli(app)

    @app.get("/api/health")
    def health():
        return jsonify(status="ok")

    @app.errorhandler(404)
    def not_found(_error):
        if request.path.startswith("/api/"):
            return jsonify(error="Not found"), 404
        return render_template("404.html", title="Page Not Found", robots="noindex,follow"), 404

    logging.getLogger(__name__).debug("App created for %s", app.config.get("SITE_URL"))
    return app
