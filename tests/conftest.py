import sys
from pathlib import Path

import pytest

# Make the repo root importable when running pytest from anywhere
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from app.config import Config  # noqa: E402
from app.models.service_area import City, Hub  # noqa: E402


class TestConfig(Config):
    __test__ = False

    TESTING = True
    SITE_URL = "https://example.test"
    SMTP_HOST = "smtp.example.test"
    SMTP_PORT = 587
    SMTP_USER = "no-reply@example.test"
    SMTP_PASSWORD = "secret"
    SMTP_FROM = ""
    CONTACT_RECIPIENTS = "owner@example.test,manager@example.test"
    LOG_LEVEL = "DEBUG"


def make_hub(slug="sample-hub", index_city_pages=False, name="Sample"):
    return Hub(
        name=name,
        state="PA",
        slug=slug,
        latitude=40.0,
        longitude=-77.0,
        intro_copy=f"Intro for {name}.",
        index_city_pages=index_city_pages,
    )


def make_cities(*slugs):
    return tuple(City(s.replace("-", " ").title(), "PA", s) for s in slugs)


@pytest.fixture
def app():
    return create_app(TestConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()
