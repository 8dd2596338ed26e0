import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest
import requests

from fake_http import FakeResponse, FakeSession
from wp_strapi.utils.pre_flight_checks import PreFlightCheckError, run_pre_flight_checks
from wp_strapi.utils.redirects import new_url_for

WP = "http://wp.test/wp-json/wp/v2"
STRAPI = "http://strapi.test/api"
CONFIG = {"wordpress": {"api_url": WP}, "strapi": {"api_url": STRAPI, "token": "tok"}}


def test_checks_pass_when_both_ends_answer():
    session = FakeSession()
    session.route("GET", f"{WP}/categories", FakeResponse(200, []))
    # Public role without "find" permission is fine
    session.route("GET", f"{STRAPI}/categories", FakeResponse(403, {"error": {}}))
    run_pre_flight_checks(CONFIG, session=session)


def test_unreachable_wordpress_fails():
    session = FakeSession()
    session.route("GET", f"{WP}/categories", requests.ConnectionError("dns"))
    with pytest.raises(PreFlightCheckError):
        run_pre_flight_checks(CONFIG, session=session)


def test_rejected_token_fails():
    session = FakeSession()
    session.route("GET", f"{WP}/categories", FakeResponse(200, []))
    session.route("GET", f"{STRAPI}/categories", FakeResponse(401, {"error": {}}))
    with pytest.raises(PreFlightCheckError, match="STRAPI_TOKEN"):
        run_pre_flight_checks(CONFIG, session=session)


def test_redirect_routes_per_collection():
    assert new_url_for("https://x.dev/", "articles", "a") == "https://x.dev/blog/a"
    assert new_url_for("https://x.dev", "tours", "t") == "https://x.dev/tours/t"
    assert new_url_for("https://x.dev", "pages", "p") == "https://x.dev/p"
