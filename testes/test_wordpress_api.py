import os
import sys

# Ensure project root is on sys.path for imports when running tests directly
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import requests

from fake_http import FakeResponse, FakeSession
from wp_strapi.extractors.wordpress_api import fetch_all, fetch_featured_media_url

WP = "http://wp.test/wp-json/wp/v2"


class Recorder:
    def __init__(self):
        self.lines = []

    def __call__(self, message, level="INFO"):
        self.lines.append((level, message))

    def errors(self):
        return [m for lvl, m in self.lines if lvl == "ERROR"]


def paged(pages, total_pages=None, failure=None):
    """Serve ``pages`` (a list of item lists); past the end, return ``failure``."""
    def handler(params, **kwargs):
        n = params["page"]
        if n <= len(pages):
            headers = {"X-WP-TotalPages": str(total_pages)} if total_pages else {}
            return FakeResponse(200, pages[n - 1], headers=headers)
        return failure
    return handler


def test_fetch_all_stops_at_total_pages_header():
    session = FakeSession()
    session.route("GET", f"{WP}/posts", paged([[{"id": 1}, {"id": 2}], [{"id": 3}]], total_pages=2))

    items = fetch_all(session, WP, "posts", log=Recorder())

    assert [i["id"] for i in items] == [1, 2, 3]
    gets = session.calls_to("GET")
    assert len(gets) == 2
    assert gets[0][2]["params"] == {"page": 1, "per_page": 100}


def test_out_of_range_page_ends_pagination_silently():
    session = FakeSession()
    session.route(
        "GET",
        f"{WP}/categories",
        paged([[{"id": 1}]], failure=FakeResponse(400, {"code": "rest_post_invalid_page_number"})),
    )
    log = Recorder()

    items = fetch_all(session, WP, "categories", log=log)

    assert items == [{"id": 1}]
    assert log.errors() == []


def test_server_error_returns_partial_results_and_logs():
    session = FakeSession()
    session.route("GET", f"{WP}/pages", paged([[{"id": 7}]], failure=FakeResponse(500, {"code": "boom"})))
    log = Recorder()

    items = fetch_all(session, WP, "pages", log=log)

    assert items == [{"id": 7}]
    assert len(log.errors()) == 1
    assert "pages" in log.errors()[0]


def test_network_error_on_first_page_returns_empty_list():
    session = FakeSession()
    session.route("GET", f"{WP}/posts", requests.ConnectionError("unreachable"))
    log = Recorder()

    assert fetch_all(session, WP, "posts", log=log) == []
    assert len(log.errors()) == 1


def test_featured_media_source_url_is_returned():
    session = FakeSession()
    href = f"{WP}/media/9"
    session.route("GET", href, FakeResponse(200, {"id": 9, "source_url": "http://wp.test/a.jpg"}))

    assert fetch_featured_media_url(session, href, log=Recorder()) == "http://wp.test/a.jpg"


def test_featured_media_failure_yields_none():
    session = FakeSession()
    href = f"{WP}/media/9"
    session.route("GET", href, requests.ConnectionError("reset"))

    assert fetch_featured_media_url(session, href, log=Recorder()) is None
    assert fetch_featured_media_url(session, None, log=Recorder()) is None


def test_html_body_on_later_page_keeps_earlier_items():
    session = FakeSession()
    maintenance = FakeResponse(200, text="<html><body>Site under maintenance</body></html>")
    session.route("GET", f"{WP}/posts", paged([[{"id": 1}]], failure=maintenance))
    log = Recorder()

    items = fetch_all(session, WP, "posts", log=log)

    assert items == [{"id": 1}]
    assert len(log.errors()) == 1


def test_malformed_total_pages_header_stops_after_current_page():
    session = FakeSession()
    session.route("GET", f"{WP}/categories", FakeResponse(200, [{"id": 4}], headers={"X-WP-TotalPages": ""}))
    log = Recorder()

    items = fetch_all(session, WP, "categories", log=log)

    assert items == [{"id": 4}]
    assert len(session.calls_to("GET")) == 1
    assert "X-WP-TotalPages" in log.errors()[0]


def test_object_payload_instead_of_list_stops_pagination():
    session = FakeSession()
    session.route("GET", f"{WP}/pages", FakeResponse(200, {"code": "rest_forbidden"}))
    log = Recorder()

    assert fetch_all(session, WP, "pages", log=log) == []
    assert "expected a list" in log.errors()[0]
