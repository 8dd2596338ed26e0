import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from wp_strapi.parsers.tour_classifier import (
    classify_page,
    extract_distance,
    extract_duration,
    is_tour,
)

TOUR_HTML = "<p>Tour Duration:<span>3 days<br>2 nights</span></p><p>Total Distance: 45 km</p>"


def test_tour_page_yields_duration_and_distance():
    details = classify_page(TOUR_HTML, TOUR_HTML)
    assert details is not None
    assert details.duration == "3 days 2 nights"
    assert details.distance == "45 km"


def test_page_without_markers_is_not_a_tour():
    html = "<p>About us</p>"
    assert is_tour(html) is False
    assert classify_page(html, html) is None


def test_markers_are_case_insensitive_and_either_is_enough():
    assert is_tour("<p>TOUR DURATION: one week</p>")
    assert is_tour("<p>total distance: 120km</p>")


def test_missing_values_extract_as_empty_strings():
    html = "<p>Tour Duration: ask us</p>"
    details = classify_page(html, html)
    assert details is not None
    assert details.duration == ""
    assert details.distance == ""


def test_duration_spans_lines_and_is_trimmed():
    html = "Tour Duration:<span class='d'>\n  10 days<br>9 nights \n</span>"
    assert extract_duration(html) == "10 days 9 nights"


def test_distance_requires_km_unit():
    assert extract_distance("Total Distance:1200 KM") == "1200 KM"
    assert extract_distance("Total Distance: 1200 miles") == ""
