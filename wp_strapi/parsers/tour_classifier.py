"""
Detection of tour pages and extraction of their key facts.

Tour pages on the source site are ordinary WordPress pages whose body
contains a "Tour Duration:" and/or "Total Distance:" line.  The patterns
below match the markup the site's page builder produces.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import re

TOUR_MARKERS = ("tour duration:", "total distance:")

_DURATION_RE = re.compile(r"Tour Duration:<[^>]*>([\s\S]*?)</span>", re.IGNORECASE)
_DISTANCE_RE = re.compile(r"Total Distance:\s*(\d+\s*km)", re.IGNORECASE)


@dataclass
class TourDetails:
    duration: str = ""
    distance: str = ""


def is_tour(raw_html: str) -> bool:
    text = (raw_html or "").lower()
    return any(marker in text for marker in TOUR_MARKERS)


def extract_duration(html: str) -> str:
    match = _DURATION_RE.search(html or "")
    if not match:
        return ""
    return match.group(1).replace("<br>", " ").strip()


def extract_distance(html: str) -> str:
    match = _DISTANCE_RE.search(html or "")
    return match.group(1) if match else ""


def classify_page(raw_html: str, clean_html: str) -> Optional[TourDetails]:
    """
    Return the tour details for a page, or ``None`` if it is not a tour.

    The decision is made on the raw WordPress content; the values are read
    from the cleaned content that will be stored.
    """
    if not is_tour(raw_html):
        return None
    return TourDetails(duration=extract_duration(clean_html), distance=extract_distance(clean_html))
