"""
Parsers and converters used by the migration pipeline.

This subpackage exposes the HTML cleaner from
:mod:`wp_strapi.parsers.content_cleaner` and the tour page classifier from
:mod:`wp_strapi.parsers.tour_classifier`.
"""

from .content_cleaner import clean_content, plain_excerpt, strip_tags
from .tour_classifier import TourDetails, classify_page, extract_distance, extract_duration, is_tour

__all__ = [
    "clean_content",
    "plain_excerpt",
    "strip_tags",
    "TourDetails",
    "classify_page",
    "extract_distance",
    "extract_duration",
    "is_tour",
]
