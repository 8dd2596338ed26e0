"""
Extractors for the WordPress REST API.

This subpackage provides the paginated collection reader and the
featured-media resolver used by the Strapi migrator.  Items are returned
as the raw JSON dictionaries WordPress produces; the migration tool parses
them into :mod:`wp_strapi.models`.
"""

from .wordpress_api import fetch_all, fetch_featured_media_url

__all__ = ["fetch_all", "fetch_featured_media_url"]
