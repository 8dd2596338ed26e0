"""
Strapi API migrators and helpers.

This subpackage provides the functions that write to the Strapi REST API:
creating collection entries and re-uploading media with a per-run cache.
"""

from .strapi_migrator import ImageUploader, create_entry, strapi_headers

__all__ = ["ImageUploader", "create_entry", "strapi_headers"]
