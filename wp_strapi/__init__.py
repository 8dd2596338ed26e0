"""
Top-level package for the WordPress → Strapi migration utility.

This package bundles all components required to read categories, posts
and pages from the WordPress REST API, clean their HTML, re-upload their
images to the Strapi media library and create the matching Strapi
records.  Modules are split into subpackages:

* :mod:`wp_strapi.extractors` – paginated WordPress REST readers
* :mod:`wp_strapi.parsers` – HTML cleanup and tour page detection
* :mod:`wp_strapi.migrators` – Strapi API interactions and image uploads
* :mod:`wp_strapi.models` – pydantic models for source and target records
* :mod:`wp_strapi.utils` – error logging, redirect CSV and pre-flight checks

Each layer has no direct knowledge of configuration or execution
strategy; orchestration is handled in :mod:`wp_strapi.migration_tool`.
"""
