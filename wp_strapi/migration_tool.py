"""
High-level orchestration of the WordPress → Strapi migration.

This module defines a :class:`StrapiMigrationTool` class that ties
together the extractors, parsers, migrators and utilities into a
complete pipeline.  It migrates categories, then posts (as Strapi
articles), then pages (as tours or generic pages), re-uploading every
image it meets along the way, writing log files and generating a
redirect CSV.

Configuration is supplied via a JSON file path or directly as a
dictionary.  The ``wordpress`` section holds ``api_url``; the ``strapi``
section holds ``api_url`` and ``token`` (read from ``STRAPI_TOKEN`` when
absent).  Optional migration settings (e.g., dry-run) can be provided
under the ``migration`` key.

Items are processed strictly one after the other.  A failure on one item
is logged and reported, and the run carries on with the next one.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, List, Optional, Tuple

import requests
from pydantic import ValidationError

from wp_strapi.extractors.wordpress_api import fetch_all, fetch_featured_media_url
from wp_strapi.models import (
    RichTextBlock,
    StrapiArticle,
    StrapiCategory,
    StrapiPage,
    StrapiTour,
    WordPressCategory,
    WordPressPage,
    WordPressPost,
)
from wp_strapi.migrators.strapi_migrator import ImageUploader, create_entry
from wp_strapi.parsers.content_cleaner import clean_content, plain_excerpt
from wp_strapi.parsers.tour_classifier import classify_page
from wp_strapi.utils.errors import report_error, report_ok
from wp_strapi.utils.redirects import generate_redirects_csv

DEFAULT_WP_API_URL = "https://slowmoto.tours/wp-json/wp/v2"
DEFAULT_STRAPI_API_URL = "http://localhost:1337/api"


def _error_details(e: Exception) -> str:
    response = getattr(e, "response", None)
    if response is not None:
        return response.text
    return str(e)


class StrapiMigrationTool:
    """
    Encapsulates all state and behavior required to migrate a WordPress
    site into Strapi.  The category id map and the image cache live on
    the instance and last for a single run.  Detailed success and failure
    information is recorded using the :mod:`wp_strapi.utils.errors` module.
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        *,
        config_file: Optional[str] = None,
        session: Any = None,
    ) -> None:
        if config_file and os.path.exists(config_file):
            with open(config_file, "r", encoding="utf-8") as f:
                config = json.load(f)
        elif config is None:
            # Default configuration
            config = {}

        # Ensure essential keys exist to prevent KeyErrors
        config.setdefault("wordpress", {})
        config["wordpress"].setdefault("api_url", os.getenv("WP_API_URL", DEFAULT_WP_API_URL))

        config.setdefault("strapi", {})
        config["strapi"].setdefault("api_url", os.getenv("STRAPI_API_URL", DEFAULT_STRAPI_API_URL))
        config["strapi"].setdefault("token", os.getenv("STRAPI_TOKEN", ""))

        config.setdefault("migration", {})
        config["migration"].setdefault("per_page", 100)
        config["migration"].setdefault("builder_attribute_prefix", "data-elementor")
        config["migration"].setdefault("excerpt_length", 80)
        config["migration"].setdefault("dry_run", False)
        config["migration"].setdefault("limit", None)
        config["migration"].setdefault("site_url", "")

        self.config = config
        self.session = session or requests.Session()
        self.dry_run: bool = bool(config["migration"]["dry_run"])
        self.category_map: Dict[int, Any] = {}
        self.images = ImageUploader(config["strapi"], self.session, log=self.log_message, dry_run=self.dry_run)
        self.migrated: List[Dict[str, str]] = []

    def log_message(self, message: str, level: str = "INFO") -> None:
        print(f"[{level}] {message}")
        # Append to log file
        os.makedirs("reports/migration", exist_ok=True)
        with open("reports/migration/migration.log", "a", encoding="utf-8") as f:
            f.write(f"{level}: {message}\n")

    ###########################################################################
    # Shared steps
    ###########################################################################

    def fetch(self, resource: str) -> List[Dict[str, Any]]:
        items = fetch_all(
            self.session,
            self.config["wordpress"]["api_url"],
            resource,
            per_page=self.config["migration"]["per_page"],
            log=self.log_message,
        )
        limit = self.config["migration"]["limit"]
        if limit is not None:
            items = items[:limit]
        self.log_message(f"Found {len(items)} {resource} to migrate.")
        return items

    def resolve_cover(self, item: WordPressPage, kind: str) -> Optional[Any]:
        """Upload the item's featured image and return its Strapi id."""
        href = item.featured_media_href
        if not href:
            return None
        source_url = fetch_featured_media_url(self.session, href, log=self.log_message)
        if not source_url:
            report_error("FEATURED_MEDIA", item.report_ref(kind), echo=False)
            return None
        upload = self.images.upload(source_url)
        return upload.id if upload else None

    def clean(self, html: str) -> str:
        return clean_content(
            html,
            image_resolver=self.images.resolve_url,
            attribute_prefix=self.config["migration"]["builder_attribute_prefix"],
        )

    def create(self, collection: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        if self.dry_run:
            self.log_message(f"Dry-run: would create {collection} entry {payload['data'].get('slug')}")
            return {}
        return create_entry(self.config["strapi"], self.session, collection, payload)

    def _record_migrated(self, item: WordPressPage, collection: str) -> None:
        self.migrated.append({"Permalink": item.link or "", "Collection": collection, "Slug": item.slug})

    ###########################################################################
    # Phases
    ###########################################################################

    def migrate_categories(self) -> None:
        self.log_message("Migrating Categories...")
        for raw in self.fetch("categories"):
            try:
                cat = WordPressCategory.model_validate(raw)
            except ValidationError as e:
                report_error("INVALID_ITEM", {"kind": "category", "wp_id": raw.get("id")}, e, echo=False)
                self.log_message(f"Skipping malformed category {raw.get('id')}: {e}", "ERROR")
                continue

            ref = {"kind": "category", "wp_id": cat.id, "slug": cat.slug, "title": cat.name}
            record = StrapiCategory(name=cat.name, slug=cat.slug, description=cat.description, wp_id=cat.id)
            try:
                created = self.create("categories", record.to_strapi_payload())
            except requests.RequestException as e:
                report_error("STRAPI_CREATE", ref, e, echo=False)
                self.log_message(f"Failed to create category {cat.name}: {_error_details(e)}", "ERROR")
                continue

            if created.get("id") is not None:
                self.category_map[cat.id] = created["id"]
            report_ok("CATEGORY_CREATED", ref, {"strapi_id": created.get("id")}, echo=False)
            self.log_message(f"Created Category: {cat.name}")

    def build_article(self, post: WordPressPost) -> StrapiArticle:
        cover_id = self.resolve_cover(post, "post")
        content = self.clean(post.content.rendered)

        # Only one category survives; the Strapi schema has a single relation
        category_ids = [self.category_map[c] for c in post.categories if c in self.category_map]

        return StrapiArticle(
            title=post.title.rendered,
            slug=post.slug,
            description=plain_excerpt(post.excerpt.rendered, self.config["migration"]["excerpt_length"]),
            cover=cover_id,
            category=category_ids[0] if category_ids else None,
            blocks=[RichTextBlock(body=content)],
            wp_id=post.id,
        )

    def migrate_posts(self) -> None:
        self.log_message("Migrating Posts (Articles)...")
        for raw in self.fetch("posts"):
            try:
                post = WordPressPost.model_validate(raw)
            except ValidationError as e:
                report_error("INVALID_ITEM", {"kind": "post", "wp_id": raw.get("id")}, e, echo=False)
                self.log_message(f"Skipping malformed post {raw.get('id')}: {e}", "ERROR")
                continue

            article = self.build_article(post)
            try:
                created = self.create("articles", article.to_strapi_payload())
            except requests.RequestException as e:
                report_error("STRAPI_CREATE", post.report_ref("post"), e, echo=False)
                self.log_message(f"Failed to create article {post.title.rendered}: {_error_details(e)}", "ERROR")
                continue

            self._record_migrated(post, "articles")
            report_ok("ARTICLE_CREATED", post.report_ref("post"), {"strapi_id": created.get("id")}, echo=False)
            self.log_message(f"Created Article: {post.title.rendered}")

    def build_page(self, page: WordPressPage) -> Tuple[str, StrapiPage]:
        """Return ``(collection, record)`` for a WordPress page."""
        cover_id = self.resolve_cover(page, "page")
        raw_content = page.content.rendered
        content = self.clean(raw_content)
        excerpt = plain_excerpt(page.excerpt.rendered)

        tour = classify_page(raw_content, content)
        if tour is not None:
            return "tours", StrapiTour(
                title=page.title.rendered,
                slug=page.slug,
                content=content,
                excerpt=excerpt,
                featured_image=cover_id,
                duration=tour.duration,
                distance=tour.distance,
                wp_id=page.id,
            )
        return "pages", StrapiPage(
            title=page.title.rendered,
            slug=page.slug,
            content=content,
            excerpt=excerpt,
            featured_image=cover_id,
            wp_id=page.id,
        )

    def migrate_pages(self) -> None:
        self.log_message("Migrating Pages...")
        for raw in self.fetch("pages"):
            try:
                page = WordPressPage.model_validate(raw)
            except ValidationError as e:
                report_error("INVALID_ITEM", {"kind": "page", "wp_id": raw.get("id")}, e, echo=False)
                self.log_message(f"Skipping malformed page {raw.get('id')}: {e}", "ERROR")
                continue

            collection, record = self.build_page(page)
            label = "Tour" if collection == "tours" else "Page"
            try:
                created = self.create(collection, record.to_strapi_payload())
            except requests.RequestException as e:
                report_error("STRAPI_CREATE", page.report_ref("page"), e, echo=False)
                self.log_message(f"Failed to create {label.lower()} {page.title.rendered}: {_error_details(e)}", "ERROR")
                continue

            self._record_migrated(page, collection)
            report_ok(f"{label.upper()}_CREATED", page.report_ref("page"), {"strapi_id": created.get("id")}, echo=False)
            self.log_message(f"Created {label}: {page.title.rendered}")

    def run(self) -> None:
        """Run every phase in order and write the redirect map."""
        self.migrate_categories()
        self.migrate_posts()
        self.migrate_pages()

        site_url = self.config["migration"]["site_url"]
        if not site_url:
            self.log_message("No 'site_url' configured; skipping redirect map.", "DEBUG")
            return
        try:
            path = generate_redirects_csv(self.migrated, new_base=site_url)
            self.log_message(f"Redirect CSV generated with {len(self.migrated)} entries at {path}")
        except OSError as e:
            self.log_message(f"Failed to generate redirects: {e}", "ERROR")
