"""
Strapi API helper functions for WordPress → Strapi migration.

This module implements the low-level interactions with the Strapi REST
API: creating collection entries (``categories``, ``articles``, ``tours``,
``pages``) and uploading media to the ``/upload`` endpoint.  Requests are
sent one at a time and are never retried; callers decide whether a
failure is fatal for the record they are building.

Usage example::

    import requests
    from wp_strapi.migrators.strapi_migrator import ImageUploader, create_entry

    cfg = {"api_url": "http://localhost:1337/api", "token": ""}
    session = requests.Session()
    uploader = ImageUploader(cfg, session)
    image = uploader.upload("https://example.com/wp-content/uploads/a.jpg")
    create_entry(cfg, session, "articles", {"data": {"title": "Hello", "cover": image.id}})

An empty ``token`` sends no ``Authorization`` header, which relies on the
Strapi Public role having ``create`` permission on every collection.
"""

from __future__ import annotations

import mimetypes
import posixpath
from typing import Any, Callable, Dict, Optional

import requests

from wp_strapi.models import ImageRecord
from wp_strapi.utils.errors import default_log, report_error


def strapi_headers(cfg: Dict[str, str]) -> Dict[str, str]:
    """
    Construct the headers required for Strapi API requests.

    :param cfg: The ``strapi`` configuration section.
    :return: A dictionary with a bearer ``Authorization`` header, or an
             empty dictionary when no token is configured.
    """
    token = cfg.get("token") or ""
    if not token:
        return {}
    return {"Authorization": f"Bearer {token}"}


def create_entry(cfg: Dict[str, str], session: Any, collection: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Create an entry in a Strapi collection.

    :param cfg: The ``strapi`` configuration section.
    :param session: A ``requests.Session``-like object.
    :param collection: Plural API id, e.g. ``"articles"``.
    :param payload: Request body, already wrapped as ``{"data": {...}}``.
    :return: The ``data`` object of the created entry.
    :raises requests.HTTPError: when Strapi rejects the entry.
    """
    resp = session.post(
        f"{cfg['api_url'].rstrip('/')}/{collection}",
        headers=strapi_headers(cfg),
        json=payload,
    )
    resp.raise_for_status()
    return resp.json().get("data") or {}


def _filename_for(image_url: str) -> str:
    return posixpath.basename(image_url).split("?")[0]


class ImageUploader:
    """
    Re-uploads WordPress images to the Strapi media library.

    Results are cached by source URL for the lifetime of the instance, so
    each distinct image is uploaded at most once per run.  Failed uploads
    are not cached.
    """

    def __init__(
        self,
        cfg: Dict[str, str],
        session: Any,
        *,
        log: Callable[..., None] = default_log,
        dry_run: bool = False,
    ) -> None:
        self.cfg = cfg
        self.session = session
        self.log = log
        self.dry_run = dry_run
        self.cache: Dict[str, ImageRecord] = {}

    def upload(self, image_url: Optional[str]) -> Optional[ImageRecord]:
        """
        Return the Strapi asset for ``image_url``, uploading it if needed.

        :param image_url: The source URL of the image.
        :return: The uploaded asset's id and URL, or ``None`` when the URL
                 is empty or the download/upload fails.
        """
        if not image_url:
            return None
        if image_url in self.cache:
            return self.cache[image_url]
        if self.dry_run:
            self.log(f"Dry-run: would upload image {image_url}")
            return None

        self.log(f"Uploading image: {image_url}")
        filename = _filename_for(image_url)
        content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
        try:
            source = self.session.get(image_url, stream=True)
            source.raise_for_status()
            # Undo Content-Encoding (e.g. gzipped SVG) so the file itself is uploaded
            source.raw.decode_content = True
            try:
                resp = self.session.post(
                    f"{self.cfg['api_url'].rstrip('/')}/upload",
                    headers=strapi_headers(self.cfg),
                    files={"files": (filename, source.raw, content_type)},
                )
            finally:
                source.close()
            resp.raise_for_status()
            assets = resp.json()
            if not assets:
                raise ValueError("Strapi returned no asset")
            record = ImageRecord(id=assets[0]["id"], url=assets[0]["url"])
        except (requests.RequestException, ValueError, KeyError, TypeError) as e:
            self.log(f"Failed to upload image {image_url}: {e}", "ERROR")
            report_error("MEDIA_UPLOAD", {"kind": "image", "slug": _filename_for(image_url), "url": image_url}, e, echo=False)
            return None

        self.cache[image_url] = record
        return record

    def resolve_url(self, image_url: Optional[str]) -> Optional[str]:
        """Convenience wrapper returning only the uploaded asset's URL."""
        record = self.upload(image_url)
        return record.url if record else None
