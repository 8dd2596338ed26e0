"""
Structured logging helpers for migration errors and successes.

The :mod:`wp_strapi.utils.errors` module centralizes the writing of log
entries for both failed and successful operations during the migration.
Each entry is appended to a JSON Lines file under ``reports/migration`` so
that the information can be reviewed or parsed after a run.

Two public functions are provided:

``report_error``
    Record an error that occurred for a WordPress item.  An optional
    exception can be supplied and will be serialized to the log.

``report_ok``
    Record a successful step for an item.  Additional key/value information
    can be attached to the entry via the ``extra`` parameter.

``item`` arguments are plain dictionaries with any of the ``kind``,
``wp_id``, ``slug`` and ``title`` keys (see
:meth:`wp_strapi.models.WordPressPage.report_ref`).

The ``ERRORS`` dictionary maps error or event codes to human readable
messages.  Codes not present in the dictionary fall back to the code itself.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional

# Mapping of event codes used throughout the migration to descriptive messages.
# The keys include both error and success codes as the same lookup is used by
# :func:`report_error` and :func:`report_ok`.
ERRORS: Dict[str, str] = {
    "WP_FETCH": "Failed to fetch resource from WordPress",
    "FEATURED_MEDIA": "Failed to resolve featured media",
    "MEDIA_UPLOAD": "Failed to upload media to Strapi",
    "INVALID_ITEM": "WordPress item could not be parsed",
    "STRAPI_CREATE": "Strapi rejected the record",
    "CATEGORY_CREATED": "Category created successfully",
    "ARTICLE_CREATED": "Article created successfully",
    "TOUR_CREATED": "Tour created successfully",
    "PAGE_CREATED": "Page created successfully",
}

_REPORT_DIR = os.path.join("reports", "migration")
_ERROR_LOG = os.path.join(_REPORT_DIR, "errors.jsonl")
_OK_LOG = os.path.join(_REPORT_DIR, "success.jsonl")


def default_log(message: str, level: str = "INFO") -> None:
    """Console-only logger used when no migration tool is driving the call."""
    print(f"[{level}] {message}")


def _write_jsonl(path: str, data: Dict[str, Any]) -> None:
    """Append ``data`` as a JSON object followed by a newline to ``path``."""
    os.makedirs(_REPORT_DIR, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False)
        f.write("\n")


def _entry(code: str, item: Dict[str, Any]) -> Dict[str, Any]:
    entry: Dict[str, Any] = {
        "code": code,
        "message": ERRORS.get(code, code),
        "kind": item.get("kind"),
        "wp_id": item.get("wp_id"),
        "slug": item.get("slug"),
        "title": item.get("title"),
    }
    # Images have no WordPress id of their own
    if item.get("url"):
        entry["url"] = item["url"]
    return entry


def report_error(
    code: str, item: Dict[str, Any], exc: Optional[Exception] = None, *, echo: bool = True
) -> None:
    """Log an error event for ``item``.

    Parameters
    ----------
    code:
        A key identifying the type of error.  If ``code`` is present in
        :data:`ERRORS` its value will be used as the message.
    item:
        Reference to the WordPress item associated with the error.
    exc:
        Optional exception instance that triggered the error.  The string
        representation of the exception will be included in the log entry.
    echo:
        Print a console line as well.  Callers that already log the event
        through their own logger pass ``False``.
    """
    entry = _entry(code, item)
    if exc is not None:
        entry["error"] = str(exc)
    if echo:
        print(f"[ERROR] {entry['message']} - {item.get('slug', '')}")
    _write_jsonl(_ERROR_LOG, entry)


def report_ok(
    code: str, item: Dict[str, Any], extra: Optional[Dict[str, Any]] = None, *, echo: bool = True
) -> None:
    """Log a successful event for ``item``.

    Parameters
    ----------
    code:
        A key identifying the type of event.
    item:
        Reference to the WordPress item associated with the event.
    extra:
        Optional dictionary of additional fields to merge into the log entry.
    echo:
        Print a console line as well.
    """
    entry = _entry(code, item)
    if extra:
        entry.update(extra)
    if echo:
        print(f"[OK] {entry['message']} - {item.get('slug', '')}")
    _write_jsonl(_OK_LOG, entry)
