"""
Readers for the WordPress REST API (``/wp-json/wp/v2``).

Collections are paginated with ``page``/``per_page`` and announce the
number of pages in the ``X-WP-TotalPages`` response header.  Requesting a
page past the end returns HTTP 400, which is treated as the end of the
collection rather than a failure.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

import requests

from wp_strapi.utils.errors import default_log

Logger = Callable[..., None]

PER_PAGE = 100
TOTAL_PAGES_HEADER = "X-WP-TotalPages"


def fetch_all(
    session: Any,
    api_url: str,
    resource: str,
    *,
    per_page: int = PER_PAGE,
    log: Logger = default_log,
) -> List[Dict[str, Any]]:
    """Fetch every item of ``resource`` (``categories``, ``posts``, ``pages``).

    :param session: A ``requests.Session`` (or anything with the same ``get``).
    :param api_url: Base URL of the WordPress REST API.
    :param resource: Collection name appended to ``api_url``.
    :param per_page: Page size requested from WordPress.
    :param log: Callable receiving ``(message, level)``.
    :return: All items collected.  On an unexpected error the items fetched
             before the failure are returned.
    """
    url = f"{api_url.rstrip('/')}/{resource}"
    page = 1
    results: List[Dict[str, Any]] = []
    while True:
        log(f"Fetching {resource} page {page}...")
        try:
            resp = session.get(url, params={"page": page, "per_page": per_page})
            resp.raise_for_status()
            items = resp.json()
        except requests.HTTPError as e:
            if e.response is not None and e.response.status_code == 400:
                break
            log(f"Error fetching {resource}: {e}", "ERROR")
            break
        except (requests.RequestException, ValueError) as e:
            # ValueError covers a body that is not JSON
            log(f"Error fetching {resource}: {e}", "ERROR")
            break

        if not isinstance(items, list):
            log(f"Error fetching {resource}: expected a list on page {page}, got {type(items).__name__}", "ERROR")
            break
        results.extend(items)

        total_pages = resp.headers.get(TOTAL_PAGES_HEADER)
        try:
            if total_pages is not None and page >= int(total_pages):
                break
        except ValueError:
            log(f"Error fetching {resource}: bad {TOTAL_PAGES_HEADER} header {total_pages!r}", "ERROR")
            break
        page += 1
    return results


def fetch_featured_media_url(session: Any, href: Optional[str], *, log: Logger = default_log) -> Optional[str]:
    """Resolve a ``wp:featuredmedia`` link to the media's ``source_url``.

    Returns ``None`` if there is no link or the request fails.
    """
    if not href:
        return None
    try:
        resp = session.get(href)
        resp.raise_for_status()
        return resp.json().get("source_url")
    except (requests.RequestException, ValueError) as e:
        log(f"Could not resolve featured media {href}: {e}", "WARNING")
        return None
