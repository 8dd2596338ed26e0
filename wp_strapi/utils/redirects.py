"""
Generation of redirect mapping CSV files.

The :func:`generate_redirects_csv` helper writes a CSV file containing the
mapping of WordPress URLs to the paths of the migrated Strapi records on
the new front end.  The resulting file is used to configure 301 redirects
so that existing links continue to work after migration.
"""

from __future__ import annotations

import csv
import os
from typing import Dict, Iterable

# Front-end route prefix per Strapi collection.  Pages live at the root.
ROUTES: Dict[str, str] = {
    "articles": "blog",
    "tours": "tours",
    "pages": "",
}


def new_url_for(new_base: str, collection: str, slug: str) -> str:
    base = new_base.rstrip("/")
    prefix = ROUTES.get(collection, collection)
    if prefix:
        return f"{base}/{prefix}/{slug}"
    return f"{base}/{slug}"


def generate_redirects_csv(
    items: Iterable[Dict[str, str]], *, new_base: str, out_path: str = "reports/redirect_map.csv"
) -> str:
    """Generate a CSV mapping old WordPress URLs to new front-end URLs.

    Parameters
    ----------
    items:
        Iterable of dictionaries with ``Permalink``, ``Collection`` and
        ``Slug`` keys.  Items without a ``Permalink`` are skipped.
    new_base:
        Base URL of the site that renders the Strapi content.
    out_path:
        Location of the CSV file to be written.  The parent directory is
        created automatically.

    Returns
    -------
    str
        The path of the generated CSV file.
    """
    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["OldURL", "NewURL"])
        for item in items:
            old_url = item.get("Permalink")
            if not old_url:
                continue
            writer.writerow([old_url, new_url_for(new_base, item.get("Collection", ""), item.get("Slug", ""))])
    return out_path
