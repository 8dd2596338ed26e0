from __future__ import annotations

from typing import Callable, Optional
import re

from bs4 import BeautifulSoup, Comment
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter


BUILDER_ATTRIBUTE_PREFIX = "data-elementor"

_TAG_RE = re.compile(r"<[^>]*>?")

# Minimal escaping; void elements written as <br> rather than <br/>
_HTML_FORMATTER = HTMLFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix=None,
)


def clean_content(
    html: str,
    *,
    image_resolver: Optional[Callable[[str], Optional[str]]] = None,
    attribute_prefix: str = BUILDER_ATTRIBUTE_PREFIX,
) -> str:
    """
    Prepare rendered WordPress HTML for storage in Strapi.

    - Every ``<img src>`` is passed to ``image_resolver``; when it returns a
      URL the ``src`` is rewritten, otherwise the tag is left untouched.
    - All HTML comments are dropped (page builders hide their layout
      metadata in them).
    - Attributes starting with ``attribute_prefix`` are removed from every
      element.

    The ``<body>`` contents are returned when the input is a full document,
    otherwise the whole fragment.
    """
    soup = BeautifulSoup(html or "", "html.parser")

    if image_resolver:
        for img in soup.find_all("img"):
            src = img.get("src")
            if not src:
                continue
            new_src = image_resolver(src)
            if new_src:
                img["src"] = new_src

    for comment in soup.find_all(string=lambda s: isinstance(s, Comment)):
        comment.extract()

    if attribute_prefix:
        for el in soup.find_all(True):
            for attr in [a for a in el.attrs if a.startswith(attribute_prefix)]:
                del el[attr]

    body = soup.body
    if body is not None:
        return body.decode_contents(formatter=_HTML_FORMATTER)
    return soup.decode_contents(formatter=_HTML_FORMATTER)


def strip_tags(html: str) -> str:
    """Remove anything that looks like a tag, including an unterminated one."""
    return _TAG_RE.sub("", html or "")


def plain_excerpt(html: str, max_length: Optional[int] = None) -> str:
    text = strip_tags(html)
    if max_length is not None:
        text = text[:max_length]
    return text
