"""
Pydantic models for the records read from WordPress and written to Strapi.
"""

from .strapi_records import (
    ImageRecord,
    RichTextBlock,
    StrapiArticle,
    StrapiCategory,
    StrapiPage,
    StrapiTour,
    WordPressCategory,
    WordPressPage,
    WordPressPost,
)

__all__ = [
    "ImageRecord",
    "RichTextBlock",
    "StrapiArticle",
    "StrapiCategory",
    "StrapiPage",
    "StrapiTour",
    "WordPressCategory",
    "WordPressPage",
    "WordPressPost",
]
