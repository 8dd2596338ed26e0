from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


StrapiId = Union[int, str]


###############################################################################
# WordPress REST records
###############################################################################

class Rendered(BaseModel):
    rendered: str = ""

    model_config = ConfigDict(extra="ignore")


class WordPressCategory(BaseModel):
    id: int
    name: str = ""
    slug: str = ""
    description: str = ""
    link: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class WordPressPage(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int
    title: Rendered = Field(default_factory=Rendered)
    slug: str = ""
    content: Rendered = Field(default_factory=Rendered)
    excerpt: Rendered = Field(default_factory=Rendered)
    link: Optional[str] = None
    links: Dict[str, Any] = Field(default_factory=dict, alias="_links")

    @property
    def featured_media_href(self) -> Optional[str]:
        entries = self.links.get("wp:featuredmedia") or []
        if not entries:
            return None
        return entries[0].get("href")

    def report_ref(self, kind: str) -> Dict[str, Any]:
        return {"kind": kind, "wp_id": self.id, "slug": self.slug, "title": self.title.rendered}


class WordPressPost(WordPressPage):
    categories: List[int] = Field(default_factory=list)


###############################################################################
# Strapi records
###############################################################################

class StrapiRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_strapi_payload(self) -> Dict[str, Any]:
        return {"data": self.model_dump(by_alias=True)}


class StrapiCategory(StrapiRecord):
    name: str
    slug: str
    description: str = ""
    wp_id: int


class RichTextBlock(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    component: str = Field("shared.rich-text", alias="__component")
    body: str


class StrapiArticle(StrapiRecord):
    title: str
    slug: str
    description: str = ""
    cover: Optional[StrapiId] = None
    category: Optional[StrapiId] = None
    blocks: List[RichTextBlock] = Field(default_factory=list)
    wp_id: int


class StrapiPage(StrapiRecord):
    title: str
    slug: str
    content: str = ""
    excerpt: str = ""
    featured_image: Optional[StrapiId] = None
    wp_id: int


class StrapiTour(StrapiPage):
    duration: str = ""
    distance: str = ""


class ImageRecord(BaseModel):
    id: StrapiId
    url: str
