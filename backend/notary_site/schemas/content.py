"""Input and output schemas for the admin-managed content resources.

Each resource has a ``*Create`` schema (required fields enforced), a ``*Update``
schema (every field optional, merged onto the stored row) and an ``*Out`` schema
read from the ORM object.
"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from notary_site.schemas.common import (
    AbsoluteUrl,
    Name,
    NonEmptyStr,
    OptionalUrlOrPath,
    Slug,
    UrlOrPath,
    PartialUpdate,
)


class ContentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    active: bool
    created_at: datetime
    updated_at: datetime


class ReorderRequest(BaseModel):
    ids: List[int]


# Banners

class BannerCreate(BaseModel):
    title: Name
    image_url: UrlOrPath
    link: OptionalUrlOrPath = None
    order: int = 0
    active: bool = True


class BannerUpdate(PartialUpdate):
    title: Optional[Name] = None
    image_url: Optional[UrlOrPath] = None
    link: OptionalUrlOrPath = None
    order: Optional[int] = None
    active: Optional[bool] = None

    required_fields = ("title", "image_url", "order", "active")


class BannerOut(ContentOut):
    title: str
    image_url: str
    link: Optional[str]
    order: int


# Services

class ServiceCreate(BaseModel):
    name: Name
    description: Optional[str] = None
    active: bool = True


class ServiceUpdate(PartialUpdate):
    name: Optional[Name] = None
    description: Optional[str] = None
    active: Optional[bool] = None

    required_fields = ("name", "active")


class ServiceOut(ContentOut):
    name: str
    description: Optional[str]


# Links

class LinkCreate(BaseModel):
    name: Name
    url: AbsoluteUrl
    order: int = 0
    active: bool = True


class LinkUpdate(PartialUpdate):
    name: Optional[Name] = None
    url: Optional[AbsoluteUrl] = None
    order: Optional[int] = None
    active: Optional[bool] = None

    required_fields = ("name", "url", "order", "active")


class LinkOut(ContentOut):
    name: str
    url: str
    order: int


# News

class NewsCreate(BaseModel):
    title: Name
    content: NonEmptyStr
    image_url: OptionalUrlOrPath = None
    active: bool = True


class NewsUpdate(PartialUpdate):
    title: Optional[Name] = None
    content: Optional[NonEmptyStr] = None
    image_url: OptionalUrlOrPath = None
    active: Optional[bool] = None

    required_fields = ("title", "content", "active")


class NewsOut(ContentOut):
    title: str
    content: str
    image_url: Optional[str]


# Dynamic pages (public lookup by slug)

class PageCreate(BaseModel):
    name: Name
    slug: Slug
    content: NonEmptyStr
    active: bool = True


class PageUpdate(PartialUpdate):
    name: Optional[Name] = None
    slug: Optional[Slug] = None
    content: Optional[NonEmptyStr] = None
    active: Optional[bool] = None

    required_fields = ("name", "slug", "content", "active")


class PageOut(ContentOut):
    name: str
    slug: str
    content: str


# Review images (testimonial screenshots)

class ReviewImageCreate(BaseModel):
    image_url: UrlOrPath
    order: int = 0
    active: bool = True


class ReviewImageUpdate(PartialUpdate):
    image_url: Optional[UrlOrPath] = None
    order: Optional[int] = None
    active: Optional[bool] = None

    required_fields = ("image_url", "order", "active")


class ReviewImageOut(ContentOut):
    image_url: str
    order: int


# Announcements (popup notices)

class AnnouncementCreate(BaseModel):
    text: NonEmptyStr
    active: bool = True


class AnnouncementUpdate(PartialUpdate):
    text: Optional[NonEmptyStr] = None
    active: Optional[bool] = None

    required_fields = ("text", "active")


class AnnouncementOut(ContentOut):
    text: str


# Gallery

class GalleryCreate(BaseModel):
    title: Name
    type: Literal["image", "video"]
    media_url: UrlOrPath
    description: Optional[str] = None
    order: int = 0
    active: bool = True


class GalleryUpdate(PartialUpdate):
    title: Optional[Name] = None
    type: Optional[Literal["image", "video"]] = None
    media_url: Optional[UrlOrPath] = None
    description: Optional[str] = None
    order: Optional[int] = None
    active: Optional[bool] = None

    required_fields = ("title", "type", "media_url", "order", "active")


class GalleryOut(ContentOut):
    title: str
    type: str
    media_url: str
    description: Optional[str]
    order: int


# Informational entries

class InformationCreate(BaseModel):
    name: Name
    description: Optional[str] = None
    content: Optional[str] = Field(default=None, description="rich text (HTML)")
    active: bool = True


class InformationUpdate(PartialUpdate):
    name: Optional[Name] = None
    description: Optional[str] = None
    content: Optional[str] = None
    active: Optional[bool] = None

    required_fields = ("name", "active")


class InformationOut(ContentOut):
    name: str
    description: Optional[str]
    content: Optional[str]
