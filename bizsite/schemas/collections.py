"""Front matter schemas for the Markdown collections: blog posts and team members."""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Annotated, Optional

from pydantic import AfterValidator, BeforeValidator, Field

from bizsite.schemas.fields import ContentModel, is_url


def _coerce_date(value):
    # YAML gives bare dates as datetime.date; publish them at midnight UTC
    if isinstance(value, str) and len(value.strip()) == 10:
        try:
            value = date.fromisoformat(value.strip())
        except ValueError:
            return value
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    return value


def _assume_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


PublishDate = Annotated[
    datetime,
    BeforeValidator(_coerce_date),
    AfterValidator(_assume_utc),
    Field(strict=False),
]

SocialUrl = Annotated[str, AfterValidator(is_url)]


class TeamSocial(ContentModel):
    twitter: Optional[SocialUrl] = None
    linkedin: Optional[SocialUrl] = None
    github: Optional[SocialUrl] = None


class TeamMemberData(ContentModel):
    name: str
    slug: str
    bio: str
    # Path to avatar image
    avatar: str
    role: str
    social: Optional[TeamSocial] = None


class BlogPostData(ContentModel):
    title: str
    # Excerpt for listings, meta description and the RSS item
    description: str
    pub_date: PublishDate
    # Id of an entry in the team collection
    author: str
    image: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    # Drafts are left out of feeds and production builds
    draft: bool = False
