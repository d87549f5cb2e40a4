"""RSS 2.0 feed of the most recent published blog posts."""

from __future__ import annotations

import html
from datetime import timezone
from email.utils import format_datetime

from bizsite.config import RSS_LANGUAGE, RSS_MAX_ITEMS
from bizsite.loaders.collections import BlogPost, TeamMember, published_posts, resolve_author
from bizsite.schemas.site import SiteConfig

UNKNOWN_AUTHOR = "Unknown Author"


def rfc822_date(value) -> str:
    return format_datetime(value.astimezone(timezone.utc), usegmt=True)


def join_url(base: str, path: str) -> str:
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


def post_url(site_url: str, post: BlogPost) -> str:
    return join_url(site_url, f"blog/{post.id}/")


def feed_posts(posts: list[BlogPost], limit: int = RSS_MAX_ITEMS) -> list[BlogPost]:
    """Published posts, newest first, capped at ``limit``."""
    published = published_posts(posts)
    published.sort(key=lambda post: post.pub_date, reverse=True)
    return published[:limit]


def build_feed_items(
    site_url: str, posts: list[BlogPost], team: list[TeamMember]
) -> list[dict]:
    items = []
    for post in feed_posts(posts):
        author = resolve_author(team, post)
        items.append({
            "title": post.data.title,
            "description": post.data.description,
            "link": post_url(site_url, post),
            "pub_date": post.pub_date,
            "author": author.data.name if author else UNKNOWN_AUTHOR,
            "categories": [*post.data.categories, *post.data.tags],
        })
    return items


def _render_item(item: dict) -> str:
    lines = [
        "<item>",
        f"<title>{html.escape(item['title'])}</title>",
        f"<link>{html.escape(item['link'])}</link>",
        f'<guid isPermaLink="true">{html.escape(item["link"])}</guid>',
        f"<description>{html.escape(item['description'])}</description>",
        f"<pubDate>{rfc822_date(item['pub_date'])}</pubDate>",
    ]
    lines.extend(f"<category>{html.escape(c)}</category>" for c in item["categories"])
    lines.append(f"<author>{html.escape(item['author'])}</author>")
    lines.append("</item>")
    return "\n".join(lines)


def build_rss_feed(
    site: SiteConfig,
    posts: list[BlogPost],
    team: list[TeamMember],
    site_url: str | None = None,
) -> str:
    """Render the blog feed.

    ``site_url`` overrides ``site.seo.site_url`` (e.g. a preview deploy).
    """
    base = site_url or site.seo.site_url
    items = build_feed_items(base, posts, team)
    return "\n".join([
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<rss version="2.0">',
        "<channel>",
        f"<title>{html.escape(site.name)}</title>",
        f"<description>{html.escape(site.description)}</description>",
        f"<link>{html.escape(join_url(base, ''))}</link>",
        f"<language>{RSS_LANGUAGE}</language>",
        *(_render_item(item) for item in items),
        "</channel>",
        "</rss>",
    ]) + "\n"
