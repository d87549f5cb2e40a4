"""Build pipeline: load and validate all content, then write the build artifacts.

Artifacts written to the output directory:
    rss.xml         blog feed (25 newest published posts)
    sitemap.xml     indexable pages
    content.json    post manifest: reading time, related posts, rendered HTML
"""

from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

import markdown as md_lib

from bizsite.config import CONTENT_DIR, DATA_DIR, RELATED_POSTS_LIMIT
from bizsite.feeds.rss import build_rss_feed, feed_posts
from bizsite.feeds.sitemap import build_sitemap, collect_site_urls, include_in_sitemap
from bizsite.loaders.collections import (
    BlogPost,
    TeamMember,
    load_blog_posts,
    load_team,
    published_posts,
    resolve_author,
)
from bizsite.schemas.homepage import Homepage, load_homepage
from bizsite.schemas.locations import Location, load_locations
from bizsite.schemas.pages import Pages, load_pages
from bizsite.schemas.services import Service, get_sorted_services, load_services
from bizsite.schemas.site import SiteConfig, load_site_config
from bizsite.utils.reading_time import calculate_reading_time
from bizsite.utils.related_posts import get_related_posts

MARKDOWN_EXTENSIONS = ["extra", "sane_lists", "smarty"]


@dataclass
class SiteContent:
    site: SiteConfig
    services: list[Service]
    locations: list[Location]
    homepage: Homepage
    pages: Pages
    posts: list[BlogPost]
    team: list[TeamMember]


def load_site_content(
    content_dir: Path = CONTENT_DIR, data_dir: Path = DATA_DIR, site_url: str | None = None
) -> SiteContent:
    """Load and validate every content source.

    Raises the first source's ContentValidationError; each error already
    lists every problem in that source.
    """
    content_dir = Path(content_dir)
    data_dir = Path(data_dir)
    site_kwargs = {"site_url": site_url} if site_url is not None else {}
    return SiteContent(
        site=load_site_config(data_dir / "site.yaml", **site_kwargs),
        services=load_services(content_dir / "services" / "services.json"),
        locations=load_locations(content_dir / "locations" / "locations.json"),
        homepage=load_homepage(data_dir / "homepage.json"),
        pages=load_pages(data_dir / "pages.json"),
        team=load_team(content_dir / "team"),
        posts=load_blog_posts(content_dir / "blog"),
    )


def render_markdown(body: str) -> str:
    """Render a post body to HTML, dropping MDX import/export lines first."""
    body = re.sub(r"^(?:import|export)\s+.*$", "", body, flags=re.MULTILINE)
    return md_lib.markdown(body, extensions=MARKDOWN_EXTENSIONS)


def build_post_manifest(content: SiteContent, include_drafts: bool = False) -> list[dict]:
    """One record per post (newest first) with the derived fields pages need."""
    posts = content.posts if include_drafts else published_posts(content.posts)
    posts = sorted(posts, key=lambda post: post.pub_date, reverse=True)
    manifest = []
    for post in posts:
        author = resolve_author(content.team, post)
        related = get_related_posts(post, posts, RELATED_POSTS_LIMIT)
        manifest.append({
            "id": post.id,
            "title": post.data.title,
            "description": post.data.description,
            "pubDate": post.pub_date.isoformat(),
            "author": post.data.author,
            "authorName": author.data.name if author else None,
            "tags": post.data.tags,
            "categories": post.data.categories,
            "draft": post.data.draft,
            "readingTime": calculate_reading_time(post.body),
            "related": [r.id for r in related],
            "bodyHtml": render_markdown(post.body),
        })
    return manifest


def build_site(
    content: SiteContent,
    output_dir: Path,
    include_drafts: bool = False,
    site_url: str | None = None,
    now: datetime | None = None,
) -> dict:
    """Write rss.xml, sitemap.xml and content.json; return a build summary."""
    now = now or datetime.now(timezone.utc)
    output_dir = Path(output_dir)
    os.makedirs(output_dir, exist_ok=True)

    rss = build_rss_feed(content.site, content.posts, content.team, site_url=site_url)
    (output_dir / "rss.xml").write_text(rss, encoding="utf-8")

    urls = collect_site_urls(content, site_url=site_url)
    (output_dir / "sitemap.xml").write_text(build_sitemap(urls, lastmod=now), encoding="utf-8")

    manifest = {
        "site": content.site.model_dump(mode="json", by_alias=True, exclude_none=True),
        "builtAt": now.isoformat(),
        "services": [
            s.model_dump(mode="json", by_alias=True) for s in get_sorted_services(content.services)
        ],
        "posts": build_post_manifest(content, include_drafts=include_drafts),
    }
    with open(output_dir / "content.json", "w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, ensure_ascii=False)

    return {
        "output_dir": str(output_dir),
        "posts": len(manifest["posts"]),
        "feed_items": len(feed_posts(content.posts)),
        "sitemap_urls": sum(1 for url in urls if include_in_sitemap(url)),
        "services": len(content.services),
        "locations": len(content.locations),
        "team": len(content.team),
    }
