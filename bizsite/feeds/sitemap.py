"""XML sitemap for every indexable page of the site.

Paginated listing pages after the first (``/blog/2/``,
``/blog/tags/<tag>/2/``, ...) are generated but kept out of the sitemap.
"""

from __future__ import annotations

import html
import math
import re
from datetime import datetime, timezone
from urllib.parse import urlparse

from bizsite.config import POSTS_PER_PAGE, SITEMAP_CHANGEFREQ, SITEMAP_PRIORITY
from bizsite.feeds.rss import join_url
from bizsite.loaders.collections import published_posts
from bizsite.utils.text import slugify

PAGINATED_PATHS = (
    re.compile(r"/blog/\d+/$"),
    re.compile(r"/blog/tags/[^/]+/\d+/$"),
    re.compile(r"/blog/categories/[^/]+/\d+/$"),
)


def include_in_sitemap(url: str) -> bool:
    """False for paginated pages beyond the first."""
    path = urlparse(url).path
    return not any(pattern.search(path) for pattern in PAGINATED_PATHS)


def _paginated(base_path: str, count: int) -> list[str]:
    pages = max(1, math.ceil(count / POSTS_PER_PAGE))
    return [base_path] + [f"{base_path}{n}/" for n in range(2, pages + 1)]


def collect_site_paths(content) -> list[str]:
    """Every page path the site builds, in a stable order (duplicates removed)."""
    posts = published_posts(content.posts)
    paths = ["/", "/services/", "/locations/", "/team/"]
    paths += _paginated("/blog/", len(posts))
    paths += [f"/blog/{post.id}/" for post in posts]

    tag_counts: dict[str, int] = {}
    category_counts: dict[str, int] = {}
    for post in posts:
        for tag in {slugify(t) for t in post.data.tags}:
            tag_counts[tag] = tag_counts.get(tag, 0) + 1
        for category in {slugify(c) for c in post.data.categories}:
            category_counts[category] = category_counts.get(category, 0) + 1
    for tag, count in sorted(tag_counts.items()):
        paths += _paginated(f"/blog/tags/{tag}/", count)
    for category, count in sorted(category_counts.items()):
        paths += _paginated(f"/blog/categories/{category}/", count)

    paths += [f"/services/{service.slug}/" for service in content.services]
    paths += [f"/locations/{location.slug}/" for location in content.locations]
    paths += [f"/team/{member.id}/" for member in content.team]
    paths += [item.link for item in content.site.footer_nav if item.link.startswith("/")]

    return list(dict.fromkeys(paths))


def collect_site_urls(content, site_url: str | None = None) -> list[str]:
    base = site_url or content.site.seo.site_url
    return [join_url(base, path) for path in collect_site_paths(content)]


def build_sitemap(urls: list[str], lastmod: datetime | None = None) -> str:
    """Render a sitemap for the indexable ``urls``."""
    lastmod = lastmod or datetime.now(timezone.utc)
    stamp = lastmod.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    items = []
    for url in urls:
        if not include_in_sitemap(url):
            continue
        items.append("\n".join([
            "<url>",
            f"<loc>{html.escape(url)}</loc>",
            f"<lastmod>{stamp}</lastmod>",
            f"<changefreq>{SITEMAP_CHANGEFREQ}</changefreq>",
            f"<priority>{SITEMAP_PRIORITY}</priority>",
            "</url>",
        ]))
    return "\n".join([
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
        *items,
        "</urlset>",
    ]) + "\n"
