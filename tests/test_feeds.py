from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from xml.dom import minidom

import pytest

from bizsite.feeds.rss import build_rss_feed, feed_posts, rfc822_date
from bizsite.feeds.sitemap import (
    build_sitemap,
    collect_site_paths,
    collect_site_urls,
    include_in_sitemap,
)
from bizsite.schemas.site import validate_site_config

START = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def site(site_data):
    return validate_site_config(site_data)


def _content(site, posts, team=()):
    return SimpleNamespace(
        site=site, posts=posts, services=[], locations=[], team=list(team)
    )


#============================================
def test_rfc822_date() -> None:
    assert rfc822_date(datetime(2024, 1, 8, tzinfo=timezone.utc)) == "Mon, 08 Jan 2024 00:00:00 GMT"


#============================================
def test_feed_is_capped_newest_first_without_drafts(make_post) -> None:
    posts = [make_post(f"post-{n}", pub_date=START + timedelta(days=n)) for n in range(30)]
    posts.append(make_post("future-draft", pub_date=START + timedelta(days=100), draft=True))

    selected = feed_posts(posts)

    assert len(selected) == 25
    assert selected[0].id == "post-29"
    assert selected[-1].id == "post-5"
    assert all(not post.data.draft for post in selected)


#============================================
def test_rss_channel_and_item(site, make_post, make_member) -> None:
    post = make_post(
        "hello",
        title="Tips & Tricks",
        tags=["crm"],
        categories=["Technology"],
        pub_date=datetime(2024, 1, 8, tzinfo=timezone.utc),
    )
    feed = build_rss_feed(site, [post], [make_member("jane-doe")])

    assert feed.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<rss version="2.0">')
    assert feed.endswith("</rss>\n")
    assert "<title>Acme Services</title>" in feed
    assert "<link>https://acme.example.com/</link>" in feed
    assert "<language>en-us</language>" in feed
    assert "<title>Tips &amp; Tricks</title>" in feed
    assert "<link>https://acme.example.com/blog/hello/</link>" in feed
    assert "<pubDate>Mon, 08 Jan 2024 00:00:00 GMT</pubDate>" in feed
    assert "<author>Jane Doe</author>" in feed
    # Categories come before tags
    assert feed.index("<category>Technology</category>") < feed.index("<category>crm</category>")


#============================================
def test_rss_unknown_author_and_url_override(site, make_post) -> None:
    post = make_post("hello", author="ghost")
    feed = build_rss_feed(site, [post], [], site_url="https://preview.example.com/")

    assert "<author>Unknown Author</author>" in feed
    assert "<link>https://preview.example.com/blog/hello/</link>" in feed
    assert "acme.example.com" not in feed


#============================================
def test_rss_without_posts(site) -> None:
    feed = build_rss_feed(site, [], [])
    assert "<item>" not in feed
    assert "</channel>" in feed


#============================================
@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://acme.example.com/blog/", True),
        ("https://acme.example.com/blog/2/", False),
        ("https://acme.example.com/blog/hello/", True),
        ("https://acme.example.com/blog/tags/crm/", True),
        ("https://acme.example.com/blog/tags/crm/3/", False),
        ("https://acme.example.com/blog/categories/news/2/", False),
        ("https://acme.example.com/services/", True),
    ],
)
def test_include_in_sitemap(url, expected) -> None:
    assert include_in_sitemap(url) is expected


#============================================
def test_collect_site_paths_paginates_listings(site, make_post) -> None:
    posts = [
        make_post(f"post-{n}", tags=["Small Business"], pub_date=START + timedelta(days=n))
        for n in range(12)
    ]
    posts.append(make_post("draft", tags=["secret"], draft=True))

    paths = collect_site_paths(_content(site, posts))

    assert paths[:4] == ["/", "/services/", "/locations/", "/team/"]
    assert "/blog/" in paths
    assert "/blog/2/" in paths
    assert "/blog/3/" not in paths
    assert "/blog/tags/small-business/2/" in paths
    assert "/blog/draft/" not in paths
    assert "/blog/tags/secret/" not in paths
    # Footer links inside the site are included
    assert "/privacy" in paths
    assert len(paths) == len(set(paths))


#============================================
def test_sitemap_skips_paginated_pages(site, make_post) -> None:
    posts = [make_post(f"post-{n}") for n in range(12)]
    urls = collect_site_urls(_content(site, posts))
    assert "https://acme.example.com/blog/2/" in urls

    sitemap = build_sitemap(urls, lastmod=datetime(2024, 6, 1, 12, tzinfo=timezone.utc))

    assert sitemap.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">' in sitemap
    assert "<loc>https://acme.example.com/</loc>" in sitemap
    assert "<loc>https://acme.example.com/blog/post-0/</loc>" in sitemap
    assert "https://acme.example.com/blog/2/" not in sitemap
    assert "<lastmod>2024-06-01T12:00:00.000Z</lastmod>" in sitemap
    assert "<changefreq>weekly</changefreq>" in sitemap
    assert "<priority>0.7</priority>" in sitemap


#============================================
def test_sitemap_is_well_formed_xml_with_query_links(site_data, make_post) -> None:
    """
    Ampersands in page URLs are escaped so the sitemap still parses.
    """
    site_data["footerNav"].append({"text": "Search", "link": "/search?q=a&page=1"})
    site = validate_site_config(site_data)

    sitemap = build_sitemap(collect_site_urls(_content(site, [make_post("hello")])))

    document = minidom.parseString(sitemap.encode("utf-8"))
    locs = [node.firstChild.data for node in document.getElementsByTagName("loc")]
    assert "https://acme.example.com/search?q=a&page=1" in locs
    assert "<loc>https://acme.example.com/search?q=a&amp;page=1</loc>" in sitemap


#============================================
def test_term_archives_never_have_empty_or_merged_segments(site, make_post) -> None:
    posts = [
        make_post("japanese", tags=["日本語"]),
        make_post("cpp", tags=["C++"]),
        make_post("csharp", tags=["C#"]),
        make_post("emoji", categories=["🚀"]),
    ]

    paths = collect_site_paths(_content(site, posts))

    tag_paths = [p for p in paths if p.startswith("/blog/tags/")]
    category_paths = [p for p in paths if p.startswith("/blog/categories/")]
    assert "/blog/tags//" not in tag_paths
    assert "/blog/categories//" not in category_paths
    assert "/blog/tags/c-plus-plus/" in tag_paths
    assert "/blog/tags/c-sharp/" in tag_paths
    assert len(tag_paths) == 3
    assert len(category_paths) == 1
