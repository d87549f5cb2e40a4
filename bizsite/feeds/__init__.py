"""Feeds: RSS for the blog and the XML sitemap."""

from bizsite.feeds.rss import build_rss_feed
from bizsite.feeds.sitemap import build_sitemap, collect_site_urls, include_in_sitemap

__all__ = ["build_rss_feed", "build_sitemap", "collect_site_urls", "include_in_sitemap"]
