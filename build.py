#!/usr/bin/env python3
"""Build the site artifacts: validate all content, then write RSS, sitemap and manifest.

Usage:
    python build.py                               # Build into dist/
    python build.py --output public               # Build into another directory
    python build.py --drafts                      # Include drafts in content.json
    python build.py --site-url https://preview.example.com
    python build.py --dry-run                     # Validate and summarize, write nothing
"""

import argparse
import sys
from pathlib import Path

from bizsite.config import CONTENT_DIR, DATA_DIR, INCLUDE_DRAFTS, OUTPUT_DIR
from bizsite.feeds.rss import feed_posts
from bizsite.loaders import published_posts
from bizsite.pipeline import build_site, load_site_content
from bizsite.validation import ContentValidationError


def main():
    parser = argparse.ArgumentParser(description="Build site feeds and content manifest")
    parser.add_argument("--output", type=Path, default=OUTPUT_DIR, help="Output directory")
    parser.add_argument("--content-dir", type=Path, default=CONTENT_DIR, help="Content directory")
    parser.add_argument("--data-dir", type=Path, default=DATA_DIR, help="Data directory")
    parser.add_argument("--drafts", action="store_true", default=INCLUDE_DRAFTS,
                        help="Include draft posts in content.json (never in the RSS feed)")
    parser.add_argument("--site-url", type=str, default=None,
                        help="Override seo.siteUrl for feed and sitemap links")
    parser.add_argument("--dry-run", action="store_true", help="Validate only, write nothing")
    args = parser.parse_args()

    print(f"{'='*60}")
    print("Loading content...")
    print(f"{'='*60}")
    try:
        content = load_site_content(args.content_dir, args.data_dir, site_url=args.site_url)
    except ContentValidationError as e:
        print(f"\nERROR: {e}")
        sys.exit(1)

    if args.dry_run:
        print("\n  [DRY RUN] Would build:")
        print(f"    Published posts: {len(published_posts(content.posts))}")
        print(f"    Feed items: {len(feed_posts(content.posts))}")
        print(f"    Services: {len(content.services)}, locations: {len(content.locations)}")
        return

    print("\nBuilding artifacts...")
    summary = build_site(
        content, args.output, include_drafts=args.drafts, site_url=args.site_url
    )

    print(f"\n{'='*60}")
    print("SUMMARY")
    print(f"{'='*60}")
    print(f"  Posts in manifest: {summary['posts']}")
    print(f"  RSS items:         {summary['feed_items']}")
    print(f"  Sitemap URLs:      {summary['sitemap_urls']}")
    print(f"  Services:          {summary['services']}")
    print(f"  Locations:         {summary['locations']}")
    print(f"  Team members:      {summary['team']}")
    print(f"\n✓ Wrote rss.xml, sitemap.xml, content.json to {summary['output_dir']}")


if __name__ == "__main__":
    main()
