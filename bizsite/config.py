"""Central configuration for the site content build."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# ── Paths ──────────────────────────────────────────────────────────────────
ROOT_DIR = Path(__file__).resolve().parent.parent
CONTENT_DIR = Path(os.getenv("BIZSITE_CONTENT_DIR", ROOT_DIR / "content"))
DATA_DIR = Path(os.getenv("BIZSITE_DATA_DIR", ROOT_DIR / "data"))
OUTPUT_DIR = Path(os.getenv("BIZSITE_OUTPUT_DIR", ROOT_DIR / "dist"))

# Content collections (Markdown with YAML front matter)
BLOG_DIR = CONTENT_DIR / "blog"
TEAM_DIR = CONTENT_DIR / "team"

# Structured data files
SERVICES_JSON = CONTENT_DIR / "services" / "services.json"
LOCATIONS_JSON = CONTENT_DIR / "locations" / "locations.json"
HOMEPAGE_JSON = DATA_DIR / "homepage.json"
PAGES_JSON = DATA_DIR / "pages.json"
SITE_CONFIG_PATH = DATA_DIR / "site.yaml"

# ── Environment overrides ──────────────────────────────────────────────────
SITE_URL = os.getenv("SITE_URL", "")
INCLUDE_DRAFTS = os.getenv("INCLUDE_DRAFTS", "").strip().lower() in ("1", "true", "yes")

# ── Reading time ───────────────────────────────────────────────────────────
WORDS_PER_MINUTE = 238  # average adult silent reading speed

# ── Blog settings ──────────────────────────────────────────────────────────
RELATED_POSTS_LIMIT = 3
POSTS_PER_PAGE = 10
COLLECTION_EXTENSIONS = (".md", ".mdx")

# ── Feeds ──────────────────────────────────────────────────────────────────
RSS_MAX_ITEMS = 25
RSS_LANGUAGE = "en-us"
SITEMAP_CHANGEFREQ = "weekly"
SITEMAP_PRIORITY = 0.7

# ── SEO ────────────────────────────────────────────────────────────────────
META_DESCRIPTION_MAX = 160  # characters shown by search engines before truncation

# ── Icon registry ──────────────────────────────────────────────────────────
# Keys the site's icon component can draw (Heroicons-style outline set).
ICON_KEYS = {
    "shield",
    "users",
    "clock",
    "phone",
    "chart",
    "lightning",
    "cog",
    "check",
    "star",
    "mapPin",
    "mail",
    "building",
    "chevronDown",
    "arrowRight",
    "quote",
}
