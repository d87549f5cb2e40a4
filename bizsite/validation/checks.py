"""Content quality checks and the audit_content orchestrator.

These run on content that already passed schema validation. Nothing here
stops a build on its own; callers decide what to do with ``issues``.
"""

from bizsite.config import ICON_KEYS, META_DESCRIPTION_MAX, RELATED_POSTS_LIMIT
from bizsite.loaders.collections import published_posts, resolve_author


# ── Main audit entry point ────────────────────────────────────────────────


def audit_content(content) -> dict:
    """Run all quality checks on loaded site content.

    Returns a dict with per-check results, issues, warnings and overall
    pass/fail.
    """
    results = {
        "counts": check_counts(content),
        "authors": check_authors(content),
        "service_icons": check_service_icons(content),
        "homepage_icons": check_homepage_icons(content),
        "meta_descriptions": check_meta_descriptions(content),
        "location_hours": check_location_hours(content),
    }

    issues, warnings = _collect_issues(results)
    results["issues"] = issues
    results["warnings"] = warnings
    results["pass"] = len(issues) == 0
    return results


# ── Issue aggregation ─────────────────────────────────────────────────────


def _collect_issues(results: dict) -> tuple[list[str], list[str]]:
    """Walk through all check results and collect issues/warnings."""
    issues = []
    warnings = []

    counts = results["counts"]
    if counts["published_posts"] == 0:
        warnings.append("No published blog posts (RSS feed will be empty)")
    elif counts["published_posts"] <= RELATED_POSTS_LIMIT:
        warnings.append(
            f"Only {counts['published_posts']} published posts; related posts will show "
            f"fewer than {RELATED_POSTS_LIMIT} entries"
        )

    for post_id, author in results["authors"]["unresolved"]:
        issues.append(f"Post '{post_id}' references unknown author '{author}'")

    for slug, icon in results["service_icons"]["unknown"]:
        warnings.append(f"Service '{slug}' uses unknown icon '{icon}'")

    for title, icon in results["homepage_icons"]["unknown"]:
        warnings.append(f"Homepage feature '{title}' uses unknown icon '{icon}'")

    for key, length in results["meta_descriptions"]["too_long"]:
        warnings.append(
            f"Listing '{key}' description is {length} characters (keep under {META_DESCRIPTION_MAX})"
        )

    for slug in results["location_hours"]["missing"]:
        warnings.append(f"Location '{slug}' has no operating hours")

    return issues, warnings


# ── Individual check functions ────────────────────────────────────────────


def check_counts(content) -> dict:
    posts = published_posts(content.posts)
    return {
        "posts": len(content.posts),
        "published_posts": len(posts),
        "drafts": len(content.posts) - len(posts),
        "team": len(content.team),
        "services": len(content.services),
        "locations": len(content.locations),
    }


def check_authors(content) -> dict:
    """Every post's author must be a team member id."""
    unresolved = [
        (post.id, post.data.author)
        for post in content.posts
        if resolve_author(content.team, post) is None
    ]
    return {"unresolved": unresolved, "pass": not unresolved}


def check_service_icons(content) -> dict:
    unknown = [(s.slug, s.icon) for s in content.services if s.icon not in ICON_KEYS]
    return {"unknown": unknown, "pass": not unknown}


def check_homepage_icons(content) -> dict:
    unknown = [(f.title, f.icon) for f in content.homepage.features if f.icon not in ICON_KEYS]
    return {"unknown": unknown, "pass": not unknown}


def check_meta_descriptions(content) -> dict:
    """Listing descriptions should fit in a search result snippet."""
    too_long = []
    for key in ("blog", "services", "locations", "team"):
        description = getattr(content.pages.listings, key).description
        if len(description) > META_DESCRIPTION_MAX:
            too_long.append((key, len(description)))
    return {"too_long": too_long, "pass": not too_long}


def check_location_hours(content) -> dict:
    missing = [loc.slug for loc in content.locations if not loc.operating_hours]
    return {"missing": missing, "pass": not missing}
