"""Human-readable report formatting for content audit results."""

from bizsite.config import META_DESCRIPTION_MAX


def format_content_report(results: dict, site_name: str = "") -> str:
    """Format audit results as a readable CLI report."""

    def _status(ok: bool) -> str:
        return "PASS" if ok else "FAIL"

    counts = results["counts"]
    authors = results["authors"]
    svc = results["service_icons"]
    home = results["homepage_icons"]
    meta = results["meta_descriptions"]
    hours = results["location_hours"]

    lines = [
        f"{'='*60}",
        f"CONTENT REPORT: {site_name}" if site_name else "CONTENT REPORT",
        f"{'='*60}",
        f"  Posts:     {counts['published_posts']} published, {counts['drafts']} drafts",
        f"  Team:      {counts['team']}",
        f"  Services:  {counts['services']}",
        f"  Locations: {counts['locations']}",
        "",
        f"  [{_status(authors['pass'])}] Post authors resolve to team members",
        f"  [{_status(svc['pass'])}] Service icons:        {len(svc['unknown'])} unknown",
        f"  [{_status(home['pass'])}] Homepage icons:       {len(home['unknown'])} unknown",
        f"  [{_status(meta['pass'])}] Meta descriptions:    {len(meta['too_long'])} over {META_DESCRIPTION_MAX} chars",
        f"  [{_status(hours['pass'])}] Location hours:       {len(hours['missing'])} missing",
    ]

    # Issues
    if results["issues"]:
        lines.append(f"\nISSUES ({len(results['issues'])}):")
        for issue in results["issues"]:
            lines.append(f"  - {issue}")

    # Warnings
    if results.get("warnings"):
        lines.append(f"\nWARNINGS ({len(results['warnings'])}):")
        for warning in results["warnings"]:
            lines.append(f"  ~ {warning}")

    if not results["issues"] and not results.get("warnings"):
        lines.append("\nAll checks passed!")

    lines.append(f"{'='*60}")
    return "\n".join(lines)
