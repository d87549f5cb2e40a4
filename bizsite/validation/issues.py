"""Turn pydantic validation errors into the one-line-per-issue format used in error messages."""

from __future__ import annotations

from pydantic import ValidationError


def issue_path(loc: tuple) -> str:
    """Join a pydantic error location into a dotted path (``0.features.1.title``)."""
    return ".".join(str(part) for part in loc)


def collect_issues(error: ValidationError, prefix: str = "") -> list[str]:
    """Return ``"path: message"`` for every error pydantic found, in report order.

    An error whose context has ``also`` (a second rule the same value broke)
    adds that message as another issue on the same path.
    """
    issues = []
    for err in error.errors():
        path = issue_path(err["loc"])
        if prefix:
            path = f"{prefix}.{path}" if path else prefix
        issues.append(f"{path}: {err['msg']}")
        also = (err.get("ctx") or {}).get("also")
        if also:
            issues.append(f"{path}: {also}")
    return issues


def format_issues(issues: list[str]) -> str:
    """Render issues as an indented bullet list, one per line."""
    return "\n".join(f"  - {issue}" for issue in issues)


def find_duplicates(values: list[str]) -> list[str]:
    """Values that occur more than once, each listed once, in order of first repeat."""
    seen = set()
    duplicates = []
    for value in values:
        if value in seen and value not in duplicates:
            duplicates.append(value)
        seen.add(value)
    return duplicates
