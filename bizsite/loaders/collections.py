"""Load Markdown collections (blog posts, team members) with YAML front matter.

Every file under the collection directory matching COLLECTION_EXTENSIONS is
an entry. Its id is the path relative to the collection root without the
extension, lowercased: ``blog/2024/launch-day.md`` -> ``2024/launch-day``.
All entries are validated before raising, so one error lists every broken
file.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import yaml
from pydantic import ValidationError

from bizsite.config import BLOG_DIR, COLLECTION_EXTENSIONS, TEAM_DIR
from bizsite.schemas.collections import BlogPostData, TeamMemberData
from bizsite.validation.errors import CollectionValidationError
from bizsite.validation.issues import collect_issues, find_duplicates, format_issues

FRONT_MATTER_PATTERN = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)


@dataclass
class BlogPost:
    id: str
    data: BlogPostData
    body: str
    path: Path

    @property
    def pub_date(self) -> datetime:
        return self.data.pub_date


@dataclass
class TeamMember:
    id: str
    data: TeamMemberData
    body: str
    path: Path


def split_front_matter(text: str) -> tuple[dict, str]:
    """Split a Markdown document into (front matter dict, body).

    Documents without a leading ``---`` block have empty front matter.
    Raises yaml.YAMLError for malformed YAML and ValueError when the front
    matter is not a mapping.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return {}, text
    metadata = yaml.safe_load(match.group(1)) or {}
    if not isinstance(metadata, dict):
        raise ValueError("front matter must be a mapping")
    return metadata, text[match.end():]


def entry_id(path: Path, root: Path) -> str:
    relative = path.relative_to(root).with_suffix("")
    return relative.as_posix().lower()


def _collection_files(root: Path) -> list[Path]:
    if not root.exists():
        return []
    return sorted(
        p for p in root.rglob("*") if p.is_file() and p.suffix.lower() in COLLECTION_EXTENSIONS
    )


def _load_collection(name: str, root: Path, model, entry_cls) -> list:
    entries = []
    issues = []
    for path in _collection_files(root):
        entry = entry_id(path, root)
        try:
            metadata, body = split_front_matter(path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, ValueError) as e:
            issues.append(f"{entry}: invalid front matter ({e})")
            continue
        try:
            data = model.model_validate(metadata)
        except ValidationError as e:
            issues.extend(collect_issues(e, prefix=entry))
            continue
        entries.append(entry_cls(id=entry, data=data, body=body, path=path))

    # Two files can map to the same id (e.g. post.md and post.mdx)
    for duplicate in find_duplicates([e.id for e in entries]):
        issues.append(f"{duplicate}: duplicate entry id")

    if issues:
        raise CollectionValidationError(name, f"\n{format_issues(issues)}", issues)

    print(f"  Loaded {len(entries)} {name} entries from {root}")
    return entries


def load_blog_posts(root: Path = BLOG_DIR) -> list[BlogPost]:
    return _load_collection("blog", Path(root), BlogPostData, BlogPost)


def load_team(root: Path = TEAM_DIR) -> list[TeamMember]:
    return _load_collection("team", Path(root), TeamMemberData, TeamMember)


def published_posts(posts: list[BlogPost]) -> list[BlogPost]:
    """Posts that are not drafts, in their original order."""
    return [post for post in posts if not post.data.draft]


def resolve_author(team: list[TeamMember], post: BlogPost) -> TeamMember | None:
    """The team member a post's ``author`` refers to, or None if it dangles."""
    for member in team:
        if member.id == post.data.author:
            return member
    return None
