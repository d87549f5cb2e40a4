"""Data loading: JSON/YAML data files and Markdown collections."""

from bizsite.loaders.data_files import read_json, read_yaml
from bizsite.loaders.collections import (
    BlogPost,
    TeamMember,
    load_blog_posts,
    load_team,
    published_posts,
    resolve_author,
    split_front_matter,
)

__all__ = [
    "read_json",
    "read_yaml",
    "BlogPost",
    "TeamMember",
    "load_blog_posts",
    "load_team",
    "published_posts",
    "resolve_author",
    "split_front_matter",
]
