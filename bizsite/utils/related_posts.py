"""Find related blog posts by shared tags and categories.

Scoring:
    each shared tag       = 10 points
    each shared category  =  5 points

Posts are ranked by score (highest first). Ties, and the whole list when
nothing overlaps, are ordered by a hash of the two post ids, so the same
post always gets the same "random" picks from build to build.
"""

from __future__ import annotations

from bizsite.config import RELATED_POSTS_LIMIT
from bizsite.loaders.collections import BlogPost

TAG_WEIGHT = 10
CATEGORY_WEIGHT = 5

_UINT32 = 0xFFFFFFFF


def hash_string(text: str) -> int:
    """djb2-style hash over UTF-16 code units: ``h = (h * 33) ^ unit``, unsigned 32-bit."""
    h = 5381
    encoded = text.encode("utf-16-le")
    for i in range(0, len(encoded), 2):
        unit = encoded[i] | (encoded[i + 1] << 8)
        h = ((h * 33) ^ unit) & _UINT32
    return h


def _to_int32(value: int) -> int:
    value &= _UINT32
    return value - 0x100000000 if value & 0x80000000 else value


def tie_break_key(post_id: str, current_hash: int) -> int:
    """Signed 32-bit XOR of the candidate's hash with the current post's hash."""
    return _to_int32(hash_string(post_id) ^ current_hash)


def count_shared(current: list[str], other: list[str]) -> int:
    """How many items of ``other`` also appear in ``current`` (case-insensitive)."""
    current_set = {item.lower() for item in current}
    return sum(1 for item in other if item.lower() in current_set)


def score_post(current: BlogPost, candidate: BlogPost) -> int:
    shared_tags = count_shared(current.data.tags, candidate.data.tags)
    shared_categories = count_shared(current.data.categories, candidate.data.categories)
    return shared_tags * TAG_WEIGHT + shared_categories * CATEGORY_WEIGHT


def get_related_posts(
    current: BlogPost, all_posts: list[BlogPost], limit: int = RELATED_POSTS_LIMIT
) -> list[BlogPost]:
    """Up to ``limit`` posts related to ``current``, never including it."""
    others = [post for post in all_posts if post.id != current.id]
    if not others:
        return []

    current_hash = hash_string(current.id)
    scored = [(score_post(current, post), post) for post in others]

    if any(score > 0 for score, _ in scored):
        scored.sort(key=lambda item: (-item[0], tie_break_key(item[1].id, current_hash)))
    else:
        scored.sort(key=lambda item: tie_break_key(item[1].id, current_hash))

    return [post for _, post in scored[:limit]]
