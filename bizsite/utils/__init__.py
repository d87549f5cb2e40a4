"""Pure helpers: reading time, related posts, text utilities."""

from bizsite.utils.reading_time import calculate_reading_time
from bizsite.utils.related_posts import get_related_posts

__all__ = ["calculate_reading_time", "get_related_posts"]
