"""Estimate blog post reading time from its Markdown/MDX source."""

import math
import re

from bizsite.config import WORDS_PER_MINUTE


def strip_markup(content: str) -> str:
    """Remove everything that is not prose before counting words.

    Strips fenced code blocks, inline code, MDX import/export lines,
    JSX/HTML tags, HTML comments and a leading front matter block.
    """
    text = content
    # Fenced code blocks: ```...```
    text = re.sub(r"```.*?```", "", text, flags=re.DOTALL)
    # Inline code: `...`
    text = re.sub(r"`[^`]+`", "", text)
    # MDX import/export statements
    text = re.sub(r"^import\s+.*$", "", text, flags=re.MULTILINE)
    text = re.sub(r"^export\s+.*$", "", text, flags=re.MULTILINE)
    # JSX/HTML tags, self-closing included
    text = re.sub(r"<[^>]+>", "", text)
    # HTML comments (any left after tag removal)
    text = re.sub(r"<!--.*?-->", "", text, flags=re.DOTALL)
    # First front matter block only
    text = re.sub(r"^---.*?---", "", text, count=1, flags=re.MULTILINE | re.DOTALL)
    return text


def count_words(text: str) -> int:
    return len(text.split())


def calculate_reading_time(content: str) -> int:
    """Reading time in whole minutes, rounded up, never less than 1.

    Example: a 500-word post -> 3 (500 / 238 = 2.1, rounded up).
    """
    words = count_words(strip_markup(content))
    return max(1, math.ceil(words / WORDS_PER_MINUTE))
