"""Small text helpers shared by the schemas and feeds."""

import unicodedata

from slugify import slugify as _slugify


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def locale_sort_key(text: str) -> tuple[str, str, str]:
    """Sort key approximating a locale-aware comparison.

    Primary order ignores case and accents ("Álamo" sorts with "Alamo"),
    then accents break ties, then case.
    """
    return (_strip_accents(text).casefold(), text.casefold(), text)


# Symbols that would otherwise vanish and merge terms ("C++" and "C#" -> "c")
SLUG_REPLACEMENTS = [["+", " plus "], ["#", " sharp "], ["&", " and "], ["@", " at "]]


def slugify(text: str) -> str:
    """Lowercase, transliterated, hyphen-separated form of ``text`` for URLs.

    Example: 'Small Business Tips' -> 'small-business-tips', 'C++' -> 'c-plus-plus'.
    Never empty: text with nothing to transliterate (emoji, punctuation) falls
    back to its code points, blank text to 'untitled'.
    """
    slug = _slugify(text, replacements=SLUG_REPLACEMENTS)
    if slug:
        return slug
    codepoints = "-".join(f"{ord(ch):x}" for ch in text.strip())
    return codepoints or "untitled"


def replace_placeholder(template: str, value: str) -> str:
    """Substitute the first ``%s`` in ``template``."""
    return template.replace("%s", value, 1)
