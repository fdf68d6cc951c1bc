"""
Label formatting - human-readable names from token slugs.
"""

from __future__ import annotations

from chuk_mcp_theme_json.constants import TITLE_CASE_EXCEPTIONS


def title_case(slug: str | None) -> str:
    """
    Convert a slug into a title-cased label.

    Dashes and underscores become spaces. Every word is capitalized except
    "of", "the" and "and" after the first word.

    Examples:
        title_case("blue-grey_dark") == "Blue Grey Dark"
        title_case("state-of-the-art") == "State of the Art"
    """
    if not slug:
        return ""

    words = slug.replace("-", " ").replace("_", " ").lower().split(" ")
    return " ".join(
        word if i != 0 and word in TITLE_CASE_EXCEPTIONS else word[:1].upper() + word[1:]
        for i, word in enumerate(words)
    )
