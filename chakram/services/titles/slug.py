"""
Slug normalization shared by query and candidate titles.

Both sides of every comparison go through `normalize` so that scoring
works on a single normal form.
"""

import re

_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


def normalize(text: str) -> str:
    """
    Fold a title into a space-separated sequence of ``[a-z0-9]`` tokens.

    Lowercases, collapses every run of whitespace or other characters into a
    single space and trims. Idempotent.

    Example:
        >>> normalize("The Office (US)")
        'the office us'
    """
    return _NON_SLUG_RE.sub(" ", text.lower()).strip()
