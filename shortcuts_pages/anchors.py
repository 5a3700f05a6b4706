"""Derive URL-fragment-safe anchors from catalog titles.

Examples
--------
>>> from shortcuts_pages.anchors import slugify
>>> slugify("Create an empty list of a given length")
'create-an-empty-list-of-a-given-length'
>>> slugify("Use `seq_len()` instead of `1:n`")
'use-seqlen-instead-of-1n'
"""

from __future__ import annotations

import re

WHITESPACE_RUN = re.compile(r"\s+")


def slugify(title: str) -> str:
    """Return the anchor slug for ``title``.

    The title is lower-cased, every whitespace run becomes a single hyphen,
    and any character that is not a letter, digit, or hyphen is dropped.
    """
    hyphenated = WHITESPACE_RUN.sub("-", title.strip().lower())
    return "".join(char for char in hyphenated if char.isalnum() or char == "-")


__all__ = ["slugify"]
