"""Article slug generation and validation.

Zenn identifies an article by the stem of its Markdown file, so the slug must
be 12-50 characters drawn from ``a-z``, ``0-9``, ``-`` and ``_``.  Generated
slugs are ``article-`` followed by 16 hex characters taken from the OS CSPRNG.
"""
from __future__ import annotations

import re
import secrets

from slugify import slugify  # type: ignore[import-untyped]

from zenn_scaffold.errors import InvalidSlugError

SLUG_PREFIX = "article-"
TOKEN_BYTES = 8

SLUG_MIN_LENGTH = 12
SLUG_MAX_LENGTH = 50
_SLUG_RE = re.compile(r"[a-z0-9_-]+")


def generate_slug() -> str:
    """Return a fresh ``article-<16 hex chars>`` slug."""
    return f"{SLUG_PREFIX}{secrets.token_hex(TOKEN_BYTES)}"


def is_valid_slug(slug: str) -> bool:
    return SLUG_MIN_LENGTH <= len(slug) <= SLUG_MAX_LENGTH and bool(_SLUG_RE.fullmatch(slug))


def normalize_slug(raw: str) -> str:
    """Slugify a user-supplied slug and check it against the Zenn rule.

    Underscores survive normalisation since Zenn accepts them.
    """
    slug = slugify(raw, regex_pattern=r"[^a-z0-9_-]+")
    if not is_valid_slug(slug):
        raise InvalidSlugError(
            f"Invalid slug {raw!r}: must be {SLUG_MIN_LENGTH}-{SLUG_MAX_LENGTH} "
            "characters of a-z, 0-9, '-' or '_'"
        )
    return slug
