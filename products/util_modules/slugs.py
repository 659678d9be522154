"""
Slug utilities for product URLs.

Turns product names into URL-friendly slugs and resolves collisions against
slugs that are already taken.
"""
import re

_INVALID_CHARS = re.compile(r'[^\w\s-]', re.ASCII)
_SEPARATOR_RUNS = re.compile(r'[\s_-]+')
_EDGE_HYPHENS = re.compile(r'^-+|-+$')
_VALID_SLUG = re.compile(r'^[a-z0-9-]+$')


def generate_slug(text: str) -> str:
    """
    Convert arbitrary text into a slug.

    Examples:
        >>> generate_slug("  My Cool App!  ")
        'my-cool-app'
        >>> generate_slug("snake_case & more--stuff")
        'snake-case-more-stuff'
    """
    slug = text.lower().strip()
    slug = _INVALID_CHARS.sub('', slug)
    slug = _SEPARATOR_RUNS.sub('-', slug)
    return _EDGE_HYPHENS.sub('', slug)


def generate_unique_slug(base_slug: str, existing_slugs) -> str:
    """
    Append -1, -2, ... to base_slug until it no longer collides.

    Args:
        base_slug: Slug to start from
        existing_slugs: Iterable of slugs already in use

    Returns:
        str: base_slug itself when free, otherwise the first free suffixed slug
    """
    taken = set(existing_slugs)
    slug = base_slug
    counter = 1

    while slug in taken:
        slug = f"{base_slug}-{counter}"
        counter += 1

    return slug


def is_valid_slug(slug: str) -> bool:
    """Lowercase letters, digits and inner hyphens only."""
    if not slug:
        return False
    return bool(_VALID_SLUG.match(slug)) and not slug.startswith('-') and not slug.endswith('-')
