"""
Website link helpers for product submissions.
"""
import re
from urllib.parse import urlparse

_SCHEME_PREFIX = re.compile(r'^https?://')
_WWW_PREFIX = re.compile(r'^www\.')


def normalize_url(url):
    """Add https:// to a URL missing an http(s) scheme. Blank input is returned as-is."""
    if not url or not url.strip():
        return url

    clean_url = url.strip()
    if clean_url.startswith('http://') or clean_url.startswith('https://'):
        return clean_url

    return f"https://{clean_url}"


def extract_domain_name(url: str) -> str:
    """
    Get the bare domain of a website URL for display.

    Examples:
        >>> extract_domain_name("https://www.example.com/pricing")
        'example.com'
        >>> extract_domain_name("app.example.io")
        'app.example.io'
    """
    url_with_scheme = url if url.startswith('http') else f"https://{url}"
    try:
        hostname = urlparse(url_with_scheme).hostname
    except ValueError:
        hostname = None

    if hostname:
        if hostname.startswith('www.'):
            hostname = hostname[4:]
        return hostname

    # Fall back to stripping the scheme and path by hand
    clean_url = _WWW_PREFIX.sub('', _SCHEME_PREFIX.sub('', url))
    clean_url = clean_url.split('/', 1)[0]
    return clean_url or url
