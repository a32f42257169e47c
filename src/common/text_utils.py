"""
Text Utilities

Helper functions for slugs and front-matter values.
"""

import hashlib
import re


def sanitize_name(name: str) -> str:
    """
    Generate a filesystem and URL safe slug from a product name.

    Every character outside [a-zA-Z0-9] becomes a hyphen, hyphen runs
    collapse to one, and the result is lower-cased with no leading or
    trailing hyphen. Names with no ASCII letters or digits get a short
    hash of the name instead, so every product keeps its own slug.

    Args:
        name: Product display name

    Returns:
        Slug string

    Example:
        >>> sanitize_name("My App!!")
        'my-app'
    """
    slug = re.sub(r'[^a-zA-Z0-9]', '-', name)
    slug = re.sub(r'-+', '-', slug)
    slug = slug.lower().strip('-')
    if not slug:
        slug = 'product-' + hashlib.sha1(name.encode('utf-8')).hexdigest()[:8]
    return slug


def escape_quotes(text: str) -> str:
    """
    Backslash-escape single and double quotes.

    Args:
        text: Free text destined for a quoted front-matter value

    Returns:
        Text with every ' and " preceded by a backslash
    """
    if not text:
        return text

    return text.replace("'", "\\'").replace('"', '\\"')
