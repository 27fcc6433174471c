"""
Helpers Module - Utility functions for common operations
"""

from markupsafe import Markup, escape


def nl2br(text):
    """Escape text for HTML and turn newlines into <br> tags.

    Used for visitor-supplied text in outgoing emails and as a Jinja filter
    for the longer content blocks on the site.
    """
    if not text:
        return Markup('')
    normalized = str(text).replace('\r\n', '\n').replace('\r', '\n')
    return Markup('<br>').join(escape(line) for line in normalized.split('\n'))


def truncate_text(text, limit=300):
    """Cut text to `limit` characters, marking the cut with an ellipsis"""
    if not text:
        return ''
    return f"{text[:limit]}{'...' if len(text) > limit else ''}"


__all__ = [
    'nl2br',
    'truncate_text'
]
