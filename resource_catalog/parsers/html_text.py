"""Plain-text helpers for markup fragments."""

import html
import re

from resource_catalog.domain.constants import TAG_RE

_WHITESPACE_RE = re.compile(r'\s+')


def clean_text(fragment: str) -> str:
    """Strip tags, decode entities, and collapse whitespace.

    Examples:
        >>> clean_text('<code>Device.Read.All</code>&nbsp;and  more')
        'Device.Read.All and more'
    """
    text = TAG_RE.sub(' ', fragment or '')
    text = html.unescape(text)
    return _WHITESPACE_RE.sub(' ', text).strip()
