"""Shared constants, regex patterns, and extraction configuration.

Centralizes the patterns used by the section locator, the permission
extractor, the resource-name extractor, and the friendly-name formatter.
"""

import re

# ── Identifiers ──────────────────────────────────────────────────────────

RESOURCE_PREFIX = 'microsoft'

# Resource types and names are drawn from letters, digits and underscore
NAME_PART_RE = re.compile(r'^[A-Za-z0-9_]+$')

# ── Windows ──────────────────────────────────────────────────────────────

# Maximum characters scanned from a section marker to the next heading
SECTION_WINDOW = 30_000

# Characters scanned after an "Application permissions" heading when no
# table could be matched
RAW_PERMISSION_WINDOW = 3_000

# ── Section Markers ──────────────────────────────────────────────────────

# Top-level heading: an HTML <h2> or a markdown "## " line
TOP_LEVEL_HEADING_RE = re.compile(r'<h2\b|^##\s', re.I | re.M)


def id_marker_pattern(resource_key: str) -> re.Pattern:
    """Pattern for an id-style anchor naming ``resource_key``."""
    return re.compile(r'\bid\s*=\s*["\']' + re.escape(resource_key) + r'["\']', re.I)


def href_marker_pattern(resource_key: str) -> re.Pattern:
    """Pattern for a link-style reference to ``#resource_key``."""
    return re.compile(
        r'\bhref\s*=\s*["\'][^"\'#]*#' + re.escape(resource_key) + r'["\']', re.I,
    )


# ── Resource Name Discovery ──────────────────────────────────────────────

HEADING_ID_RE = re.compile(
    r'<h2\b[^>]*?\bid\s*=\s*["\']([A-Za-z][A-Za-z0-9_]*)["\']', re.I,
)
ANCHOR_LINK_RE = re.compile(
    r'<a\b[^>]*?\bhref\s*=\s*["\']#([A-Za-z][A-Za-z0-9_]*)["\']', re.I,
)
HEADING_TEXT_RE = re.compile(
    r'<h2\b[^>]*>\s*(?:<[^>]+>\s*)*([A-Za-z][A-Za-z0-9_]*)\s*(?:</[^>]+>\s*)*</h2>'
    r'|^##\s+([A-Za-z][A-Za-z0-9_]*)\s*$',
    re.I | re.M,
)

# Heading pairing a lowercase anchor id with its camelCase display text
CAMEL_HEADING_RE = re.compile(
    r'<h[2-4]\b[^>]*?\bid\s*=\s*["\']([a-z][a-z0-9_]*)["\'][^>]*>'
    r'\s*(?:<[^>]+>\s*)*([A-Za-z][A-Za-z0-9_]*)',
)

# Structural anchors that never name a resource
IGNORED_SECTION_NAMES = frozenset({
    'contents', 'examples', 'feedback', 'main', 'methods', 'next', 'overview',
    'permissions', 'prerequisites', 'properties', 'related', 'relationships',
    'resources', 'summary',
})

PARAGRAPH_RE = re.compile(r'<p\b[^>]*>(.*?)</p>', re.I | re.S)

# ── Permission Tables ────────────────────────────────────────────────────

_TABLE = r'(?P<table><table\b.*?</table>)'

# Tried in order; the first pattern that matches wins.
PERMISSION_TABLE_PATTERNS: list[tuple[str, re.Pattern]] = [
    ('application_heading', re.compile(
        r'<h[2-6]\b[^>]*>\s*Application\s+permissions\s*</h[2-6]>\s*' + _TABLE,
        re.I | re.S,
    )),
    ('graph_application_heading', re.compile(
        r'<h[2-6]\b[^>]*>[^<]*Microsoft\s+Graph[^<]*Application\s+permissions[^<]*</h[2-6]>\s*'
        + _TABLE,
        re.I | re.S,
    )),
    ('permissions_subheading', re.compile(
        r'<h[3-6]\b[^>]*>[^<]*permissions[^<]*</h[3-6]>(?:(?!<h[1-6]\b).)*?' + _TABLE,
        re.I | re.S,
    )),
    ('permissions_container', re.compile(
        r'<(?P<tag>div|p|strong|b|span)\b[^>]*>[^<]*permissions[^<]*</(?P=tag)>'
        r'(?:\s*</[a-z0-9]+>)*\s*' + _TABLE,
        re.I | re.S,
    )),
    ('markdown_table', re.compile(
        r'Application\s+permissions[^\n]*\n(?:[ \t]*\n)*'
        r'(?P<table>(?:[ \t]*\|[^\n]*(?:\n|$))+)',
        re.I,
    )),
]

APPLICATION_PERMISSIONS_RE = re.compile(r'Application\s+permissions', re.I)

TABLE_ROW_RE = re.compile(r'<tr\b[^>]*>(.*?)</tr>', re.I | re.S)
TABLE_CELL_RE = re.compile(r'<t([hd])\b[^>]*>(.*?)</t[hd]>', re.I | re.S)
# Every cell of a separator row is dashes with optional alignment colons
MARKDOWN_SEPARATOR_RE = re.compile(r'^\|?\s*:?-+:?\s*(?:\|\s*:?-+:?\s*)*\|?$')
TAG_RE = re.compile(r'<[^>]+>')

# Permission scopes look like Word.Word.Word, each word capitalized
PERMISSION_TOKEN_RE = re.compile(r'\b[A-Z][A-Za-z0-9]*\.[A-Z][A-Za-z0-9]*\.[A-Z][A-Za-z0-9]*\b')
PERMISSION_STOPWORDS = frozenset({'Operation', 'Supported', 'Permissions', 'Microsoft', 'Graph'})

# First-cell labels that mark a header row
HEADER_CELL_LABELS = frozenset({'operation', 'operations', 'permission', 'permissions'})

EXCHANGE_RESOURCE_TYPE = 'exchange'
EXCHANGE_MANAGE_AS_APP = 'Exchange.ManageAsApp'

# ── Friendly Names ───────────────────────────────────────────────────────

# Whole-word corrections applied in order, case-insensitive
ABBREVIATION_FIXES: list[tuple[str, str]] = [
    ('Ios', 'iOS'),
    ('Mac Os', 'macOS'),
    ('Api', 'API'),
    ('Id', 'ID'),
    ('Vpp', 'VPP'),
    ('Mdm', 'MDM'),
    ('Mam', 'MAM'),
    ('Url', 'URL'),
    ('Vpn', 'VPN'),
    ('Wifi', 'WiFi'),
    ('Scep', 'SCEP'),
    ('Pkcs', 'PKCS'),
    ('Pfx', 'PFX'),
    ('Ad', 'AD'),
    ('Ip', 'IP'),
    ('Asr', 'ASR'),
]

ABBREVIATION_FIX_RES: list[tuple[re.Pattern, str]] = [
    (re.compile(r'\b' + re.escape(word) + r'\b', re.I), fixed)
    for word, fixed in ABBREVIATION_FIXES
]

# Literal substring corrections applied after the abbreviation pass
LITERAL_FIXES: list[tuple[str, str]] = [
    ('Windows10', 'Windows 10'),
    ('O365', 'Office 365'),
]

# Compound tokens protected from splitting at their inner capitals,
# paired with the spaced form they are restored to
PROTECTED_TOKENS: list[tuple[re.Pattern, str]] = [
    (re.compile(r'iOS'), ' iOS'),
    (re.compile(r'macOS'), ' macOS'),
    (re.compile(r'(?<=[a-z])AD(?=[A-Z]|$)|^AD(?=[A-Z])'), ' AD'),
    (re.compile(r'(?<=[a-z])IP(?=[A-Z]|$)|^IP(?=[A-Z])'), ' IP'),
]
