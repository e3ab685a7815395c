"""Permission-table extraction from a resource section.

Documentation pages present permissions in several shapes. The extractor
tries each known table pattern in order and parses the first one that
matches; when none matches it scans the text after an "Application
permissions" heading for permission-shaped tokens.
"""

import logging
import re

from resource_catalog.domain.constants import (
    APPLICATION_PERMISSIONS_RE,
    EXCHANGE_MANAGE_AS_APP,
    EXCHANGE_RESOURCE_TYPE,
    HEADER_CELL_LABELS,
    MARKDOWN_SEPARATOR_RE,
    PERMISSION_STOPWORDS,
    PERMISSION_TABLE_PATTERNS,
    PERMISSION_TOKEN_RE,
    RAW_PERMISSION_WINDOW,
    TABLE_CELL_RE,
    TABLE_ROW_RE,
)
from resource_catalog.domain.models import OperationPermissionEntry, PermissionExtraction
from resource_catalog.parsers.html_text import clean_text

logger = logging.getLogger(__name__)


class PermissionTableExtractor:
    """Extracts operation → permission associations from a section.

    Args:
        patterns: Ordered ``(name, pattern)`` table matchers; each pattern
            exposes the table markup as the ``table`` group.
        raw_window: Characters scanned by the raw-text fallback.
    """

    def __init__(
        self,
        patterns: list[tuple[str, re.Pattern]] | None = None,
        raw_window: int = RAW_PERMISSION_WINDOW,
    ) -> None:
        self._patterns = patterns if patterns is not None else PERMISSION_TABLE_PATTERNS
        self._raw_window = raw_window

    def extract(self, section: str | None) -> PermissionExtraction:
        """Extract permissions from ``section``; empty when nothing is found."""
        if not section:
            return PermissionExtraction()

        table = self._find_table(section)
        if table is None:
            return self._extract_raw(section)

        if table.lstrip().startswith('|'):
            rows = self._markdown_rows(table)
        else:
            rows = self._html_rows(table)
        return self._extract_rows(rows)

    def _find_table(self, section: str) -> str | None:
        for name, pattern in self._patterns:
            match = pattern.search(section)
            if match:
                logger.debug("Permission table matched by %s", name)
                return match.group('table')
        return None

    # ── Row parsing ──────────────────────────────────────────────────

    @staticmethod
    def _html_rows(table: str) -> list[tuple[list[str], bool]]:
        rows = []
        for row_match in TABLE_ROW_RE.finditer(table):
            cells = TABLE_CELL_RE.findall(row_match.group(1))
            if not cells:
                continue
            is_header = all(kind.lower() == 'h' for kind, _ in cells)
            rows.append(([content for _, content in cells], is_header))
        return rows

    @staticmethod
    def _markdown_rows(table: str) -> list[tuple[list[str], bool]]:
        lines = [line.strip() for line in table.splitlines() if line.strip()]
        rows = []
        for i, line in enumerate(lines):
            if MARKDOWN_SEPARATOR_RE.match(line):
                continue
            cells = [c.strip() for c in line.strip('|').split('|')]
            followed_by_separator = i + 1 < len(lines) and MARKDOWN_SEPARATOR_RE.match(lines[i + 1])
            rows.append((cells, bool(followed_by_separator)))
        return rows

    def _extract_rows(self, rows: list[tuple[list[str], bool]]) -> PermissionExtraction:
        all_permissions: set[str] = set()
        entries: list[OperationPermissionEntry] = []

        for cells, is_header in rows:
            if is_header or len(cells) < 2:
                continue
            operation = clean_text(cells[0])
            if operation.lower() in HEADER_CELL_LABELS:
                continue

            permissions = find_permission_tokens(clean_text(cells[1]))
            if not permissions:
                continue
            all_permissions.update(permissions)
            entries.append(OperationPermissionEntry(operation=operation, permissions=tuple(permissions)))

        return PermissionExtraction(
            all_permissions=tuple(sorted(all_permissions)),
            operation_permissions=tuple(entries),
        )

    def _extract_raw(self, section: str) -> PermissionExtraction:
        heading = APPLICATION_PERMISSIONS_RE.search(section)
        if not heading:
            return PermissionExtraction()
        window = section[heading.end():heading.end() + self._raw_window]
        permissions = find_permission_tokens(clean_text(window))
        if permissions:
            logger.debug("Permissions recovered from raw text: %d", len(permissions))
        return PermissionExtraction(all_permissions=tuple(sorted(permissions)))


def find_permission_tokens(text: str) -> list[str]:
    """Find ``Word.Word.Word`` permission tokens, first occurrence order.

    Tokens with a segment in the structural stoplist are dropped.

    Examples:
        >>> find_permission_tokens('Device.Read.All, Device.ReadWrite.All')
        ['Device.Read.All', 'Device.ReadWrite.All']
        >>> find_permission_tokens('Microsoft.Graph.Beta')
        []
    """
    found: dict[str, None] = {}
    for token in PERMISSION_TOKEN_RE.findall(text):
        if any(part in PERMISSION_STOPWORDS for part in token.split('.')):
            continue
        found.setdefault(token, None)
    return list(found)


def apply_exchange_rule(extraction: PermissionExtraction, resource_type: str) -> PermissionExtraction:
    """Ensure Exchange resources always require ``Exchange.ManageAsApp``."""
    if resource_type.lower() != EXCHANGE_RESOURCE_TYPE:
        return extraction
    if EXCHANGE_MANAGE_AS_APP in extraction.all_permissions:
        return extraction
    return PermissionExtraction(
        all_permissions=tuple(sorted((*extraction.all_permissions, EXCHANGE_MANAGE_AS_APP))),
        operation_permissions=extraction.operation_permissions,
    )
