"""Discovers resource names and their documented casing on a page."""

import logging

from resource_catalog.domain.constants import (
    ANCHOR_LINK_RE,
    CAMEL_HEADING_RE,
    HEADING_ID_RE,
    HEADING_TEXT_RE,
    IGNORED_SECTION_NAMES,
    PARAGRAPH_RE,
)
from resource_catalog.parsers.html_text import clean_text

logger = logging.getLogger(__name__)


class ResourceNameExtractor:
    """Collects resource names from heading ids, anchor links and heading text.

    The three sources are matched independently and merged
    case-insensitively. When sources disagree on casing the earliest source
    wins: id anchors, then anchor links, then heading text.
    """

    def extract_names(self, page_text: str) -> list[str]:
        if not page_text:
            return []

        id_names = HEADING_ID_RE.findall(page_text)
        link_names = ANCHOR_LINK_RE.findall(page_text)
        heading_names = [a or b for a, b in HEADING_TEXT_RE.findall(page_text)]

        merged: dict[str, str] = {}
        for name in (*id_names, *link_names, *heading_names):
            key = name.lower()
            if key in IGNORED_SECTION_NAMES:
                continue
            merged.setdefault(key, name)

        logger.debug(
            "Names by source: %d id, %d link, %d heading -> %d distinct",
            len(id_names), len(link_names), len(heading_names), len(merged),
        )
        return list(merged.values())

    @staticmethod
    def extract_camel_case_names(page_text: str) -> dict[str, str]:
        """Map lowercase anchor ids to the camelCase text of their heading.

        Only headings whose text lowercases to the id and carries at least
        one capital are kept.
        """
        names: dict[str, str] = {}
        for anchor_id, text in CAMEL_HEADING_RE.findall(page_text or ''):
            if text.lower() == anchor_id and text != anchor_id:
                names.setdefault(anchor_id, text)
        return names

    @staticmethod
    def extract_description(section: str | None) -> str | None:
        """Return the first non-empty paragraph of a section as plain text."""
        if not section:
            return None
        for match in PARAGRAPH_RE.finditer(section):
            text = clean_text(match.group(1))
            if text:
                return text
        return None
