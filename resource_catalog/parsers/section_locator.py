"""Locates the part of a documentation page that describes one resource.

A section starts at the element carrying the resource's anchor and ends
just before the next top-level heading, the end of the page, or the scan
window, whichever comes first.
"""

import logging
import re

from resource_catalog.domain.constants import (
    SECTION_WINDOW,
    TOP_LEVEL_HEADING_RE,
    href_marker_pattern,
    id_marker_pattern,
)

logger = logging.getLogger(__name__)


class SectionLocator:
    """Finds a resource section by id anchor, falling back to a link anchor.

    Args:
        window: Maximum number of characters a section may span.
    """

    def __init__(self, window: int = SECTION_WINDOW) -> None:
        self._window = window

    def locate(self, page_text: str, resource_key: str) -> str | None:
        """Return the section for ``resource_key``, or None if the page has none."""
        if not page_text or not resource_key:
            return None

        for marker in (id_marker_pattern(resource_key), href_marker_pattern(resource_key)):
            section = self._extract(page_text, marker)
            if section is not None:
                return section

        logger.debug("No section marker for %s", resource_key)
        return None

    def _extract(self, page_text: str, marker: re.Pattern) -> str | None:
        match = marker.search(page_text)
        if not match:
            return None

        # Start at the opening of the tag that carries the marker
        tag_start = page_text.rfind('<', 0, match.start())
        start = tag_start if tag_start != -1 else match.start()
        limit = min(len(page_text), start + self._window)

        heading = TOP_LEVEL_HEADING_RE.search(page_text, match.end(), limit)
        end = heading.start() if heading else limit
        return page_text[start:end]
