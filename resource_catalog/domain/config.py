"""Immutable catalog configuration.

Static tables (word dictionary, manual overrides, documentation pages) are
bundled into a frozen ``CatalogConfig`` and passed to the components that
need them.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping

from resource_catalog.domain.constants import NAME_PART_RE, RAW_PERMISSION_WINDOW, SECTION_WINDOW
from resource_catalog.domain.overrides import MANUAL_OVERRIDES
from resource_catalog.domain.word_dictionary import DEFAULT_DICTIONARY, WordDictionary

DOCS_BASE_URL = 'https://learn.microsoft.com/en-us/graph'


@dataclass(frozen=True)
class DocPage:
    """A documentation page and the resource type it documents.

    ``text`` short-circuits fetching when the page content is already known.
    """

    url: str
    resource_type: str
    text: str | None = None


DEFAULT_DOC_PAGES: tuple[DocPage, ...] = (
    DocPage(f'{DOCS_BASE_URL}/utcm-intune-resources', 'intune'),
    DocPage(f'{DOCS_BASE_URL}/utcm-entra-resources', 'entra'),
    DocPage(f'{DOCS_BASE_URL}/utcm-exchange-resources', 'exchange'),
    DocPage(f'{DOCS_BASE_URL}/utcm-teams-resources', 'teams'),
    DocPage(f'{DOCS_BASE_URL}/utcm-securityandcompliance-resources', 'securityandcompliance'),
)


@dataclass(frozen=True)
class CatalogConfig:
    """Everything a catalog build reads but never mutates."""

    doc_pages: tuple[DocPage, ...] = DEFAULT_DOC_PAGES
    dictionary: WordDictionary = DEFAULT_DICTIONARY
    overrides: Mapping[str, str] = field(default_factory=lambda: MANUAL_OVERRIDES)
    section_window: int = SECTION_WINDOW
    raw_permission_window: int = RAW_PERMISSION_WINDOW

    def with_pages(self, pages: tuple[DocPage, ...]) -> 'CatalogConfig':
        return replace(self, doc_pages=tuple(pages))

    def with_overrides(self, overrides: Mapping[str, str]) -> 'CatalogConfig':
        frozen = MappingProxyType({k.lower(): v for k, v in overrides.items()})
        return replace(self, overrides=frozen)


def default_config() -> CatalogConfig:
    return CatalogConfig()


def parse_page_spec(spec: str) -> DocPage:
    """Parse a ``URL=TYPE`` command-line page specification."""
    url, sep, resource_type = spec.rpartition('=')
    if not sep or not url or not resource_type:
        raise ValueError(f"Invalid page spec {spec!r}, expected URL=TYPE")
    resource_type = resource_type.strip()
    if not NAME_PART_RE.match(resource_type):
        raise ValueError(f"Invalid resource type {resource_type!r}, expected letters, digits or underscore")
    return DocPage(url=url.strip(), resource_type=resource_type)
