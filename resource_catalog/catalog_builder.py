"""Resource catalog construction.

Two modes:
  - Documentation crawl: discover resource names on each configured page
    and extract their permission tables.
  - Schema: read ``microsoft.<type>.<name>`` keys from a JSON schema and name
    them using documentation casing harvested from the same pages.

Both modes tolerate per-source failures: a page or schema that cannot be
fetched is recorded and skipped, and the run continues.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Protocol

from resource_catalog.domain.config import CatalogConfig, DocPage, default_config
from resource_catalog.domain.constants import NAME_PART_RE, RESOURCE_PREFIX
from resource_catalog.domain.models import (
    BuildResult,
    Catalog,
    PermissionExtraction,
    ResourceIdentifier,
    ResourceRecord,
    SourceError,
)
from resource_catalog.fetcher import FetchError
from resource_catalog.naming.friendly_name import FriendlyNameFormatter, NameResolver
from resource_catalog.naming.segmenter import WordSegmenter
from resource_catalog.parsers import (
    PermissionTableExtractor,
    ResourceNameExtractor,
    SectionLocator,
    apply_exchange_rule,
)

logger = logging.getLogger(__name__)


class SchemaStructureError(Exception):
    """The schema has no definitions map, so no resources can be produced."""


class Fetcher(Protocol):
    def fetch_text(self, url: str) -> str: ...

    def fetch_json(self, url: str) -> object: ...


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def parse_resource_key(key: str) -> ResourceIdentifier | None:
    """Parse ``microsoft.<type>.<name>``; None when the key has another shape."""
    parts = key.split('.')
    if len(parts) != 3 or parts[0] != RESOURCE_PREFIX:
        return None
    if not all(NAME_PART_RE.match(p) for p in parts[1:]):
        return None
    return ResourceIdentifier(resource_type=parts[1], original_name=parts[2])


def assemble_catalog(records: Iterable[ResourceRecord], generated_at: str) -> Catalog:
    """Sort records by prefixed name and count them per resource type."""
    resources = tuple(sorted(records, key=lambda r: r.prefixed_name))
    by_type: dict[str, int] = {}
    for record in resources:
        by_type[record.resource_type] = by_type.get(record.resource_type, 0) + 1
    return Catalog(
        generated_at=generated_at,
        resources=resources,
        summary_by_type=dict(sorted(by_type.items())),
    )


class CatalogBuilder:
    """Builds resource catalogs from documentation pages or a JSON schema.

    Args:
        fetcher: Provides ``fetch_text`` and ``fetch_json``; failures must
            raise ``FetchError``.
        config: Static dictionary, overrides, page list and scan windows.
        clock: Returns the ISO timestamp stamped on the catalog and records.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        config: CatalogConfig | None = None,
        clock: Callable[[], str] = _utc_now,
    ) -> None:
        self._fetcher = fetcher
        self._config = config or default_config()
        self._clock = clock
        self._formatter = FriendlyNameFormatter(WordSegmenter(self._config.dictionary))
        self._locator = SectionLocator(self._config.section_window)
        self._extractor = PermissionTableExtractor(raw_window=self._config.raw_permission_window)
        self._names = ResourceNameExtractor()

    # ── Documentation crawl ──────────────────────────────────────────

    def build_from_docs(self, pages: Iterable[DocPage] | None = None) -> BuildResult:
        """Crawl documentation pages and build one record per discovered name."""
        timestamp = self._clock()
        errors: list[SourceError] = []
        records: dict[str, ResourceRecord] = {}

        for page in (pages if pages is not None else self._config.doc_pages):
            text = self._page_text(page, errors)
            if text is None:
                continue

            names = self._names.extract_names(text)
            added = 0
            for name in names:
                identifier = ResourceIdentifier(resource_type=page.resource_type, original_name=name)
                key = identifier.prefixed_name.lower()
                if key in records:
                    continue

                section = self._locator.locate(text, name)
                extraction = self._extractor.extract(section)
                if extraction.is_empty:
                    logger.debug("No permissions documented for %s", identifier.prefixed_name)
                extraction = apply_exchange_rule(extraction, page.resource_type)
                records[key] = self._make_record(
                    identifier,
                    friendly_name=self._formatter.format(name),
                    timestamp=timestamp,
                    extraction=extraction,
                    description=self._names.extract_description(section),
                    anchor_url=f"{page.url}#{name}" if page.url else None,
                )
                added += 1
            logger.info("%s: %d resources (%d new)", page.url or page.resource_type, len(names), added)

        return BuildResult(catalog=assemble_catalog(records.values(), timestamp), source_errors=errors)

    # ── Schema ───────────────────────────────────────────────────────

    def build_from_schema(self, schema: dict[str, Any] | str, enrich_permissions: bool = False) -> BuildResult:
        """Build records from schema definition keys.

        Args:
            schema: Parsed schema object, or a URL to fetch it from.
            enrich_permissions: Also locate each resource in its type's
                documentation page and extract its permissions.

        Raises:
            SchemaStructureError: The schema has no definitions map.
        """
        timestamp = self._clock()
        errors: list[SourceError] = []

        if isinstance(schema, str):
            try:
                schema = self._fetcher.fetch_json(schema)
            except FetchError as e:
                logger.warning("Schema fetch failed: %s", e)
                errors.append(SourceError(source=schema, error=str(e)))
                return BuildResult(catalog=assemble_catalog([], timestamp), source_errors=errors)

        definitions = self._definitions(schema)

        page_texts: list[tuple[DocPage, str]] = []
        for page in self._config.doc_pages:
            text = self._page_text(page, errors)
            if text is not None:
                page_texts.append((page, text))

        camel_case_names: dict[str, str] = {}
        anchors: dict[tuple[str, str], str] = {}
        for page, text in page_texts:
            page_names = self._names.extract_camel_case_names(text)
            for anchor_id in page_names:
                anchors.setdefault((page.resource_type, anchor_id), f"{page.url}#{anchor_id}")
            for anchor_id, camel in page_names.items():
                camel_case_names.setdefault(anchor_id, camel)
        logger.info("Documentation casing known for %d names", len(camel_case_names))

        resolver = NameResolver(self._formatter, self._config.overrides, camel_case_names)
        records: dict[str, ResourceRecord] = {}
        skipped: list[str] = []

        for key, definition in definitions.items():
            identifier = parse_resource_key(key)
            if identifier is None:
                logger.warning("Skipping malformed schema key: %s", key)
                skipped.append(key)
                continue
            if identifier.prefixed_name.lower() in records:
                continue

            extraction = PermissionExtraction()
            if enrich_permissions:
                extraction = self._permissions_from_pages(identifier, page_texts)
            extraction = apply_exchange_rule(extraction, identifier.resource_type)

            description = definition.get('description') if isinstance(definition, dict) else None
            records[identifier.prefixed_name.lower()] = self._make_record(
                identifier,
                friendly_name=resolver.resolve(identifier.original_name),
                timestamp=timestamp,
                extraction=extraction,
                description=description if isinstance(description, str) else None,
                anchor_url=anchors.get((identifier.resource_type, identifier.original_name.lower())),
            )

        return BuildResult(
            catalog=assemble_catalog(records.values(), timestamp),
            source_errors=errors,
            skipped_keys=skipped,
        )

    @staticmethod
    def _definitions(schema: object) -> dict[str, Any]:
        if not isinstance(schema, dict):
            raise SchemaStructureError("Schema is not a JSON object")
        for key in ('$defs', 'definitions'):
            definitions = schema.get(key)
            if isinstance(definitions, dict):
                return definitions
        raise SchemaStructureError("Schema has no $defs map")

    def _permissions_from_pages(
        self, identifier: ResourceIdentifier, page_texts: list[tuple[DocPage, str]],
    ) -> PermissionExtraction:
        for page, text in page_texts:
            if page.resource_type != identifier.resource_type:
                continue
            section = self._locator.locate(text, identifier.original_name)
            if section is not None:
                return self._extractor.extract(section)
        return PermissionExtraction()

    # ── Helpers ──────────────────────────────────────────────────────

    def _page_text(self, page: DocPage, errors: list[SourceError]) -> str | None:
        if page.text is not None:
            return page.text
        try:
            return self._fetcher.fetch_text(page.url)
        except FetchError as e:
            logger.warning("Skipping %s: %s", page.url, e)
            errors.append(SourceError(source=page.url, error=str(e)))
            return None

    @staticmethod
    def _make_record(
        identifier: ResourceIdentifier,
        friendly_name: str,
        timestamp: str,
        extraction: PermissionExtraction,
        description: str | None,
        anchor_url: str | None,
    ) -> ResourceRecord:
        return ResourceRecord(
            identifier=identifier,
            friendly_name=friendly_name,
            last_updated=timestamp,
            description=description,
            anchor_url=anchor_url,
            application_permissions=extraction.all_permissions,
            operation_permissions=extraction.operation_permissions,
        )
