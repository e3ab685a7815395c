"""Shared data models used across catalog modules."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ResourceIdentifier:
    """A ``microsoft.<type>.<name>`` resource identifier."""

    resource_type: str
    original_name: str

    @property
    def prefixed_name(self) -> str:
        return f"microsoft.{self.resource_type}.{self.original_name}"


@dataclass(frozen=True)
class OperationPermissionEntry:
    """One permission table row: an operation and the permissions it needs."""

    operation: str
    permissions: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {'operation': self.operation, 'permissions': list(self.permissions)}


@dataclass(frozen=True)
class PermissionExtraction:
    """Permissions extracted from a single documentation section."""

    all_permissions: tuple[str, ...] = ()
    operation_permissions: tuple[OperationPermissionEntry, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.all_permissions and not self.operation_permissions


@dataclass(frozen=True)
class ResourceRecord:
    """A discovered resource type with its naming and permission data."""

    identifier: ResourceIdentifier
    friendly_name: str
    last_updated: str
    description: str | None = None
    anchor_url: str | None = None
    application_permissions: tuple[str, ...] = ()
    operation_permissions: tuple[OperationPermissionEntry, ...] = ()

    @property
    def prefixed_name(self) -> str:
        return self.identifier.prefixed_name

    @property
    def resource_type(self) -> str:
        return self.identifier.resource_type

    def to_dict(self) -> dict[str, Any]:
        return {
            'prefixedName': self.identifier.prefixed_name,
            'resourceType': self.identifier.resource_type,
            'originalName': self.identifier.original_name,
            'friendlyName': self.friendly_name,
            'description': self.description,
            'anchorUrl': self.anchor_url,
            'applicationPermissions': list(self.application_permissions),
            'operationPermissions': [e.to_dict() for e in self.operation_permissions],
            'lastUpdated': self.last_updated,
        }


@dataclass(frozen=True)
class Catalog:
    """The sorted resource list plus a per-type summary."""

    generated_at: str
    resources: tuple[ResourceRecord, ...]
    summary_by_type: dict[str, int]

    @property
    def total_resources(self) -> int:
        return len(self.resources)

    def to_dict(self) -> dict[str, Any]:
        return {
            'generatedAt': self.generated_at,
            'totalResources': self.total_resources,
            'resourceTypes': sorted(self.summary_by_type),
            'summary': dict(self.summary_by_type),
            'resources': [r.to_dict() for r in self.resources],
        }


@dataclass
class SourceError:
    """A documentation page or schema that could not be processed."""

    source: str
    error: str


@dataclass
class BuildOptions:
    """Options controlling a catalog build and its output."""

    formats: set[str] = field(default_factory=lambda: {'json', 'csv'})
    basename: str = 'resource_catalog'
    enrich_permissions: bool = False
    pretty: bool = True


@dataclass
class BuildResult:
    """Result of a catalog build: the catalog plus what went wrong."""

    catalog: Catalog
    source_errors: list[SourceError] = field(default_factory=list)
    skipped_keys: list[str] = field(default_factory=list)
    output_files: list[str] = field(default_factory=list)
