"""Flat CSV rendering of a catalog, one row per resource."""

import csv
import os

from resource_catalog.domain.models import Catalog, OperationPermissionEntry, ResourceRecord

CSV_FIELDS = [
    'prefixedName',
    'resourceType',
    'originalName',
    'friendlyName',
    'description',
    'anchorUrl',
    'applicationPermissions',
    'operationPermissions',
    'lastUpdated',
]


def format_operation_permissions(entries: tuple[OperationPermissionEntry, ...]) -> str:
    """Render entries as ``"<op>: <p1, p2> | <op2>: ..."``."""
    return ' | '.join(f"{e.operation}: {', '.join(e.permissions)}" for e in entries)


def to_row(record: ResourceRecord) -> dict[str, str]:
    return {
        'prefixedName': record.prefixed_name,
        'resourceType': record.resource_type,
        'originalName': record.identifier.original_name,
        'friendlyName': record.friendly_name,
        'description': record.description or '',
        'anchorUrl': record.anchor_url or '',
        'applicationPermissions': ', '.join(record.application_permissions),
        'operationPermissions': format_operation_permissions(record.operation_permissions),
        'lastUpdated': record.last_updated,
    }


class CSVWriter:
    """Writes the catalog's resources as ``{basename}.csv``."""

    def __init__(self, output_dir: str) -> None:
        self._output_dir = output_dir

    def write(self, catalog: Catalog, basename: str = 'resource_catalog') -> str:
        os.makedirs(self._output_dir, exist_ok=True)
        path = os.path.join(self._output_dir, f'{basename}.csv')
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
            writer.writeheader()
            writer.writerows(to_row(r) for r in catalog.resources)
        return path
