"""JSON output generation.

Writes the catalog and any source errors to an output directory.
"""

import json
import os
from typing import Any

from resource_catalog.domain.models import Catalog, SourceError


class JSONDumper:
    """Writes catalogs as JSON files.

    Output structure:
        output_dir/
        ├── {basename}.json
        └── errors.json (only if errors)

    Args:
        output_dir: Root directory for output files.
        pretty: Whether to pretty-print JSON (default True).
    """

    def __init__(self, output_dir: str, pretty: bool = True) -> None:
        self._output_dir = output_dir
        self._indent = 2 if pretty else None

    def write_catalog(self, catalog: Catalog, basename: str = 'resource_catalog') -> str:
        """Write the catalog and return the file path."""
        os.makedirs(self._output_dir, exist_ok=True)
        path = os.path.join(self._output_dir, f'{basename}.json')
        self._write_json(path, catalog.to_dict())
        return path

    def write_errors(self, errors: list[SourceError]) -> str | None:
        """Write source errors (only if any exist)."""
        if not errors:
            return None
        os.makedirs(self._output_dir, exist_ok=True)
        path = os.path.join(self._output_dir, 'errors.json')
        self._write_json(path, [{'source': e.source, 'error': e.error} for e in errors])
        return path

    def _write_json(self, path: str, data: Any) -> None:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=self._indent, ensure_ascii=False, default=str)


def load_catalog(path: str) -> dict:
    """Read a catalog JSON file written by ``JSONDumper``."""
    with open(path, encoding='utf-8') as f:
        return json.load(f)
