"""Simple Flask JSON API over generated resource catalogs."""

import os
from pathlib import Path
from urllib.parse import urlparse
from flask import Flask, request, jsonify, send_file

from resource_catalog.catalog_builder import SchemaStructureError
from resource_catalog.cli import build_docs_catalog, build_schema_catalog
from resource_catalog.domain.config import default_config
from resource_catalog.domain.models import BuildOptions
from resource_catalog.naming.friendly_name import FriendlyNameFormatter, NameResolver
from resource_catalog.naming.segmenter import WordSegmenter
from resource_catalog.output.json_dumper import load_catalog

app = Flask(__name__)

# Configuration
app.config['CATALOG_DIR'] = os.environ.get('CATALOG_OUTPUT_DIR', 'output')
app.config['CATALOG_BASENAME'] = 'resource_catalog'

_config = default_config()
_resolver = NameResolver(FriendlyNameFormatter(WordSegmenter(_config.dictionary)), _config.overrides)


def _catalog_path(extension: str) -> Path:
    return Path(app.config['CATALOG_DIR']) / f"{app.config['CATALOG_BASENAME']}.{extension}"


def _load():
    path = _catalog_path('json')
    if not path.is_file():
        return None
    return load_catalog(str(path))


def _is_remote_url(value) -> bool:
    # Local paths are never read on behalf of a client
    if not isinstance(value, str):
        return False
    parsed = urlparse(value)
    return parsed.scheme in ('http', 'https') and bool(parsed.netloc)


@app.route('/api/catalog')
def get_catalog():
    """Catalog metadata and per-type summary."""
    catalog = _load()
    if catalog is None:
        return jsonify({'error': 'No catalog built yet'}), 404
    return jsonify({
        'generatedAt': catalog.get('generatedAt'),
        'totalResources': catalog.get('totalResources'),
        'resourceTypes': catalog.get('resourceTypes', []),
        'summary': catalog.get('summary', {}),
    })


@app.route('/api/resources')
def list_resources():
    """List resources, optionally filtered by type and name substring."""
    catalog = _load()
    if catalog is None:
        return jsonify({'error': 'No catalog built yet'}), 404

    resource_type = request.args.get('type')
    query = (request.args.get('q') or '').lower()
    resources = [
        r for r in catalog.get('resources', [])
        if (not resource_type or r.get('resourceType') == resource_type)
        and (not query or query in r.get('prefixedName', '').lower()
             or query in (r.get('friendlyName') or '').lower())
    ]
    return jsonify(resources)


@app.route('/api/resources/<prefixed_name>')
def get_resource(prefixed_name: str):
    """Get one resource by prefixed name (case-insensitive)."""
    catalog = _load()
    if catalog is None:
        return jsonify({'error': 'No catalog built yet'}), 404
    key = prefixed_name.lower()
    for r in catalog.get('resources', []):
        if r.get('prefixedName', '').lower() == key:
            return jsonify(r)
    return jsonify({'error': 'Resource not found'}), 404


@app.route('/api/friendly-name')
def friendly_name():
    """Render the friendly name for an identifier."""
    name = request.args.get('name')
    if not name:
        return jsonify({'error': 'No name provided'}), 400
    friendly, tier = _resolver.explain(name)
    return jsonify({'name': name, 'friendlyName': friendly, 'source': tier})


@app.route('/api/build', methods=['POST'])
def build():
    """Rebuild the catalog from documentation pages or a schema."""
    payload = request.get_json(silent=True) or {}
    mode = payload.get('mode', 'docs')
    options = BuildOptions(
        basename=app.config['CATALOG_BASENAME'],
        enrich_permissions=bool(payload.get('withPermissions')),
    )

    try:
        if mode == 'docs':
            result = build_docs_catalog(app.config['CATALOG_DIR'], options)
        elif mode == 'schema':
            if not payload.get('schema'):
                return jsonify({'error': 'No schema provided'}), 400
            if not _is_remote_url(payload['schema']):
                return jsonify({'error': 'Schema must be an http(s) URL'}), 400
            result = build_schema_catalog(payload['schema'], app.config['CATALOG_DIR'], options)
        else:
            return jsonify({'error': f'Unknown mode: {mode}'}), 400
    except SchemaStructureError as e:
        return jsonify({'error': str(e)}), 422

    return jsonify({
        'status': 'success',
        'totalResources': result.catalog.total_resources,
        'summary': result.catalog.summary_by_type,
        'sourceErrors': [{'source': e.source, 'error': e.error} for e in result.source_errors],
        'skippedKeys': result.skipped_keys,
    })


@app.route('/api/download/<fmt>')
def download(fmt: str):
    """Download the catalog as JSON or CSV."""
    if fmt not in ('json', 'csv'):
        return jsonify({'error': 'Unsupported format'}), 400
    path = _catalog_path(fmt)
    if not path.is_file():
        return jsonify({'error': 'File not found'}), 404
    return send_file(path.resolve(), as_attachment=True)


if __name__ == '__main__':
    app.run(debug=True, port=5002)
