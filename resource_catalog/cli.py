"""CLI for resource-catalog."""

import argparse
import json
import logging
import os
import sys

from resource_catalog.catalog_builder import CatalogBuilder, Fetcher, SchemaStructureError
from resource_catalog.domain.config import CatalogConfig, DocPage, default_config, parse_page_spec
from resource_catalog.domain.models import BuildOptions, BuildResult
from resource_catalog.fetcher import PageFetcher
from resource_catalog.naming.friendly_name import FriendlyNameFormatter, NameResolver
from resource_catalog.naming.segmenter import WordSegmenter
from resource_catalog.output.csv_writer import CSVWriter
from resource_catalog.output.json_dumper import JSONDumper, load_catalog
from resource_catalog.validation import run_checks

SAMPLE_SIZE = 5
OUTPUT_FORMATS = ('json', 'csv')


def _write_outputs(result: BuildResult, output_dir: str, options: BuildOptions) -> BuildResult:
    dumper = JSONDumper(output_dir, pretty=options.pretty)
    if 'json' in options.formats:
        result.output_files.append(dumper.write_catalog(result.catalog, options.basename))
    if 'csv' in options.formats:
        result.output_files.append(CSVWriter(output_dir).write(result.catalog, options.basename))
    errors_path = dumper.write_errors(result.source_errors)
    if errors_path:
        result.output_files.append(errors_path)
    return result


def build_docs_catalog(
    output_dir: str,
    options: BuildOptions,
    pages: list[DocPage] | None = None,
    fetcher: Fetcher | None = None,
    config: CatalogConfig | None = None,
) -> BuildResult:
    """Main orchestration: documentation pages -> catalog -> JSON/CSV output."""
    builder = CatalogBuilder(fetcher or PageFetcher(), config=config)
    result = builder.build_from_docs(pages)
    return _write_outputs(result, output_dir, options)


def build_schema_catalog(
    schema_source: str,
    output_dir: str,
    options: BuildOptions,
    fetcher: Fetcher | None = None,
    config: CatalogConfig | None = None,
) -> BuildResult:
    """Main orchestration: schema (file or URL) -> catalog -> JSON/CSV output.

    Raises:
        SchemaStructureError: The schema has no definitions map.
    """
    schema: dict | str = schema_source
    if os.path.isfile(schema_source):
        with open(schema_source, encoding='utf-8') as f:
            schema = json.load(f)

    builder = CatalogBuilder(fetcher or PageFetcher(), config=config)
    result = builder.build_from_schema(schema, enrich_permissions=options.enrich_permissions)
    return _write_outputs(result, output_dir, options)


def _print_summary(result: BuildResult) -> None:
    catalog = result.catalog
    print(f"Done! {catalog.total_resources} resources")
    for resource_type, count in catalog.summary_by_type.items():
        print(f"  {resource_type}: {count}")
    if catalog.resources:
        print("Sample:")
        for record in catalog.resources[:SAMPLE_SIZE]:
            perms = len(record.application_permissions)
            print(f"  {record.prefixed_name} -> {record.friendly_name} ({perms} permissions)")
    if result.skipped_keys:
        print(f"Skipped {len(result.skipped_keys)} malformed schema keys")
    for error in result.source_errors:
        print(f"Warning: {error.source} failed: {error.error}", file=sys.stderr)
    for path in result.output_files:
        print(f"Output: {path}")


def _options_from_args(args: argparse.Namespace) -> BuildOptions:
    return BuildOptions(
        formats=args.formats,
        basename=args.basename,
        enrich_permissions=getattr(args, 'with_permissions', False),
        pretty=not args.no_pretty,
    )


def _parse_formats(value: str) -> set[str]:
    formats = {f.strip() for f in value.split(',') if f.strip()}
    if not formats or not formats <= set(OUTPUT_FORMATS):
        raise argparse.ArgumentTypeError(f"unsupported formats {value!r}, choose from {','.join(OUTPUT_FORMATS)}")
    return formats


def _config_from_args(args: argparse.Namespace) -> CatalogConfig:
    config = default_config()
    if getattr(args, 'page', None):
        config = config.with_pages(tuple(args.page))
    return config


def _add_output_args(sub: argparse.ArgumentParser) -> None:
    sub.add_argument('output', help='Output directory')
    sub.add_argument('--formats', default='json,csv', type=_parse_formats,
                     help='Comma-separated output formats (default: json,csv)')
    sub.add_argument('--basename', default='resource_catalog', help='Output file name without extension')
    sub.add_argument('--no-pretty', action='store_true', help='Disable pretty printing')
    sub.add_argument('--page', action='append', type=parse_page_spec, metavar='URL=TYPE',
                     help='Documentation page and its resource type (repeatable, replaces the defaults)')


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog='resource-catalog', description='Resource type catalog builder')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command')

    # docs command
    docs_parser = subparsers.add_parser('docs', help='Build the catalog by crawling documentation pages')
    _add_output_args(docs_parser)

    # schema command
    schema_parser = subparsers.add_parser('schema', help='Build the catalog from a JSON schema')
    schema_parser.add_argument('schema', help='Schema file path or URL')
    _add_output_args(schema_parser)
    schema_parser.add_argument('--with-permissions', action='store_true',
                               help='Extract permissions from the documentation pages too')

    # name command
    name_parser = subparsers.add_parser('name', help='Show friendly names for identifiers')
    name_parser.add_argument('identifiers', nargs='+', help='Resource names to render')

    # pages command
    subparsers.add_parser('pages', help='List configured documentation pages')

    # validate command
    validate_parser = subparsers.add_parser('validate', help='Check a catalog JSON file')
    validate_parser.add_argument('catalog', help='Path to catalog JSON')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s - %(message)s',
    )

    if args.command == 'docs':
        config = _config_from_args(args)
        print(f"Crawling {len(config.doc_pages)} documentation pages...")
        result = build_docs_catalog(args.output, _options_from_args(args), config=config)
        _print_summary(result)

    elif args.command == 'schema':
        print(f"Reading schema {args.schema}...")
        try:
            result = build_schema_catalog(
                args.schema, args.output, _options_from_args(args), config=_config_from_args(args),
            )
        except (SchemaStructureError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        _print_summary(result)

    elif args.command == 'name':
        config = default_config()
        formatter = FriendlyNameFormatter(WordSegmenter(config.dictionary))
        resolver = NameResolver(formatter, config.overrides)
        for identifier in args.identifiers:
            friendly, tier = resolver.explain(identifier)
            words = formatter.segmenter.segment(identifier)
            print(f"{identifier}: {friendly} [{tier}] {' | '.join(words)}")

    elif args.command == 'pages':
        for page in default_config().doc_pages:
            print(f"  {page.resource_type}: {page.url}")

    elif args.command == 'validate':
        if not os.path.isfile(args.catalog):
            print(f"Error: {args.catalog} not found", file=sys.stderr)
            sys.exit(1)
        failed = 0
        for name, passed, detail in run_checks(load_catalog(args.catalog)):
            failed += not passed
            print(f"  [{'PASS' if passed else 'FAIL'}] {name}: {detail}")
        if failed:
            sys.exit(1)

    else:
        parser.print_help()


if __name__ == '__main__':
    main()
