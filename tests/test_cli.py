"""Integration tests for the CLI pipeline."""

import json
import os

import pytest

from resource_catalog.cli import build_docs_catalog, build_schema_catalog, main
from resource_catalog.domain.config import DocPage
from resource_catalog.domain.models import BuildOptions
from tests.conftest import ENTRA_PAGE_HTML, EXCHANGE_PAGE_HTML, SCHEMA, FakeFetcher


class TestBuildPipelines:
    """End-to-end tests for the build functions."""

    def test_docs_catalog_files(self, fake_fetcher, test_config, tmp_path):
        output_dir = str(tmp_path / 'output')
        result = build_docs_catalog(output_dir, BuildOptions(), fetcher=fake_fetcher, config=test_config)

        assert result.catalog.total_resources == 10
        assert os.path.isfile(os.path.join(output_dir, 'resource_catalog.json'))
        assert os.path.isfile(os.path.join(output_dir, 'resource_catalog.csv'))
        # The missing page is reported alongside the catalog
        assert os.path.isfile(os.path.join(output_dir, 'errors.json'))
        assert len(result.output_files) == 3

    def test_inline_pages(self, tmp_path):
        pages = [DocPage('https://docs.example.com/exchange', 'exchange', text=EXCHANGE_PAGE_HTML)]
        result = build_docs_catalog(str(tmp_path), BuildOptions(formats={'json'}), pages=pages, fetcher=FakeFetcher())

        assert result.source_errors == []
        assert result.output_files == [os.path.join(str(tmp_path), 'resource_catalog.json')]
        with open(result.output_files[0]) as f:
            catalog = json.load(f)
        assert catalog['summary'] == {'exchange': 2}

    def test_schema_from_file(self, fake_fetcher, test_config, tmp_path):
        schema_path = tmp_path / 'schema.json'
        schema_path.write_text(json.dumps(SCHEMA))
        output_dir = str(tmp_path / 'output')

        options = BuildOptions(formats={'csv'}, basename='from_schema', enrich_permissions=True)
        result = build_schema_catalog(str(schema_path), output_dir, options, fetcher=fake_fetcher, config=test_config)

        assert result.catalog.total_resources == 4
        assert len(result.skipped_keys) == 3
        assert os.path.isfile(os.path.join(output_dir, 'from_schema.csv'))
        assert not os.path.exists(os.path.join(output_dir, 'from_schema.json'))

    def test_schema_from_url(self, test_config, tmp_path):
        url = 'https://schemas.example.com/schema.json'
        fetcher = FakeFetcher(
            pages={'https://docs.example.com/entra': ENTRA_PAGE_HTML},
            documents={url: {'$defs': {'microsoft.entra.administrativeunit': {}}}},
        )
        result = build_schema_catalog(url, str(tmp_path), BuildOptions(), fetcher=fetcher, config=test_config)
        assert result.catalog.resources[0].friendly_name == 'Administrative Unit'


class TestMain:
    """Tests for the argparse entry point."""

    def test_no_command_prints_help(self, capsys):
        main([])
        assert 'usage' in capsys.readouterr().out

    def test_name_command(self, capsys):
        main(['name', 'devicecompliancepolicy', 'antiPhishPolicy'])
        out = capsys.readouterr().out
        assert 'devicecompliancepolicy: Device Compliance Policy [segmentation]' in out
        assert 'antiPhishPolicy: Anti-Phish Policy [override]' in out

    def test_pages_command(self, capsys):
        main(['pages'])
        out = capsys.readouterr().out
        assert 'intune: https://' in out
        assert 'securityandcompliance: https://' in out

    def test_schema_without_defs_exits(self, tmp_path, capsys):
        schema_path = tmp_path / 'schema.json'
        schema_path.write_text(json.dumps({'properties': {}}))
        with pytest.raises(SystemExit) as exc_info:
            main(['schema', str(schema_path), str(tmp_path / 'out')])
        assert exc_info.value.code == 1
        assert 'Error' in capsys.readouterr().err

    def test_invalid_page_spec_rejected(self, tmp_path):
        with pytest.raises(SystemExit):
            main(['docs', str(tmp_path), '--page', 'no-type-given'])

    def test_unknown_format_rejected(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(['docs', str(tmp_path), '--formats', 'jsn'])
        assert exc_info.value.code == 2
        assert 'unsupported formats' in capsys.readouterr().err
        assert not any(tmp_path.iterdir())

    def test_empty_format_list_rejected(self, tmp_path):
        with pytest.raises(SystemExit):
            main(['schema', 'schema.json', str(tmp_path), '--formats', ','])

    def test_validate_passes(self, fake_fetcher, test_config, tmp_path, capsys):
        result = build_docs_catalog(str(tmp_path), BuildOptions(formats={'json'}), fetcher=fake_fetcher, config=test_config)
        main(['validate', result.output_files[0]])
        out = capsys.readouterr().out
        assert '[FAIL]' not in out
        assert '[PASS] sorted' in out

    def test_validate_fails(self, tmp_path, capsys):
        path = tmp_path / 'catalog.json'
        path.write_text(json.dumps({
            'totalResources': 1,
            'summary': {'exchange': 1},
            'resources': [{
                'prefixedName': 'microsoft.exchange.a',
                'resourceType': 'exchange',
                'originalName': 'a',
                'applicationPermissions': [],
            }],
        }))
        with pytest.raises(SystemExit) as exc_info:
            main(['validate', str(path)])
        assert exc_info.value.code == 1
        assert '[FAIL] exchange_permission' in capsys.readouterr().out

    def test_validate_missing_file(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(['validate', str(tmp_path / 'nope.json')])
        assert exc_info.value.code == 1
