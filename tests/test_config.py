"""Tests for catalog configuration."""

import pytest

from resource_catalog.domain.config import (
    DEFAULT_DOC_PAGES,
    CatalogConfig,
    DocPage,
    default_config,
    parse_page_spec,
)


class TestCatalogConfig:
    """Tests for the frozen configuration."""

    def test_default_pages(self):
        types = [p.resource_type for p in default_config().doc_pages]
        assert types == ['intune', 'entra', 'exchange', 'teams', 'securityandcompliance']
        assert all(p.url.startswith('https://') for p in DEFAULT_DOC_PAGES)

    def test_with_pages_leaves_original(self):
        config = default_config()
        replaced = config.with_pages((DocPage('https://x', 'intune'),))
        assert len(replaced.doc_pages) == 1
        assert config.doc_pages == DEFAULT_DOC_PAGES

    def test_with_overrides_lowercases_keys(self):
        config = default_config().with_overrides({'FooBar': 'Foo Bar'})
        assert config.overrides['foobar'] == 'Foo Bar'
        with pytest.raises(TypeError):
            config.overrides['other'] = 'x'

    def test_frozen(self):
        with pytest.raises(AttributeError):
            CatalogConfig().section_window = 1


class TestParsePageSpec:
    """Tests for URL=TYPE parsing."""

    def test_valid(self):
        page = parse_page_spec('https://docs.example.com/page?a=b=intune')
        assert page == DocPage('https://docs.example.com/page?a=b', 'intune')

    @pytest.mark.parametrize('spec', [
        'https://docs.example.com',
        '=intune',
        'https://x=',
        'https://x=a.b',
        'https://x=in-tune',
    ])
    def test_invalid(self, spec):
        with pytest.raises(ValueError):
            parse_page_spec(spec)
