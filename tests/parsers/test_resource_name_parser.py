"""Tests for ResourceNameExtractor."""

from resource_catalog.parsers.resource_name_parser import ResourceNameExtractor
from tests.conftest import ENTRA_PAGE_HTML, EXCHANGE_PAGE_HTML, INTUNE_PAGE_HTML, TEAMS_PAGE_HTML


class TestExtractNames:
    """Tests for name discovery."""

    def setup_method(self):
        self.extractor = ResourceNameExtractor()

    def test_names_from_all_sources(self):
        names = self.extractor.extract_names(INTUNE_PAGE_HTML)
        assert names == [
            'devicecompliancepolicy',
            'iosupdateconfiguration',
            'windows10compliancepolicy',
            'administrativeunit',
        ]

    def test_structural_sections_ignored(self):
        names = [n.lower() for n in self.extractor.extract_names(INTUNE_PAGE_HTML)]
        assert 'overview' not in names

    def test_hyphenated_anchors_ignored(self):
        names = self.extractor.extract_names(INTUNE_PAGE_HTML)
        assert 'in-this-article' not in names

    def test_id_casing_preferred(self):
        names = self.extractor.extract_names(EXCHANGE_PAGE_HTML)
        assert names == ['antiphishpolicy', 'transportrule']

    def test_heading_text_only(self):
        page = '<h2>deviceConfiguration</h2>\n## groupPolicy\n'
        assert self.extractor.extract_names(page) == ['deviceConfiguration', 'groupPolicy']

    def test_heading_with_nested_markup(self):
        page = '<h2><code>namedLocation</code></h2>'
        assert self.extractor.extract_names(page) == ['namedLocation']

    def test_multi_word_heading_not_a_name(self):
        assert self.extractor.extract_names('<h2>Next steps</h2>') == []

    def test_empty_page(self):
        assert self.extractor.extract_names('') == []


class TestExtractCamelCaseNames:
    """Tests for documentation casing discovery."""

    def test_camel_case_headings(self):
        names = ResourceNameExtractor.extract_camel_case_names(ENTRA_PAGE_HTML)
        assert names == {
            'administrativeunit': 'administrativeUnit',
            'conditionalaccesspolicy': 'conditionalAccessPolicy',
            'namedlocation': 'namedLocation',
        }

    def test_pascal_case_headings(self):
        names = ResourceNameExtractor.extract_camel_case_names(EXCHANGE_PAGE_HTML)
        assert names['antiphishpolicy'] == 'AntiPhishPolicy'

    def test_all_lowercase_heading_skipped(self):
        page = '<h2 id="teamsmeetingpolicy">teamsmeetingpolicy</h2>'
        assert ResourceNameExtractor.extract_camel_case_names(page) == {}

    def test_mismatched_text_skipped(self):
        page = '<h3 id="devicepolicy">deviceCompliancePolicy</h3>'
        assert ResourceNameExtractor.extract_camel_case_names(page) == {}

    def test_markdown_page_has_no_casing(self):
        assert ResourceNameExtractor.extract_camel_case_names('## teamsMeetingPolicy\n') == {}

    def test_teams_page(self):
        names = ResourceNameExtractor.extract_camel_case_names(TEAMS_PAGE_HTML)
        assert names == {'teamsmeetingpolicy': 'teamsMeetingPolicy'}


class TestExtractDescription:
    """Tests for section descriptions."""

    def test_first_paragraph(self):
        section = '<h2 id="a">a</h2><p></p><p>The <b>first</b> &amp; only.</p><p>Second.</p>'
        assert ResourceNameExtractor.extract_description(section) == 'The first & only.'

    def test_no_paragraph(self):
        assert ResourceNameExtractor.extract_description('<h2 id="a">a</h2>') is None

    def test_no_section(self):
        assert ResourceNameExtractor.extract_description(None) is None
