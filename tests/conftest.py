"""Shared test fixtures."""

import pytest

from resource_catalog.catalog_builder import CatalogBuilder
from resource_catalog.domain.config import CatalogConfig, DocPage
from resource_catalog.fetcher import FetchError


# ── Sample Documentation Pages ───────────────────────────────────────────

INTUNE_PAGE_HTML = """\
<html><body>
<nav><ul>
  <li><a href="#devicecompliancepolicy">deviceCompliancePolicy</a></li>
  <li><a href="#administrativeunit">administrativeUnit</a></li>
  <li><a href="#in-this-article">In this article</a></li>
</ul></nav>
<h1>Intune resources</h1>
<h2 id="devicecompliancepolicy">deviceCompliancePolicy</h2>
<p>Represents a device compliance policy.</p>
<h3>Application permissions</h3>
<table>
  <tr><th>Operation</th><th>Permissions</th></tr>
  <tr><td>Read</td><td>DeviceManagementConfiguration.Read.All</td></tr>
  <tr><td>Update</td><td>DeviceManagementConfiguration.ReadWrite.All</td></tr>
</table>
<h2 id="iosupdateconfiguration">iosUpdateConfiguration</h2>
<p>iOS update settings.</p>
<h3>Permissions</h3>
<p>Use the following permissions.</p>
<table>
  <tr><td>Read</td><td>DeviceManagementConfiguration.Read.All &amp; <code>DeviceManagementApps.Read.All</code></td></tr>
</table>
<h2 id="windows10compliancepolicy">windows10CompliancePolicy</h2>
<p>No permissions table here.</p>
<h2 id="overview">Overview</h2>
</body></html>
"""

ENTRA_PAGE_HTML = """\
<html><body>
<h2 id="administrativeunit">administrativeUnit</h2>
<p>An administrative unit.</p>
<h3>Application permissions</h3>
<table>
  <tr><th>Operation</th><th>Permissions</th></tr>
  <tr><td><strong>Create</strong></td><td>AdministrativeUnit.ReadWrite.All</td></tr>
</table>
<h2 id="conditionalaccesspolicy">conditionalAccessPolicy</h2>
<p>A Conditional Access policy.</p>
<h2 id="namedlocation">namedLocation</h2>
<h3>Application permissions</h3>
<ul>
  <li>Policy.Read.All</li>
  <li>Policy.ReadWrite.ConditionalAccess</li>
  <li>Microsoft.Graph.NamedLocation</li>
</ul>
</body></html>
"""

EXCHANGE_PAGE_HTML = """\
<html><body>
<h2 id="antiphishpolicy">AntiPhishPolicy</h2>
<p>Anti-phishing protection settings.</p>
<h3>Microsoft Graph Application permissions</h3>
<table>
  <tr><th>Operation</th><th>Permissions</th></tr>
  <tr><td>Get</td><td>Not supported.</td></tr>
</table>
<h2 id="transportrule">TransportRule</h2>
<div class="permissions"><strong>Permissions</strong></div>
<table>
  <tr><td>Operation</td><td>Permissions</td></tr>
  <tr><td>Get</td><td>Organization.Read.All</td></tr>
</table>
</body></html>
"""

TEAMS_PAGE_HTML = """\
<html><body>
<h2 id="teamsmeetingpolicy">teamsMeetingPolicy</h2>
**Application permissions**

| Operation | Permissions |
|-----------|-------------|
| Get | Policy.Read.All |
| Set | Policy.ReadWrite.All, TeamSettings.ReadWrite.All |
</body></html>
"""

DOCS_BASE = 'https://docs.example.com'

PAGES = {
    f'{DOCS_BASE}/intune': INTUNE_PAGE_HTML,
    f'{DOCS_BASE}/entra': ENTRA_PAGE_HTML,
    f'{DOCS_BASE}/exchange': EXCHANGE_PAGE_HTML,
    f'{DOCS_BASE}/teams': TEAMS_PAGE_HTML,
}

DOC_PAGES = (
    DocPage(f'{DOCS_BASE}/intune', 'intune'),
    DocPage(f'{DOCS_BASE}/entra', 'entra'),
    DocPage(f'{DOCS_BASE}/exchange', 'exchange'),
    DocPage(f'{DOCS_BASE}/teams', 'teams'),
    DocPage(f'{DOCS_BASE}/missing', 'securityandcompliance'),
)

SCHEMA = {
    '$schema': 'https://json-schema.org/draft/2020-12/schema',
    '$defs': {
        'microsoft.intune.deviceCompliancePolicy': {'description': 'd1'},
        'microsoft.entra.administrativeUnit': {'description': 'Administrative unit'},
        'microsoft.entra.conditionalaccesspolicy': {'type': 'object'},
        'microsoft.exchange.antiPhishPolicy': {'description': 'Anti-phish'},
        'bad.key': {},
        'other.intune.thing': {},
        'microsoft.intune.bad-name': {},
    },
}

FIXED_TIME = '2026-01-01T00:00:00+00:00'


class FakeFetcher:
    """Serves canned pages and JSON documents; anything else is a 404."""

    def __init__(self, pages: dict | None = None, documents: dict | None = None):
        self.pages = pages or {}
        self.documents = documents or {}
        self.requested: list[str] = []

    def fetch_text(self, url: str) -> str:
        self.requested.append(url)
        if url not in self.pages:
            raise FetchError(url, 'Not Found', 404)
        return self.pages[url]

    def fetch_json(self, url: str) -> object:
        self.requested.append(url)
        if url not in self.documents:
            raise FetchError(url, 'Not Found', 404)
        return self.documents[url]


# ── Fixtures ─────────────────────────────────────────────────────────────

@pytest.fixture
def fake_fetcher():
    return FakeFetcher(pages=dict(PAGES))


@pytest.fixture
def test_config():
    return CatalogConfig(doc_pages=DOC_PAGES)


@pytest.fixture
def builder(fake_fetcher, test_config):
    return CatalogBuilder(fake_fetcher, config=test_config, clock=lambda: FIXED_TIME)
