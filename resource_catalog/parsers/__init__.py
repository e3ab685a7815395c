"""Documentation page parsers."""

from resource_catalog.parsers.permission_parser import (
    PermissionTableExtractor,
    apply_exchange_rule,
    find_permission_tokens,
)
from resource_catalog.parsers.resource_name_parser import ResourceNameExtractor
from resource_catalog.parsers.section_locator import SectionLocator

__all__ = [
    'PermissionTableExtractor', 'ResourceNameExtractor', 'SectionLocator',
    'apply_exchange_rule', 'find_permission_tokens',
]
