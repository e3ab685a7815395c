"""Invariant checks for a written catalog JSON document.

Each check returns ``(passed, detail)``; ``run_checks`` runs them all.
"""

from typing import Callable

from resource_catalog.domain.constants import EXCHANGE_MANAGE_AS_APP, EXCHANGE_RESOURCE_TYPE


def check_prefixed_names(catalog: dict) -> tuple[bool, str]:
    """prefixedName == microsoft.<resourceType>.<originalName> for every resource."""
    bad = [
        r.get('prefixedName') for r in catalog.get('resources', [])
        if r.get('prefixedName') != f"microsoft.{r.get('resourceType')}.{r.get('originalName')}"
        or not r.get('resourceType') or not r.get('originalName')
    ]
    return not bad, f"{len(bad)} malformed" + (f": {bad[:5]}" if bad else '')


def check_sorted(catalog: dict) -> tuple[bool, str]:
    """Resources are ordered by prefixedName."""
    names = [r.get('prefixedName', '') for r in catalog.get('resources', [])]
    return names == sorted(names), f"{len(names)} resources"


def check_unique(catalog: dict) -> tuple[bool, str]:
    """No two resources share a prefixedName, ignoring case."""
    seen: dict[str, int] = {}
    for r in catalog.get('resources', []):
        key = r.get('prefixedName', '').lower()
        seen[key] = seen.get(key, 0) + 1
    dupes = sorted(k for k, count in seen.items() if count > 1)
    return not dupes, f"{len(dupes)} duplicates" + (f": {dupes[:5]}" if dupes else '')


def check_summary(catalog: dict) -> tuple[bool, str]:
    """Summary counts match the resource list and the declared total."""
    resources = catalog.get('resources', [])
    counts: dict[str, int] = {}
    for r in resources:
        counts[r.get('resourceType')] = counts.get(r.get('resourceType'), 0) + 1
    summary = catalog.get('summary', {})
    total = catalog.get('totalResources')

    if summary != counts:
        return False, f"summary={summary}, counted={counts}"
    if total != len(resources) or sum(summary.values()) != len(resources):
        return False, f"totalResources={total}, resources={len(resources)}"
    return True, f"{len(summary)} types, {len(resources)} resources"


def check_exchange_permission(catalog: dict) -> tuple[bool, str]:
    """Every Exchange resource lists Exchange.ManageAsApp."""
    missing = [
        r.get('prefixedName') for r in catalog.get('resources', [])
        if r.get('resourceType') == EXCHANGE_RESOURCE_TYPE
        and EXCHANGE_MANAGE_AS_APP not in r.get('applicationPermissions', [])
    ]
    return not missing, f"{len(missing)} missing" + (f": {missing[:5]}" if missing else '')


CHECKS: list[tuple[str, Callable[[dict], tuple[bool, str]]]] = [
    ('prefixed_names', check_prefixed_names),
    ('sorted', check_sorted),
    ('unique', check_unique),
    ('summary', check_summary),
    ('exchange_permission', check_exchange_permission),
]


def run_checks(catalog: dict) -> list[tuple[str, bool, str]]:
    return [(name, *check(catalog)) for name, check in CHECKS]
