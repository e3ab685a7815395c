"""Friendly display names for resource identifiers.

Two entry points:
  - ``FriendlyNameFormatter.format`` renders one identifier, splitting
    lowercase names with the dictionary segmenter and mixed-case names at
    their capitals.
  - ``NameResolver.resolve`` applies the naming precedence: manual
    override, then documentation camelCase, then the identifier itself.
"""

import re
from typing import Mapping

from resource_catalog.domain.constants import (
    ABBREVIATION_FIX_RES,
    LITERAL_FIXES,
    PROTECTED_TOKENS,
)
from resource_catalog.domain.overrides import MANUAL_OVERRIDES
from resource_catalog.naming.segmenter import WordSegmenter

_WHITESPACE_RE = re.compile(r'\s+')
_CAPITAL_RE = re.compile(r'([A-Z])')
_PLACEHOLDER = '\x00{}\x00'


class FriendlyNameFormatter:
    """Turns compact identifiers into capitalized, space-separated names.

    Args:
        segmenter: Segmenter used for all-lowercase identifiers.
    """

    def __init__(self, segmenter: WordSegmenter | None = None) -> None:
        self._segmenter = segmenter or WordSegmenter()

    @property
    def segmenter(self) -> WordSegmenter:
        return self._segmenter

    def format(self, name: str) -> str:
        if not name:
            return ''
        if any(c.isupper() for c in name):
            text = self._split_mixed_case(name)
        else:
            text = self._split_lowercase(name)
        return self._fix_abbreviations(text)

    def _split_lowercase(self, name: str) -> str:
        words = self._segmenter.segment(name)
        return ' '.join(w[:1].upper() + w[1:] for w in words)

    @staticmethod
    def _split_mixed_case(name: str) -> str:
        text = name
        restores: list[tuple[str, str]] = []
        for index, (pattern, spaced) in enumerate(PROTECTED_TOKENS):
            placeholder = _PLACEHOLDER.format(index)
            text, count = pattern.subn(placeholder, text)
            if count:
                restores.append((placeholder, spaced))

        text = _CAPITAL_RE.sub(r' \1', text)
        text = _WHITESPACE_RE.sub(' ', text).strip()
        for placeholder, spaced in restores:
            text = text.replace(placeholder, spaced)
        text = _WHITESPACE_RE.sub(' ', text).strip()

        return text[:1].upper() + text[1:]

    @staticmethod
    def _fix_abbreviations(text: str) -> str:
        for pattern, fixed in ABBREVIATION_FIX_RES:
            text = pattern.sub(fixed, text)
        for literal, fixed in LITERAL_FIXES:
            text = text.replace(literal, fixed)
        return text


class NameResolver:
    """Resolves the friendly name of a resource through three tiers.

    1. Manual override, keyed by the lowercased original name.
    2. Documentation camelCase form of the name, run through the formatter.
    3. The original name, run through the formatter.

    The first tier that has a value wins.

    Args:
        formatter: Formatter for tiers 2 and 3.
        overrides: Lowercase name → final friendly name.
        camel_case_names: Lowercase name → camelCase display text harvested
            from documentation headings.
    """

    def __init__(
        self,
        formatter: FriendlyNameFormatter | None = None,
        overrides: Mapping[str, str] = MANUAL_OVERRIDES,
        camel_case_names: Mapping[str, str] | None = None,
    ) -> None:
        self._formatter = formatter or FriendlyNameFormatter()
        self._overrides = overrides
        self._camel_case_names = camel_case_names or {}

    def resolve(self, original_name: str) -> str:
        key = original_name.lower()
        override = self._overrides.get(key)
        if override:
            return override
        camel = self._camel_case_names.get(key)
        if camel:
            return self._formatter.format(camel)
        return self._formatter.format(original_name)

    def explain(self, original_name: str) -> tuple[str, str]:
        """Return ``(friendly_name, tier)`` where tier names the winning source."""
        key = original_name.lower()
        if self._overrides.get(key):
            return self._overrides[key], 'override'
        if self._camel_case_names.get(key):
            return self._formatter.format(self._camel_case_names[key]), 'documentation'
        return self._formatter.format(original_name), 'segmentation'
