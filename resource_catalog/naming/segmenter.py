"""
Greedy dictionary segmentation for compact lowercase identifiers.

Resource anchors in the documentation are unbroken lowercase strings such
as ``devicecompliancepolicy``. The segmenter splits them into words by
repeatedly taking the longest dictionary token the remaining text starts
with, falling back to a single character when nothing matches.
"""

from resource_catalog.domain.word_dictionary import DEFAULT_DICTIONARY, WordDictionary


class WordSegmenter:
    """
    Longest-match-first segmentation over a ``WordDictionary``.

    The dictionary order decides every tie, so the same input always
    produces the same tokens. Ambiguous inputs can be mis-split (a short
    token that is a prefix of the intended word wins if the intended word
    is missing from the dictionary); extend the dictionary or add a manual
    override rather than changing the walk.

    Example:
        >>> WordSegmenter().segment('devicecompliancepolicy')
        ['device', 'compliance', 'policy']
        >>> WordSegmenter().segment('qxz')
        ['q', 'x', 'z']
    """

    def __init__(self, dictionary: WordDictionary = DEFAULT_DICTIONARY) -> None:
        self._dictionary = dictionary

    @property
    def dictionary(self) -> WordDictionary:
        return self._dictionary

    def segment(self, identifier: str) -> list[str]:
        """
        Split ``identifier`` into dictionary tokens.

        Args:
            identifier: Lowercase string without separators.

        Returns:
            Tokens whose concatenation equals the lowercased input. Characters
            no dictionary entry covers come back as one-character tokens.
        """
        remaining = identifier.lower()
        tokens: list[str] = []
        while remaining:
            token = self._match(remaining)
            tokens.append(token)
            remaining = remaining[len(token):]
        return tokens

    def _match(self, remaining: str) -> str:
        for word in self._dictionary:
            if remaining.startswith(word):
                return word
        return remaining[0]
