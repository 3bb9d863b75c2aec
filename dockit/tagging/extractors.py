"""Token extractors used for heuristic tagging."""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Protocol

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])")
_WORD = re.compile(r"[A-Za-z]+")

STOPWORDS = frozenset(
    """
    a an and are as at be by for from has have in into is it its of on or our
    the their this that to was were with your you my me we us not no yes
    """.split()
)

# Words that show up in scanner output names but say nothing about content.
FILLER = frozenset(
    """
    pdf jpg jpeg png tif tiff heic doc docx img image scanned file files page pages
    copy final draft new old misc untitled version rev
    jan feb mar apr may jun jul aug sep sept oct nov dec
    january february march april june july august september october november december
    """.split()
)

# Endings of common adjectives, adverbs and participles.
_NON_NOUN_SUFFIXES = ("ly", "ful", "ous", "ive", "ed")
# Nouns that the suffix rules would otherwise drop.
_NOUN_EXCEPTIONS = frozenset({"family", "supply", "assembly", "policy", "bed", "med", "fed", "shed"})


class TokenExtractor(Protocol):
    def extract(self, text: str) -> Iterable[str]:
        ...


class KeywordOnlyExtractor:
    """Extractor for environments without a noun extraction pass; yields nothing."""

    def extract(self, text: str) -> Iterable[str]:
        return ()


class NounHeuristicExtractor:
    """Rule-based pass that keeps the noun-like words of a filename.

    The text is split on anything that is not a letter and on camelCase
    boundaries. Words shorter than ``min_length``, stopwords, file/scanner
    filler, month names and words with adjective/adverb endings are dropped.
    """

    def __init__(self, min_length: int = 3) -> None:
        self.min_length = min_length

    def _words(self, text: str) -> Iterator[str]:
        for chunk in _WORD.findall(text):
            for word in _CAMEL_BOUNDARY.split(chunk):
                yield word.lower()

    def _is_noun_like(self, word: str) -> bool:
        if len(word) < self.min_length or word in STOPWORDS or word in FILLER:
            return False
        if word in _NOUN_EXCEPTIONS:
            return True
        return not word.endswith(_NON_NOUN_SUFFIXES)

    def extract(self, text: str) -> Iterable[str]:
        seen: dict[str, None] = {}
        for word in self._words(text):
            if self._is_noun_like(word):
                seen.setdefault(word, None)
        return list(seen)
