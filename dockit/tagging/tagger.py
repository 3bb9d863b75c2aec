from __future__ import annotations

from typing import List, Optional, Set

from .extractors import NounHeuristicExtractor, TokenExtractor

KEYWORD_TAGS: dict[str, str] = {
    "chase": "chase",
    "kaiser": "kaiser",
    "w2": "tax",
    "1099": "tax",
    "statement": "finance",
    "benefit": "insurance",
}


def tag(file_name: str, use_heuristic: bool = False, extractor: Optional[TokenExtractor] = None) -> Set[str]:
    """Derive candidate tags for a file name.

    Every keyword contained in the lower-cased name contributes its tag. With
    ``use_heuristic`` the extractor's tokens (``NounHeuristicExtractor`` when
    none is given) are added as tags too.
    """
    base = file_name.lower()
    tags = {value for keyword, value in KEYWORD_TAGS.items() if keyword in base}

    if use_heuristic:
        extractor = extractor or NounHeuristicExtractor()
        tags.update(token.lower() for token in extractor.extract(file_name) if token.strip())

    return tags


def suggest_tags(file_name: str, use_heuristic: bool = False, extractor: Optional[TokenExtractor] = None) -> List[str]:
    """Tags from :func:`tag` in a stable order, ready to show as a prompt default."""
    return sorted(tag(file_name, use_heuristic, extractor))
