from .extractors import KeywordOnlyExtractor, NounHeuristicExtractor, TokenExtractor
from .tagger import KEYWORD_TAGS, suggest_tags, tag

__all__ = [
    "KEYWORD_TAGS",
    "KeywordOnlyExtractor",
    "NounHeuristicExtractor",
    "TokenExtractor",
    "suggest_tags",
    "tag",
]
