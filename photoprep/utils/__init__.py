# Staging Utils Module
from .keyword_matcher import KeywordMatcher

__all__ = ['KeywordMatcher']
