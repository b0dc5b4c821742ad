# ABOUTME: Wikipedia-backed table source
# ABOUTME: MediaWiki parse API access and wikitable selection

from .base import WIKIPEDIA_API_PARAMS, WikipediaTableSource, validate_wikipedia_url

__all__ = [
    "WIKIPEDIA_API_PARAMS",
    "WikipediaTableSource",
    "validate_wikipedia_url",
]
