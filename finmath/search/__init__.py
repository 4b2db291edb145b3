"""Search configuration and presets."""

from finmath.search.config import get_search_config
from finmath.search.config import SEARCH_PRESETS
from finmath.search.config import SearchConfig

__all__ = [
    'SearchConfig',
    'SEARCH_PRESETS',
    'get_search_config',
]
