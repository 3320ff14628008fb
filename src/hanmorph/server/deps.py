"""
Shared dependencies for routes.
"""

from functools import lru_cache

from hanmorph.core.config import get_settings
from hanmorph.core.processor import KoreanProcessor


@lru_cache
def get_processor() -> KoreanProcessor:
    return KoreanProcessor(settings=get_settings())
