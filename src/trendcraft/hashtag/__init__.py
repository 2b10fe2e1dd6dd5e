"""Hashtag strategy module.

Provides:
- HashtagStrategy: Deterministic, bounded hashtag suggestions per platform
- extract_hashtags: ``#\\w+`` scan used on AI-generated text
- topic_hashtag: Topic text to a single hashtag
"""

from .constants import (
    CATEGORY_HASHTAG_POOLS,
    FALLBACK_HASHTAG_POOL,
    PLATFORM_HASHTAG_POOLS,
)
from .strategy import HashtagStrategy, extract_hashtags, topic_hashtag

__all__ = [
    "CATEGORY_HASHTAG_POOLS",
    "FALLBACK_HASHTAG_POOL",
    "PLATFORM_HASHTAG_POOLS",
    "HashtagStrategy",
    "extract_hashtags",
    "topic_hashtag",
]
