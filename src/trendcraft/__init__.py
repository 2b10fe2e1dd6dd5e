"""TrendCraft - content generation and platform optimization engine."""

__version__ = "0.1.0"

from .content import ContentGenerator, GeneratedContent, GenerationRequest, ScoreEngine, ToneId
from .hashtag import HashtagStrategy
from .platforms import PlatformCatalog, PlatformId, PlatformProfile
from .scheduling import RecurrenceType, next_occurrence

__all__ = [
    "ContentGenerator",
    "GeneratedContent",
    "GenerationRequest",
    "HashtagStrategy",
    "PlatformCatalog",
    "PlatformId",
    "PlatformProfile",
    "RecurrenceType",
    "ScoreEngine",
    "ToneId",
    "next_occurrence",
]
