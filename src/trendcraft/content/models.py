"""Data models for content generation.

Models serialize with camelCase keys (``viralScore``, ``bestPostTime``) to
match the JSON the HTTP layer returns. Python code uses snake_case
attributes; both spellings are accepted on input.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..platforms.catalog import PlatformId


class ToneId(str, Enum):
    """Writing tone for generated content."""

    PROFESSIONAL = "professional"
    CASUAL = "casual"
    HUMOROUS = "humorous"
    INSPIRATIONAL = "inspirational"

    @classmethod
    def default(cls) -> "ToneId":
        """Tone used for unknown names."""
        return cls.PROFESSIONAL

    @classmethod
    def resolve(cls, value: "str | ToneId | None") -> "ToneId":
        """Map any tone name to a known tone, defaulting to professional."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.default()
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.default()


class _CamelModel(BaseModel):
    """Base model with camelCase JSON aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict:
        """Dump with camelCase keys, as returned to API callers."""
        return self.model_dump(by_alias=True, mode="json")


class GenerationRequest(_CamelModel):
    """A request to generate content for one platform.

    ``platform`` and ``tone`` stay raw strings; they are resolved centrally
    by ``PlatformId.resolve`` / ``ToneId.resolve`` so unknown values never
    fail validation. ``topic`` must be non-blank.
    """

    topic: str
    platform: str = "twitter"
    tone: str = ToneId.PROFESSIONAL.value
    target_audience: Optional[str] = None
    include_hashtags: bool = True

    @field_validator("topic")
    @classmethod
    def _topic_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("topic must be a non-empty string")
        return value

    @field_validator("target_audience")
    @classmethod
    def _blank_audience_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None


class EngagementPrediction(_CamelModel):
    """Predicted engagement counts derived from the viral score."""

    likes: int = 0
    retweets: int = 0
    comments: int = 0


class Recommendations(_CamelModel):
    """Posting recommendations for generated content."""

    best_post_time: str
    expected_reach: int
    engagement_prediction: EngagementPrediction


class LengthCheckResult(_CamelModel):
    """Character-count check for the generated content."""

    is_valid: bool
    current_length: int
    max_length: int
    suggestion: Optional[str] = None


class PlatformOptimization(_CamelModel):
    """Platform advisory block shown next to generated content."""

    character_count: int
    character_limit: int
    hashtag_count: int
    optimal_hashtags: int
    suggested_hashtags: list[str] = Field(default_factory=list)
    visual_suggestions: list[str] = Field(default_factory=list)
    cta_suggestions: list[str] = Field(default_factory=list)
    suggested_cta: str = ""
    length_check: Optional[LengthCheckResult] = None


class GeneratedContent(_CamelModel):
    """Final output of the content generator."""

    content: str
    viral_score: int = Field(ge=0, le=100)
    hashtags: list[str] = Field(default_factory=list)
    platform: PlatformId
    recommendations: Recommendations
    platform_optimization: Optional[PlatformOptimization] = None
    used_fallback: bool = False


class TemplateResult(BaseModel):
    """Output of the template fallback before scoring."""

    content: str
    hashtags: list[str] = Field(default_factory=list)
    template: str
