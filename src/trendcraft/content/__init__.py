"""Content generation module.

Provides:
- ContentGenerator: AI-first generation with template fallback
- ScoreEngine: Additive viral score heuristics
- CTASuggester: Platform call-to-action selection
- FallbackTemplateGenerator: Tone templates used when AI is unavailable
"""

from .cta import CTASuggester
from .generator import ContentGenerator, predict_engagement
from .models import (
    EngagementPrediction,
    GeneratedContent,
    GenerationRequest,
    PlatformOptimization,
    Recommendations,
    TemplateResult,
    ToneId,
)
from .scoring import ScoreEngine, score_content
from .templates import FallbackTemplateGenerator, templates_for

__all__ = [
    # Pipeline
    "ContentGenerator",
    "predict_engagement",
    # Components
    "CTASuggester",
    "FallbackTemplateGenerator",
    "ScoreEngine",
    "score_content",
    "templates_for",
    # Models
    "EngagementPrediction",
    "GeneratedContent",
    "GenerationRequest",
    "PlatformOptimization",
    "Recommendations",
    "TemplateResult",
    "ToneId",
]
