"""Content generation pipeline.

Turns a GenerationRequest into GeneratedContent:

    request -> prompt -> text provider (bounded by a timeout)
            -> on success: extract hashtags from the text
            -> on failure: template fallback
            -> score, recommendations, platform advisory -> GeneratedContent

``ContentGenerator.generate`` never raises for provider problems. Errors,
timeouts, empty responses and a missing provider all route to the template
fallback, are logged, and are flagged with ``used_fallback=True``.
"""

from __future__ import annotations

import asyncio
import logging
import math
from typing import Optional

from ..hashtag.strategy import HashtagStrategy, extract_hashtags
from ..platforms.catalog import PlatformCatalog, PlatformProfile, validate_content_length
from ..providers.config import GenerationSettings, ProviderConfig, load_provider_config
from ..providers.text import TextCollaborator, TextProvider
from ..utils.selection import PickOne, random_pick
from .cta import CTASuggester
from .models import (
    EngagementPrediction,
    GeneratedContent,
    GenerationRequest,
    LengthCheckResult,
    PlatformOptimization,
    Recommendations,
)
from .prompts import SYSTEM_PROMPT, build_generation_prompt
from .scoring import ScoreEngine
from .templates import FallbackTemplateGenerator

_logger = logging.getLogger("content_generator")

LIKES_PER_POINT = 5.2
RETWEETS_PER_POINT = 1.8
COMMENTS_PER_POINT = 0.9

DEFAULT_TIMEOUT_SECONDS = 30.0


def predict_engagement(viral_score: int) -> EngagementPrediction:
    """Derive engagement counts proportionally from the viral score."""
    return EngagementPrediction(
        likes=math.floor(viral_score * LIKES_PER_POINT),
        retweets=math.floor(viral_score * RETWEETS_PER_POINT),
        comments=math.floor(viral_score * COMMENTS_PER_POINT),
    )


class ContentGenerator:
    """Generates scored, hashtag-annotated content for one platform.

    Args:
        text_provider: AI collaborator. None means always use templates.
        timeout_seconds: Upper bound for the provider call.
        settings: Reach and fallback-hashtag bounds.
        pick: Selection strategy shared by every random choice in the
            pipeline (templates, CTA, hashtag count, reach estimate).

    Usage:
        generator = ContentGenerator(TextProvider())
        result = await generator.generate(GenerationRequest(topic="coffee"))
    """

    def __init__(
        self,
        text_provider: Optional[TextCollaborator] = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        settings: Optional[GenerationSettings] = None,
        pick: Optional[PickOne] = None,
        score_engine: Optional[ScoreEngine] = None,
        hashtag_strategy: Optional[HashtagStrategy] = None,
    ):
        self.text_provider = text_provider
        self.timeout_seconds = timeout_seconds
        self.settings = settings or GenerationSettings()
        self._pick = pick or random_pick()

        self.score_engine = score_engine or ScoreEngine()
        self.hashtag_strategy = hashtag_strategy or HashtagStrategy()
        self.cta_suggester = CTASuggester(pick=self._pick)
        self.template_generator = FallbackTemplateGenerator(
            pick=self._pick,
            min_hashtags=self.settings.min_fallback_hashtags,
            max_hashtags=self.settings.max_fallback_hashtags,
        )

    @classmethod
    def from_config(
        cls,
        config: Optional[ProviderConfig] = None,
        offline: bool = False,
        pick: Optional[PickOne] = None,
    ) -> "ContentGenerator":
        """Build a generator wired to the configured text providers.

        Args:
            config: Provider configuration (loaded from YAML if None).
            offline: Skip the AI provider and always use templates.
            pick: Optional selection strategy.
        """
        config = config or load_provider_config()
        text_provider = None if offline else TextProvider(config)
        return cls(
            text_provider=text_provider,
            timeout_seconds=config.provider_settings.timeout_seconds,
            settings=config.generation,
            pick=pick,
        )

    async def _generate_with_ai(
        self,
        request: GenerationRequest,
        profile: PlatformProfile,
    ) -> Optional[str]:
        """Call the text provider; None means fall back."""
        if self.text_provider is None:
            _logger.info("FALLBACK | reason:no_provider")
            return None

        prompt = build_generation_prompt(request, profile)
        try:
            text = await asyncio.wait_for(
                self.text_provider.generate(prompt, system=SYSTEM_PROMPT, task="content_generation"),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError:
            _logger.warning(
                f"FALLBACK | reason:timeout | platform:{profile.platform.value} | "
                f"timeout:{self.timeout_seconds}s"
            )
            return None
        except Exception as e:
            _logger.warning(
                f"FALLBACK | reason:error | platform:{profile.platform.value} | "
                f"error:{type(e).__name__}: {e}"
            )
            return None

        text = (text or "").strip()
        if not text:
            _logger.warning(f"FALLBACK | reason:empty_response | platform:{profile.platform.value}")
            return None
        return text

    def _build_recommendations(self, profile: PlatformProfile, viral_score: int) -> Recommendations:
        expected_reach = self._pick(range(self.settings.reach_min, self.settings.reach_max + 1))
        return Recommendations(
            best_post_time=profile.best_post_time,
            expected_reach=expected_reach,
            engagement_prediction=predict_engagement(viral_score),
        )

    def _build_optimization(
        self,
        request: GenerationRequest,
        profile: PlatformProfile,
        content: str,
        hashtags: list[str],
    ) -> PlatformOptimization:
        length = validate_content_length(content, profile.platform)
        return PlatformOptimization(
            character_count=length.current_length,
            character_limit=length.max_length,
            hashtag_count=len(hashtags),
            optimal_hashtags=profile.optimal_hashtags,
            suggested_hashtags=self.hashtag_strategy.suggest(request.topic, profile.platform),
            visual_suggestions=list(profile.visual_suggestions),
            cta_suggestions=list(profile.cta_pool),
            suggested_cta=self.cta_suggester.suggest(profile.platform, request.topic),
            length_check=LengthCheckResult(
                is_valid=length.is_valid,
                current_length=length.current_length,
                max_length=length.max_length,
                suggestion=length.suggestion,
            ),
        )

    async def generate(self, request: GenerationRequest) -> GeneratedContent:
        """Generate content for a request.

        Args:
            request: Validated generation request.

        Returns:
            GeneratedContent with a score in [0, 100].
        """
        profile = PlatformCatalog.get_profile(request.platform)
        if not PlatformCatalog.is_supported(request.platform):
            _logger.info(
                f"Unknown platform '{request.platform}', using {profile.platform.value} profile"
            )

        ai_text = await self._generate_with_ai(request, profile)

        if ai_text is not None:
            content = ai_text
            hashtags = extract_hashtags(ai_text)
            used_fallback = False
        else:
            template = self.template_generator.generate(
                request.topic,
                request.tone,
                include_hashtags=request.include_hashtags,
                audience=request.target_audience,
                max_hashtags=profile.max_hashtags,
            )
            content = template.content
            hashtags = template.hashtags
            used_fallback = True

        viral_score = self.score_engine.score(content, profile.platform)

        _logger.info(
            f"GENERATED | platform:{profile.platform.value} | score:{viral_score} | "
            f"hashtags:{len(hashtags)} | fallback:{used_fallback}"
        )

        return GeneratedContent(
            content=content,
            viral_score=viral_score,
            hashtags=hashtags,
            platform=profile.platform,
            recommendations=self._build_recommendations(profile, viral_score),
            platform_optimization=self._build_optimization(request, profile, content, hashtags),
            used_fallback=used_fallback,
        )
