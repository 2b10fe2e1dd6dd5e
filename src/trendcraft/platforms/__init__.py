"""Platform constraint catalog.

Provides:
- PlatformId: Closed set of supported platforms with central defaulting
- PlatformProfile: Immutable limits and advisory text for one platform
- PlatformCatalog: Total lookup (unknown names resolve to Twitter's profile)
- validate_content_length: Live character-count check with suggestions
"""

from .catalog import (
    PLATFORM_PROFILES,
    LengthCheck,
    PlatformCatalog,
    PlatformId,
    PlatformProfile,
    get_content_tips,
    get_profile,
    get_visual_suggestions,
    validate_content_length,
)

__all__ = [
    "PLATFORM_PROFILES",
    "LengthCheck",
    "PlatformCatalog",
    "PlatformId",
    "PlatformProfile",
    "get_content_tips",
    "get_profile",
    "get_visual_suggestions",
    "validate_content_length",
]
