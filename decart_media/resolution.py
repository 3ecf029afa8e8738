"""Mapping from requested output size to the backend's resolution tiers."""

from __future__ import annotations

from typing import Optional, Union

from decart_media.errors import PromptValidationError, ValidationErrorKind
from decart_media.models import ResolutionTier

# Longest edge at or above this maps to the high tier
HIGH_TIER_MIN_EDGE = 720

DEFAULT_RESOLUTION = ResolutionTier.HIGH


def map_size_to_resolution(size: Optional[str]) -> Optional[ResolutionTier]:
    """Map a ``"WxH"`` size string to a tier, or None if it does not parse."""
    if not size:
        return None

    parts = size.split("x")
    if len(parts) != 2:
        return None
    if not all(part.isascii() and part.isdigit() for part in parts):
        return None
    width, height = (int(part) for part in parts)
    if width <= 0 or height <= 0:
        return None

    if max(width, height) >= HIGH_TIER_MIN_EDGE:
        return ResolutionTier.HIGH
    return ResolutionTier.LOW


def coerce_resolution(value: Union[str, ResolutionTier]) -> ResolutionTier:
    try:
        return ResolutionTier(value)
    except ValueError:
        raise PromptValidationError(
            ValidationErrorKind.INVALID_RESOLUTION,
            f"Unknown resolution: {value!r}. "
            f"Available: {[tier.value for tier in ResolutionTier]}",
        ) from None


def select_resolution(
    size: Optional[str] = None,
    explicit: Optional[Union[str, ResolutionTier]] = None,
) -> ResolutionTier:
    """Pick a tier from the size hint, then the explicit tier, then the default.

    A malformed size hint is treated as absent.
    """
    from_size = map_size_to_resolution(size)
    if from_size is not None:
        return from_size
    if explicit is not None:
        return coerce_resolution(explicit)
    return DEFAULT_RESOLUTION
