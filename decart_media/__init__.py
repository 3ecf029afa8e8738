"""Decart image and video adapters."""

from decart_media.adapters.factory import AdapterFactory
from decart_media.adapters.image import (
    DecartImageAdapter,
    create_decart_image,
    decart_image,
)
from decart_media.adapters.video import (
    DecartVideoAdapter,
    create_decart_video,
    decart_video,
)
from decart_media.config import DecartConfig, load_config
from decart_media.errors import (
    ConfigError,
    ConfigErrorKind,
    DecartError,
    PromptValidationError,
    ValidationErrorKind,
)
from decart_media.models import (
    DECART_IMAGE_MODELS,
    DECART_VIDEO_MODELS,
    DecartImageOptions,
    DecartVideoOptions,
    GenerationStatus,
    ImageResult,
    ResolutionTier,
    VideoJob,
    VideoResult,
    VideoStatus,
)

VERSION = "0.1.0"

__all__ = [
    "AdapterFactory",
    "ConfigError",
    "ConfigErrorKind",
    "DECART_IMAGE_MODELS",
    "DECART_VIDEO_MODELS",
    "DecartConfig",
    "DecartError",
    "DecartImageAdapter",
    "DecartImageOptions",
    "DecartVideoAdapter",
    "DecartVideoOptions",
    "GenerationStatus",
    "ImageResult",
    "PromptValidationError",
    "ResolutionTier",
    "VERSION",
    "ValidationErrorKind",
    "VideoJob",
    "VideoResult",
    "VideoStatus",
    "create_decart_image",
    "create_decart_video",
    "decart_image",
    "decart_video",
    "load_config",
]
