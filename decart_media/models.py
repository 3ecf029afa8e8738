"""Model identifiers and the request/result types shared by the adapters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, TypedDict

DECART_IMAGE_MODELS: tuple[str, ...] = ("lucy-pro-t2i",)
DECART_VIDEO_MODELS: tuple[str, ...] = ("lucy-pro-t2v",)


class MediaKind(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


class ResolutionTier(str, Enum):
    LOW = "480p"
    HIGH = "720p"


class GenerationStatus(str, Enum):
    """Status labels the backend is known to report.

    The backend owns this vocabulary; unknown labels are passed through as
    plain strings.
    """

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class DecartImageOptions(TypedDict, total=False):
    seed: int
    resolution: str  # "720p" | "480p"
    orientation: str  # "portrait" | "landscape"


class DecartVideoOptions(TypedDict, total=False):
    seed: int
    resolution: str
    orientation: str


@dataclass(frozen=True)
class MediaPayload:
    """Raw media bytes returned by the remote service."""

    data: bytes
    content_type: Optional[str] = None


@dataclass
class GeneratedImage:
    b64_json: str
    revised_prompt: Optional[str] = None


@dataclass
class ImageResult:
    """Result of a single image generation call."""

    id: str
    model: str
    images: list[GeneratedImage] = field(default_factory=list)
    usage: Optional[dict[str, Any]] = None


@dataclass
class VideoJob:
    """Handle for a submitted video job."""

    job_id: str
    model: str


@dataclass
class VideoStatus:
    """Backend-reported status of a video job at the time of the query."""

    job_id: str
    status: str

    @property
    def is_completed(self) -> bool:
        return self.status == GenerationStatus.COMPLETED.value

    @property
    def is_failed(self) -> bool:
        return self.status == GenerationStatus.FAILED.value


@dataclass
class VideoResult:
    job_id: str
    url: str
