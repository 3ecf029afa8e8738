"""Capability interfaces for image and video adapters, plus shared helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from decart_media.client import MediaService, create_client
from decart_media.config import DecartConfig
from decart_media.errors import PromptValidationError, ValidationErrorKind
from decart_media.models import (
    ImageResult,
    MediaKind,
    VideoJob,
    VideoResult,
    VideoStatus,
)
from decart_media.resolution import coerce_resolution, select_resolution

PROVIDER_NAME = "decart"

# Set by the adapter itself; never taken from model_options
RESERVED_OPTION_KEYS = ("model", "prompt")


class ImageAdapter(ABC):
    """Adapters that return finished images from a single call."""

    kind = MediaKind.IMAGE

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    @abstractmethod
    def model(self) -> str:
        ...

    @abstractmethod
    async def generate_images(
        self,
        prompt: str,
        size: Optional[str] = None,
        model_options: Optional[Mapping[str, Any]] = None,
    ) -> ImageResult:
        ...


class VideoAdapter(ABC):
    """Adapters driving an asynchronous job: submit, poll, fetch."""

    kind = MediaKind.VIDEO

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    @abstractmethod
    def model(self) -> str:
        ...

    @abstractmethod
    async def create_video_job(
        self,
        prompt: Optional[str],
        size: Optional[str] = None,
        model_options: Optional[Mapping[str, Any]] = None,
    ) -> VideoJob:
        """Submit a job and return without waiting for it."""
        ...

    @abstractmethod
    async def get_video_status(self, job_id: str) -> VideoStatus:
        """Report the backend's current status for a job."""
        ...

    @abstractmethod
    async def get_video_url(self, job_id: str) -> VideoResult:
        """Fetch a finished job's media as a data URL."""
        ...


def check_model(model: str, available: tuple[str, ...]) -> str:
    if model not in available:
        raise ValueError(f"Unknown Decart model: {model}. Available: {list(available)}")
    return model


def bind_client(
    config: DecartConfig,
    client: Optional[MediaService] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> MediaService:
    """Resolve the API key and return the client the adapter will use.

    The key is resolved even when a client is injected, so a missing key
    always fails at construction time.
    """
    api_key = config.resolve_api_key(environ)
    if client is not None:
        return client
    return create_client(config, api_key)


def build_request_options(
    size: Optional[str], model_options: Optional[Mapping[str, Any]]
) -> dict[str, Any]:
    """Merge the derived resolution with caller options.

    Caller options are applied last, so ``model_options["resolution"]``
    overrides the tier derived from ``size``. Options named ``model`` or
    ``prompt`` are rejected.
    """
    options = dict(model_options or {})
    reserved = [key for key in RESERVED_OPTION_KEYS if key in options]
    if reserved:
        raise PromptValidationError(
            ValidationErrorKind.RESERVED_OPTION,
            f"model_options cannot override {reserved}; pass them as arguments.",
        )
    resolution = select_resolution(size, options.get("resolution"))
    request: dict[str, Any] = {"resolution": resolution.value, **options}
    request["resolution"] = coerce_resolution(request["resolution"]).value
    return request
