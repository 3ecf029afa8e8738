"""Decart text-to-image adapter."""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from decart_media.adapters.base import (
    PROVIDER_NAME,
    ImageAdapter,
    bind_client,
    build_request_options,
    check_model,
)
from decart_media.client import MediaService
from decart_media.config import DecartConfig
from decart_media.models import (
    DECART_IMAGE_MODELS,
    DecartImageOptions,
    GeneratedImage,
    ImageResult,
)
from decart_media.utils.encoding import encode_base64
from decart_media.utils.ids import generate_id
from decart_media.validation import validate_image_prompt

logger = logging.getLogger(__name__)


class DecartImageAdapter(ImageAdapter):
    """Generates images with Decart's synchronous ``process`` endpoint."""

    def __init__(
        self,
        config: DecartConfig,
        model: str,
        client: Optional[MediaService] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.config = config
        self._model = check_model(model, DECART_IMAGE_MODELS)
        self._client = bind_client(config, client, environ)

    @property
    def name(self) -> str:
        return PROVIDER_NAME

    @property
    def model(self) -> str:
        return self._model

    async def generate_images(
        self,
        prompt: str,
        size: Optional[str] = None,
        model_options: Optional[DecartImageOptions] = None,
    ) -> ImageResult:
        validate_image_prompt(prompt)
        request = build_request_options(size, model_options)

        try:
            payload = await self._client.process(
                model=self._model, prompt=prompt, **request
            )
        except Exception as exc:
            logger.error("Decart image generation failed: %s", exc)
            raise

        return ImageResult(
            id=generate_id(self.name),
            model=self._model,
            images=[
                GeneratedImage(
                    b64_json=encode_base64(payload.data), revised_prompt=None
                )
            ],
            usage=None,
        )

    async def aclose(self) -> None:
        await self._client.aclose()


def create_decart_image(
    model: str,
    api_key: str,
    base_url: Optional[str] = None,
    client: Optional[MediaService] = None,
) -> DecartImageAdapter:
    """Create an image adapter with an explicit API key."""
    return DecartImageAdapter(
        DecartConfig(api_key=api_key, base_url=base_url), model, client=client
    )


def decart_image(
    model: str,
    base_url: Optional[str] = None,
    client: Optional[MediaService] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> DecartImageAdapter:
    """Create an image adapter using the ``DECART_API_KEY`` environment variable."""
    return DecartImageAdapter(
        DecartConfig(base_url=base_url), model, client=client, environ=environ
    )
