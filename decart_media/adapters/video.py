"""Decart text-to-video adapter.

Video generation runs as a backend job. Each method here makes exactly one
request and reports what the backend says; polling cadence, timeouts and
giving up are left to the caller::

    job = await adapter.create_video_job("A cat walking")
    while not (await adapter.get_video_status(job.job_id)).is_completed:
        await asyncio.sleep(5)
    video = await adapter.get_video_url(job.job_id)
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from decart_media.adapters.base import (
    PROVIDER_NAME,
    VideoAdapter,
    bind_client,
    build_request_options,
    check_model,
)
from decart_media.client import MediaService
from decart_media.config import DecartConfig
from decart_media.models import (
    DECART_VIDEO_MODELS,
    DecartVideoOptions,
    VideoJob,
    VideoResult,
    VideoStatus,
)
from decart_media.utils.encoding import DEFAULT_VIDEO_MIME, to_data_url
from decart_media.validation import validate_video_prompt

logger = logging.getLogger(__name__)


class DecartVideoAdapter(VideoAdapter):
    """Submits, polls and fetches Decart video jobs."""

    def __init__(
        self,
        config: DecartConfig,
        model: str,
        client: Optional[MediaService] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.config = config
        self._model = check_model(model, DECART_VIDEO_MODELS)
        self._client = bind_client(config, client, environ)

    @property
    def name(self) -> str:
        return PROVIDER_NAME

    @property
    def model(self) -> str:
        return self._model

    async def create_video_job(
        self,
        prompt: Optional[str],
        size: Optional[str] = None,
        model_options: Optional[DecartVideoOptions] = None,
    ) -> VideoJob:
        validate_video_prompt(prompt)
        request = build_request_options(size, model_options)

        try:
            job = await self._client.queue.submit(
                model=self._model, prompt=prompt, **request
            )
        except Exception as exc:
            logger.error("Decart video submission failed: %s", exc)
            raise

        job_id = job["job_id"]
        logger.info(
            "Decart video job %s submitted (model=%s, resolution=%s, status=%s)",
            job_id,
            self._model,
            request["resolution"],
            job.get("status"),
        )
        return VideoJob(job_id=job_id, model=self._model)

    async def get_video_status(self, job_id: str) -> VideoStatus:
        try:
            status = await self._client.queue.status(job_id)
        except Exception as exc:
            logger.error("Decart status query failed for job %s: %s", job_id, exc)
            raise

        label = str(status["status"])
        logger.debug("Decart video job %s status: %s", job_id, label)
        return VideoStatus(job_id=status.get("job_id", job_id), status=label)

    async def get_video_url(self, job_id: str) -> VideoResult:
        try:
            payload = await self._client.queue.result(job_id)
        except Exception as exc:
            logger.error("Decart result fetch failed for job %s: %s", job_id, exc)
            raise

        url = to_data_url(
            payload.data, payload.content_type, default_mime=DEFAULT_VIDEO_MIME
        )
        return VideoResult(job_id=job_id, url=url)

    async def aclose(self) -> None:
        await self._client.aclose()


def create_decart_video(
    model: str,
    api_key: str,
    base_url: Optional[str] = None,
    client: Optional[MediaService] = None,
) -> DecartVideoAdapter:
    """Create a video adapter with an explicit API key."""
    return DecartVideoAdapter(
        DecartConfig(api_key=api_key, base_url=base_url), model, client=client
    )


def decart_video(
    model: str,
    base_url: Optional[str] = None,
    client: Optional[MediaService] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> DecartVideoAdapter:
    """Create a video adapter using the ``DECART_API_KEY`` environment variable."""
    return DecartVideoAdapter(
        DecartConfig(base_url=base_url), model, client=client, environ=environ
    )
