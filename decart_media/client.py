"""HTTP client for the Decart media API.

The adapters only depend on the :class:`MediaService` protocol, so any object
with the same shape can stand in for :class:`DecartClient`.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

import httpx

from decart_media.config import DEFAULT_BASE_URL, DecartConfig
from decart_media.models import MediaPayload

logger = logging.getLogger(__name__)


class JobQueue(Protocol):
    async def submit(
        self, *, model: str, prompt: str, resolution: str, **extra: Any
    ) -> dict[str, Any]:
        ...

    async def status(self, job_id: str) -> dict[str, Any]:
        ...

    async def result(self, job_id: str) -> MediaPayload:
        ...


class MediaService(Protocol):
    queue: JobQueue

    async def process(
        self, *, model: str, prompt: str, resolution: str, **extra: Any
    ) -> MediaPayload:
        ...

    async def aclose(self) -> None:
        ...


def _form_fields(fields: dict[str, Any]) -> dict[str, str]:
    form: dict[str, str] = {}
    for key, value in fields.items():
        if value is None:
            continue
        if isinstance(value, bool):
            form[key] = "true" if value else "false"
        else:
            form[key] = str(value)
    return form


def _payload(response: httpx.Response) -> MediaPayload:
    content_type = response.headers.get("content-type")
    if content_type:
        content_type = content_type.split(";")[0].strip() or None
    return MediaPayload(data=response.content, content_type=content_type)


class DecartQueue:
    """Asynchronous job endpoints: submit, status, result."""

    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

    async def submit(
        self, *, model: str, prompt: str, resolution: str, **extra: Any
    ) -> dict[str, Any]:
        resp = await self._http.post(
            f"/v1/jobs/{model}",
            data=_form_fields({"prompt": prompt, "resolution": resolution, **extra}),
        )
        resp.raise_for_status()
        return resp.json()

    async def status(self, job_id: str) -> dict[str, Any]:
        resp = await self._http.get(f"/v1/jobs/{job_id}")
        resp.raise_for_status()
        return resp.json()

    async def result(self, job_id: str) -> MediaPayload:
        resp = await self._http.get(f"/v1/jobs/{job_id}/content")
        resp.raise_for_status()
        return _payload(resp)


class DecartClient:
    """Thin async wrapper over the Decart REST endpoints."""

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: float = 300.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=base_url or DEFAULT_BASE_URL,
            headers={"X-API-KEY": api_key},
            timeout=timeout,
            transport=transport,
        )
        self.queue = DecartQueue(self._http)

    async def process(
        self, *, model: str, prompt: str, resolution: str, **extra: Any
    ) -> MediaPayload:
        """Run a synchronous generation and return the raw media bytes."""
        resp = await self._http.post(
            f"/v1/generate/{model}",
            data=_form_fields({"prompt": prompt, "resolution": resolution, **extra}),
        )
        resp.raise_for_status()
        return _payload(resp)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "DecartClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def create_client(
    config: DecartConfig,
    api_key: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> DecartClient:
    logger.debug("Creating Decart client for %s", config.base_url or DEFAULT_BASE_URL)
    return DecartClient(
        api_key=api_key,
        base_url=config.base_url,
        timeout=config.timeout,
        transport=transport,
    )
