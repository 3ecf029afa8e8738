"""Shared fixtures: in-memory stand-ins for the Decart client."""

from __future__ import annotations

from typing import Any, Optional

import pytest

from decart_media.models import MediaPayload


class FakeQueue:
    def __init__(self) -> None:
        self.submitted: list[dict[str, Any]] = []
        self.status_calls: list[str] = []
        self.result_calls: list[str] = []
        self.status_label = "completed"
        self.result_payload = MediaPayload(b"fake-video-data", "video/mp4")
        self.error: Optional[Exception] = None

    async def submit(self, **kwargs: Any) -> dict[str, Any]:
        if self.error:
            raise self.error
        self.submitted.append(kwargs)
        return {"job_id": "job-123", "status": "pending"}

    async def status(self, job_id: str) -> dict[str, Any]:
        if self.error:
            raise self.error
        self.status_calls.append(job_id)
        return {"job_id": job_id, "status": self.status_label}

    async def result(self, job_id: str) -> MediaPayload:
        if self.error:
            raise self.error
        self.result_calls.append(job_id)
        return self.result_payload


class FakeClient:
    def __init__(self) -> None:
        self.queue = FakeQueue()
        self.processed: list[dict[str, Any]] = []
        self.image_payload = MediaPayload(b"fake-image-data", "image/png")
        self.error: Optional[Exception] = None
        self.closed = False

    async def process(self, **kwargs: Any) -> MediaPayload:
        if self.error:
            raise self.error
        self.processed.append(kwargs)
        return self.image_payload

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()
