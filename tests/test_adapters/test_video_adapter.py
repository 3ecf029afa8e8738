"""Tests for DecartVideoAdapter."""

import pytest

from decart_media.adapters.video import (
    DecartVideoAdapter,
    create_decart_video,
    decart_video,
)
from decart_media.config import DecartConfig
from decart_media.errors import ConfigError, PromptValidationError, ValidationErrorKind
from decart_media.models import MediaPayload, VideoJob


@pytest.fixture
def adapter(fake_client) -> DecartVideoAdapter:
    return DecartVideoAdapter(DecartConfig(api_key="test-key"), "lucy-pro-t2v", client=fake_client)


class TestConstruction:
    def test_surface(self, adapter):
        assert adapter.kind == "video"
        assert adapter.name == "decart"
        assert adapter.model == "lucy-pro-t2v"

    def test_create_with_explicit_key(self, fake_client):
        adapter = create_decart_video("lucy-pro-t2v", "my-api-key", client=fake_client)
        assert adapter.model == "lucy-pro-t2v"

    def test_missing_key_fails_before_any_request(self, monkeypatch, fake_client):
        monkeypatch.delenv("DECART_API_KEY", raising=False)
        with pytest.raises(ConfigError, match="DECART_API_KEY is required"):
            decart_video("lucy-pro-t2v", client=fake_client)
        assert fake_client.queue.submitted == []

    def test_env_key_present(self, fake_client):
        adapter = decart_video(
            "lucy-pro-t2v", client=fake_client, environ={"DECART_API_KEY": "env-api-key"}
        )
        assert adapter.model == "lucy-pro-t2v"


class TestCreateVideoJob:
    @pytest.mark.asyncio
    async def test_returns_job_handle(self, adapter, fake_client):
        job = await adapter.create_video_job("A cat walking")
        assert job == VideoJob(job_id="job-123", model="lucy-pro-t2v")
        assert fake_client.queue.submitted == [
            {"model": "lucy-pro-t2v", "prompt": "A cat walking", "resolution": "720p"}
        ]

    @pytest.mark.asyncio
    async def test_size_and_options(self, adapter, fake_client):
        await adapter.create_video_job(
            "A cat walking", size="640x360", model_options={"seed": 7}
        )
        assert fake_client.queue.submitted[0]["resolution"] == "480p"
        assert fake_client.queue.submitted[0]["seed"] == 7

    @pytest.mark.asyncio
    async def test_explicit_resolution_wins(self, adapter, fake_client):
        await adapter.create_video_job(
            "A cat walking", size="640x360", model_options={"resolution": "720p"}
        )
        assert fake_client.queue.submitted[0]["resolution"] == "720p"

    @pytest.mark.asyncio
    async def test_invalid_explicit_resolution(self, adapter, fake_client):
        with pytest.raises(PromptValidationError) as exc_info:
            await adapter.create_video_job(
                "A cat walking", size="1280x720", model_options={"resolution": "1080p"}
            )
        assert exc_info.value.kind == ValidationErrorKind.INVALID_RESOLUTION
        assert fake_client.queue.submitted == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("prompt", [None, ""])
    async def test_prompt_required(self, adapter, fake_client, prompt):
        with pytest.raises(PromptValidationError, match="Prompt is required"):
            await adapter.create_video_job(prompt)
        assert fake_client.queue.submitted == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("key", ["prompt", "model"])
    async def test_reserved_option_rejected(self, adapter, fake_client, key):
        with pytest.raises(PromptValidationError, match="cannot override") as exc_info:
            await adapter.create_video_job("A cat walking", model_options={key: "x"})
        assert exc_info.value.kind == ValidationErrorKind.RESERVED_OPTION
        assert fake_client.queue.submitted == []

    @pytest.mark.asyncio
    async def test_too_long_prompt(self, adapter):
        with pytest.raises(PromptValidationError, match="Got: 1001"):
            await adapter.create_video_job("a" * 1001)


class TestStatusAndResult:
    @pytest.mark.asyncio
    async def test_status_echoes_job_id(self, adapter):
        job = await adapter.create_video_job("A cat walking")
        status = await adapter.get_video_status(job.job_id)
        assert status.job_id == job.job_id
        assert status.status == "completed"
        assert status.is_completed

    @pytest.mark.asyncio
    async def test_status_is_not_cached(self, adapter, fake_client):
        fake_client.queue.status_label = "processing"
        first = await adapter.get_video_status("job-123")
        fake_client.queue.status_label = "completed"
        second = await adapter.get_video_status("job-123")
        assert (first.status, second.status) == ("processing", "completed")
        assert not first.is_completed
        assert fake_client.queue.status_calls == ["job-123", "job-123"]

    @pytest.mark.asyncio
    async def test_unknown_status_passed_through(self, adapter, fake_client):
        fake_client.queue.status_label = "queued_for_gpu"
        status = await adapter.get_video_status("job-123")
        assert status.status == "queued_for_gpu"
        assert not status.is_completed
        assert not status.is_failed

    @pytest.mark.asyncio
    async def test_not_found_propagates(self, adapter, fake_client):
        missing = LookupError("job not found")
        fake_client.queue.error = missing
        with pytest.raises(LookupError) as exc_info:
            await adapter.get_video_status("nope")
        assert exc_info.value is missing

    @pytest.mark.asyncio
    async def test_video_url(self, adapter, fake_client):
        result = await adapter.get_video_url("job-123")
        assert result.job_id == "job-123"
        assert result.url.startswith("data:video/mp4;base64,")
        assert fake_client.queue.result_calls == ["job-123"]

    @pytest.mark.asyncio
    async def test_video_url_uses_backend_mime(self, adapter, fake_client):
        fake_client.queue.result_payload = MediaPayload(b"webm", "video/webm")
        result = await adapter.get_video_url("job-123")
        assert result.url == "data:video/webm;base64,d2VibQ=="

    @pytest.mark.asyncio
    async def test_video_url_defaults_mime(self, adapter, fake_client):
        fake_client.queue.result_payload = MediaPayload(b"", None)
        result = await adapter.get_video_url("job-123")
        assert result.url == "data:video/mp4;base64,"

    @pytest.mark.asyncio
    async def test_result_error_propagates(self, adapter, fake_client):
        fake_client.queue.error = RuntimeError("not ready")
        with pytest.raises(RuntimeError, match="not ready"):
            await adapter.get_video_url("job-123")
