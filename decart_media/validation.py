"""Prompt checks run before any request reaches the backend."""

from __future__ import annotations

from typing import Optional

from decart_media.errors import PromptValidationError, ValidationErrorKind

MAX_PROMPT_LENGTH = 1000

IMAGE_EMPTY_PROMPT_MESSAGE = "Prompt cannot be empty."
VIDEO_EMPTY_PROMPT_MESSAGE = "Prompt is required"


def validate_prompt(
    prompt: Optional[str],
    *,
    empty_message: str = IMAGE_EMPTY_PROMPT_MESSAGE,
) -> None:
    """Raise PromptValidationError if the prompt is missing, empty or too long."""
    if not prompt:
        raise PromptValidationError(ValidationErrorKind.EMPTY_PROMPT, empty_message)
    if len(prompt) > MAX_PROMPT_LENGTH:
        raise PromptValidationError(
            ValidationErrorKind.PROMPT_TOO_LONG,
            f"Prompt must be {MAX_PROMPT_LENGTH} characters or less. "
            f"Got: {len(prompt)}",
        )


def validate_image_prompt(prompt: Optional[str]) -> None:
    validate_prompt(prompt, empty_message=IMAGE_EMPTY_PROMPT_MESSAGE)


def validate_video_prompt(prompt: Optional[str]) -> None:
    validate_prompt(prompt, empty_message=VIDEO_EMPTY_PROMPT_MESSAGE)
