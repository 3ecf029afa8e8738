"""Error types raised locally by the Decart adapters.

Errors raised by the remote service are never wrapped; they reach the caller
exactly as the client raised them.
"""

from __future__ import annotations

from enum import Enum


class ValidationErrorKind(str, Enum):
    EMPTY_PROMPT = "empty_prompt"
    PROMPT_TOO_LONG = "prompt_too_long"
    INVALID_RESOLUTION = "invalid_resolution"
    RESERVED_OPTION = "reserved_option"


class ConfigErrorKind(str, Enum):
    MISSING_API_KEY = "missing_api_key"


class DecartError(Exception):
    """Base class for errors raised before any request is sent."""

    def __init__(self, kind: Enum, message: str) -> None:
        self.kind = kind
        self.message = message
        super().__init__(message)


class PromptValidationError(DecartError, ValueError):
    """A generation request failed pre-flight validation."""

    def __init__(self, kind: ValidationErrorKind, message: str) -> None:
        super().__init__(kind, message)


class ConfigError(DecartError):
    """Adapter configuration is incomplete."""

    def __init__(self, kind: ConfigErrorKind, message: str) -> None:
        super().__init__(kind, message)
