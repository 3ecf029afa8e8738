"""Adapter factory: builds image or video adapters from configuration."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Type, Union

from decart_media.client import MediaService
from decart_media.config import DEFAULT_API_KEY_ENV, DecartConfig
from decart_media.models import MediaKind


class AdapterFactory:
    """Creates Decart adapters keyed by media kind."""

    _adapters: dict[str, Type[Any]] = {}

    @classmethod
    def _ensure_defaults(cls) -> None:
        if cls._adapters:
            return
        from decart_media.adapters.image import DecartImageAdapter
        from decart_media.adapters.video import DecartVideoAdapter

        cls._adapters = {
            MediaKind.IMAGE.value: DecartImageAdapter,
            MediaKind.VIDEO.value: DecartVideoAdapter,
        }

    @classmethod
    def register_adapter(cls, kind: str, adapter_class: Type[Any]) -> None:
        cls._ensure_defaults()
        cls._adapters[kind] = adapter_class

    @classmethod
    def create(
        cls,
        kind: Union[str, MediaKind],
        model: str,
        config: DecartConfig,
        client: Optional[MediaService] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> Any:
        cls._ensure_defaults()
        key = kind.value if isinstance(kind, MediaKind) else kind
        adapter_cls = cls._adapters.get(key)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown adapter kind: {kind}. "
                f"Available: {list(cls._adapters.keys())}"
            )
        return adapter_cls(config, model, client=client, environ=environ)

    @classmethod
    def create_from_dict(
        cls,
        config_dict: Mapping[str, Any],
        client: Optional[MediaService] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Build an adapter from ``{"kind", "model", "api_key", ...}``."""
        config = DecartConfig(
            api_key=config_dict.get("api_key"),
            api_key_env=config_dict.get("api_key_env", DEFAULT_API_KEY_ENV),
            base_url=config_dict.get("base_url"),
            timeout=config_dict.get("timeout", 300.0),
        )
        return cls.create(
            config_dict["kind"],
            config_dict["model"],
            config,
            client=client,
            environ=environ,
        )
