"""Decoder configuration for flexpolyline."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from flexpolyline._constants import DEFAULT_MAX_VARINT_BITS
from flexpolyline.exceptions import FlexPolylineConfigError


def _env_int(env_key: str) -> int | None:
    value = os.environ.get(env_key)
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError as exc:
        raise FlexPolylineConfigError(f"{env_key} must be an integer, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class DecoderConfig:
    """Decoder configuration.

    Parameters
    ----------
    max_varint_bits : int
        Maximum width of a single varint. Longer continuation runs are
        rejected as invalid encoding instead of overflowing. Defaults to 64.
    log_preview_chars : int
        Number of input characters shown in debug log messages.
    """

    max_varint_bits: int = DEFAULT_MAX_VARINT_BITS
    log_preview_chars: int = 64

    def __post_init__(self) -> None:
        if self.max_varint_bits <= 0:
            raise FlexPolylineConfigError(f"max_varint_bits must be positive, got {self.max_varint_bits}")
        if self.log_preview_chars <= 0:
            raise FlexPolylineConfigError(f"log_preview_chars must be positive, got {self.log_preview_chars}")

    @classmethod
    def from_env(cls, **overrides: Any) -> DecoderConfig:
        """Create configuration from environment variables.

        Reads ``FLEXPOLYLINE_MAX_VARINT_BITS`` and
        ``FLEXPOLYLINE_LOG_PREVIEW_CHARS``. Explicit keyword arguments
        override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        DecoderConfig
            Populated configuration.
        """
        _ENV_CONFIG_MAP = {
            "FLEXPOLYLINE_MAX_VARINT_BITS": "max_varint_bits",
            "FLEXPOLYLINE_LOG_PREVIEW_CHARS": "log_preview_chars",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            if field_name in overrides:
                continue
            val = _env_int(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
