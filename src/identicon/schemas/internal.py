"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully validated,
normalized, and frozen. Runtime modules read fields directly; no .get()
calls and no fallback defaults.
"""

from typing import Literal, Optional
from pydantic import ConfigDict, field_validator
from identicon.schemas.base import IdenticonBaseModel


class InternalHasherConfig(IdenticonBaseModel):
    """Runtime digest configuration."""
    algorithm: Literal["md5", "blake2b", "shake_128"]


class InternalRendererConfig(IdenticonBaseModel):
    """Runtime renderer configuration."""
    backend: Literal["pillow", "matplotlib"]
    background: tuple[int, int, int]
    output_format: Literal["png"]

    @field_validator("background")
    @classmethod
    def check_background_range(cls, v):
        if any(c < 0 or c > 255 for c in v):
            raise ValueError(f"background components must be in 0..255, got {v}")
        return v


class InternalOutputConfig(IdenticonBaseModel):
    """Runtime output configuration."""
    directory: str
    overwrite: bool


class InternalLoggingConfig(IdenticonBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    log_file: Optional[str]


class InternalConfig(IdenticonBaseModel):
    """Authoritative runtime configuration.

    Usage
    -----
    Runtime modules receive InternalConfig and access fields directly:

        def __init__(self, config: InternalConfig):
            self.hasher = Hasher(config.hasher.algorithm)  # NOT .get()
    """

    hasher: InternalHasherConfig
    renderer: InternalRendererConfig
    output: InternalOutputConfig
    logging: InternalLoggingConfig

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,  # Immutable after construction
    )
