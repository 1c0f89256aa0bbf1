"""ParamConfig: Expert defaults for the identicon pipeline.

ALL tunable parameters must have defaults here. No runtime code should
define fallback values - this is the single source of truth for defaults.

Grid geometry (5x5 cells, 50 px, 250 px canvas) is part of the image
format and lives in identicon.constants, not here.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from identicon.schemas.base import IdenticonBaseModel


RGB = tuple[int, int, int]


# =============================================================================
# Nested Configuration Models
# =============================================================================

class HasherConfig(IdenticonBaseModel):
    """Digest strategy configuration."""
    algorithm: Literal["md5", "blake2b", "shake_128"] = "md5"

    @field_validator("algorithm", mode="before")
    @classmethod
    def normalize_algorithm(cls, v):
        """Normalize algorithm names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v


class RendererConfig(IdenticonBaseModel):
    """Raster backend configuration."""
    backend: Literal["pillow", "matplotlib"] = "pillow"
    background: RGB = (255, 255, 255)
    output_format: Literal["png"] = "png"

    @field_validator("background")
    @classmethod
    def check_background_range(cls, v):
        """Each component must be a byte."""
        if any(c < 0 or c > 255 for c in v):
            raise ValueError(f"background components must be in 0..255, got {v}")
        return v


class OutputConfig(IdenticonBaseModel):
    """Where generated images are written."""
    directory: str = Field(".", description="Directory for '<input>.png' files")
    overwrite: bool = True


class LoggingConfig(IdenticonBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: Optional[str] = None


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(IdenticonBaseModel):
    """Complete expert configuration with all defaults.

    Usage
    -----
    This config is NOT used directly by runtime code. It serves as the
    base layer in config resolution:

        internal_cfg = resolve_config(param_cfg, user_cfg, cli_cfg)

    Runtime code only sees InternalConfig.
    """

    hasher: HasherConfig = Field(default_factory=HasherConfig)
    renderer: RendererConfig = Field(default_factory=RendererConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
