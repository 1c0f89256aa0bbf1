"""UserConfig: Forgiving, minimal user-facing configuration.

This schema accepts user inputs with aliases for common naming patterns
(e.g., OUTPUT_DIR -> output_dir, LOG_LEVEL -> log_level).

UserConfig is intentionally minimal - users only specify what they want
to override from the expert defaults.
"""

from typing import Optional
from pydantic import Field, field_validator
from identicon.schemas.base import IdenticonBaseModel


class UserHasherConfig(IdenticonBaseModel):
    """User-facing hasher config."""
    algorithm: Optional[str] = None

    @field_validator("algorithm", mode="before")
    @classmethod
    def normalize_algorithm(cls, v):
        """Normalize algorithm names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v


class UserRendererConfig(IdenticonBaseModel):
    """User-facing renderer config."""
    backend: Optional[str] = None
    background: Optional[tuple[int, int, int]] = None


class UserOutputConfig(IdenticonBaseModel):
    """User-facing output config."""
    directory: Optional[str] = None
    overwrite: Optional[bool] = None


class UserLoggingConfig(IdenticonBaseModel):
    """User-facing logging config."""
    level: Optional[str] = None
    log_file: Optional[str] = None

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept 'debug' as well as 'DEBUG'."""
        if isinstance(v, str):
            return v.upper().strip()
        return v


class UserConfig(IdenticonBaseModel):
    """User-facing configuration schema.

    Minimal, forgiving, and uses common aliases. Users only specify
    what they want to override from ParamConfig defaults.

    Usage
    -----
        user_cfg = UserConfig(
            OUTPUT_DIR="~/identicons",
            BACKEND="matplotlib",
        )

        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    # Flat settings
    algorithm: Optional[str] = Field(None, alias="ALGORITHM")
    output_dir: Optional[str] = Field(None, alias="OUTPUT_DIR")
    overwrite: Optional[bool] = Field(None, alias="OVERWRITE")
    backend: Optional[str] = Field(None, alias="BACKEND")
    background: Optional[tuple[int, int, int]] = Field(None, alias="BACKGROUND")
    log_level: Optional[str] = Field(None, alias="LOG_LEVEL")
    log_file: Optional[str] = Field(None, alias="LOG_FILE")

    # Nested overrides (advanced users)
    hasher: Optional[UserHasherConfig] = None
    renderer: Optional[UserRendererConfig] = None
    output: Optional[UserOutputConfig] = None
    logging: Optional[UserLoggingConfig] = None

    model_config = IdenticonBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator("algorithm", "backend", mode="before")
    @classmethod
    def normalize_names(cls, v):
        """Normalize algorithm and backend names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept 'debug' as well as 'DEBUG'."""
        if isinstance(v, str):
            return v.upper().strip()
        return v

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.

        Flat keys are applied first; explicit nested sections win over them.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        # Hasher section
        hasher = {}
        if self.algorithm is not None:
            hasher["algorithm"] = self.algorithm
        if self.hasher is not None:
            hasher.update(self.hasher.model_dump(exclude_none=True))
        if hasher:
            overrides["hasher"] = hasher

        # Renderer section
        renderer = {}
        if self.backend is not None:
            renderer["backend"] = self.backend
        if self.background is not None:
            renderer["background"] = self.background
        if self.renderer is not None:
            renderer.update(self.renderer.model_dump(exclude_none=True))
        if renderer:
            overrides["renderer"] = renderer

        # Output section
        output = {}
        if self.output_dir is not None:
            output["directory"] = str(self.output_dir)
        if self.overwrite is not None:
            output["overwrite"] = self.overwrite
        if self.output is not None:
            output.update(self.output.model_dump(exclude_none=True))
        if output:
            overrides["output"] = output

        # Logging section
        logging_cfg = {}
        if self.log_level is not None:
            logging_cfg["level"] = self.log_level
        if self.log_file is not None:
            logging_cfg["log_file"] = self.log_file
        if self.logging is not None:
            logging_cfg.update(self.logging.model_dump(exclude_none=True))
        if logging_cfg:
            overrides["logging"] = logging_cfg

        return overrides
