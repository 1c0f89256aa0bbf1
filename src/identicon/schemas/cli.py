"""CLIConfig: Command-line operational overrides.

Minimal configuration for parameters that commonly change between runs:
output directory, digest algorithm, renderer backend, verbosity.

This schema handles command-line arguments parsed by argparse.
"""

from typing import Literal, Optional
from identicon.schemas.base import IdenticonBaseModel


class CLIConfig(IdenticonBaseModel):
    """Command-line configuration overrides.

    Highest priority in config resolution.

    Usage
    -----
        cli_cfg = CLIConfig(output_dir="/tmp/icons", log_level="DEBUG")
        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    output_dir: Optional[str] = None
    algorithm: Optional[Literal["md5", "blake2b", "shake_128"]] = None
    backend: Optional[Literal["pillow", "matplotlib"]] = None
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None

    def to_internal_overrides(self) -> dict:
        """Convert CLI config to internal config structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        if self.output_dir is not None:
            overrides["output"] = {"directory": str(self.output_dir)}

        if self.algorithm is not None:
            overrides["hasher"] = {"algorithm": self.algorithm}

        if self.backend is not None:
            overrides["renderer"] = {"backend": self.backend}

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides
