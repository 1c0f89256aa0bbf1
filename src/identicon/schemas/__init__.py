"""Pydantic configuration schemas for the identicon pipeline.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
load_user_config_dict : function
    Read a CONFIG dict from a Python config file
InternalConfig : class
    Fully validated, authoritative runtime configuration
ParamConfig : class
    Expert defaults (complete)
UserConfig : class
    User-facing configuration (forgiving, minimal)
CLIConfig : class
    Command-line operational overrides
"""

from identicon.schemas.resolve import resolve_config
from identicon.schemas.loader import load_user_config_dict
from identicon.schemas.internal import InternalConfig
from identicon.schemas.param import ParamConfig
from identicon.schemas.user import UserConfig
from identicon.schemas.cli import CLIConfig

__all__ = [
    'resolve_config',
    'load_user_config_dict',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
    'CLIConfig',
]
