"""Core identicon execution logic.

This module contains the actual runner, separated from argument parsing.
scripts/run_identicon.py and the ``identicon`` console script are thin
wrappers around main().
"""

import sys
import json
import argparse
import logging
from pathlib import Path
from typing import Optional, Dict, Any, List, Sequence

from identicon.pipeline.orchestrator import IdenticonPipeline, setup_logging
from identicon.schemas import (
    resolve_config,
    load_user_config_dict,
    ParamConfig,
    UserConfig,
    CLIConfig,
)


logger = logging.getLogger(__name__)


def run_identicon(
    inputs: Sequence[str],
    user_config_path: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None,
    verbose: bool = False
) -> List[Path]:
    """Generate one identicon PNG per input.

    1. Loads and resolves configuration (Param < User < CLI)
    2. Configures logging
    3. Runs the pipeline over all inputs, in order

    Parameters
    ----------
    inputs : sequence of str
        Strings to turn into identicons. Each is written to
        ``<output_dir>/<input>.png``.

    user_config_path : str, optional
        Path to user config file (Python file with CONFIG dict).

    cli_args : dict, optional
        CLI argument overrides. Keys: output_dir, algorithm, backend,
        log_level. All optional; None values are ignored.

    verbose : bool, optional
        If True, enable DEBUG logging and print the resolved config.

    Returns
    -------
    list of Path
        Written image paths, in input order.

    Raises
    ------
    FileNotFoundError
        If user_config_path does not exist.
    ValidationError
        If configuration validation fails.
    OSError
        If an image cannot be written (remaining inputs are skipped).
    """
    param_cfg = ParamConfig()  # Expert defaults

    user_cfg = None
    if user_config_path:
        user_cfg = UserConfig.model_validate(load_user_config_dict(user_config_path))

    cli_args = dict(cli_args or {})
    if verbose and "log_level" not in cli_args:
        cli_args["log_level"] = "DEBUG"

    # Filter None values
    cli_dict = {k: v for k, v in cli_args.items() if v is not None}
    cli_cfg = CLIConfig.model_validate(cli_dict) if cli_dict else CLIConfig()

    config = resolve_config(param_cfg, user_cfg, cli_cfg)
    setup_logging(config)

    if verbose:
        print("\nFull Internal Configuration:")
        print(json.dumps(config.model_dump(), indent=2))
        print('=' * 60)

    pipeline = IdenticonPipeline(config)
    return pipeline.run_many(inputs)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="identicon",
        description="Generate 250x250 identicon PNGs named '<input>.png'",
    )
    parser.add_argument("inputs", nargs="+", help="Input string(s) to hash")
    parser.add_argument("-c", "--config", help="Path to user config file")
    parser.add_argument("--output-dir", help="Directory for generated images")
    parser.add_argument("--algorithm", choices=["md5", "blake2b", "shake_128"],
                        help="Override digest algorithm")
    parser.add_argument("--backend", choices=["pillow", "matplotlib"],
                        help="Override renderer backend")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    cli_args = {
        "output_dir": args.output_dir,
        "algorithm": args.algorithm,
        "backend": args.backend,
    }

    try:
        paths = run_identicon(
            args.inputs,
            user_config_path=args.config,
            cli_args=cli_args,
            verbose=args.verbose,
        )
    except OSError as e:
        logger.error("Identicon generation failed: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1

    for path in paths:
        print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
