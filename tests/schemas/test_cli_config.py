"""Tests for CLIConfig schema and conversion to internal overrides."""

import pytest
from pydantic import ValidationError

from identicon.schemas.cli import CLIConfig


def test_cli_to_internal_overrides_with_output_dir():
    """Test CLI config conversion with output directory override."""
    cli = CLIConfig(output_dir="/tmp/icons")
    overrides = cli.to_internal_overrides()
    assert overrides["output"]["directory"] == "/tmp/icons"


def test_cli_to_internal_overrides_with_algorithm():
    """Test CLI config conversion with digest algorithm override."""
    cli = CLIConfig(algorithm="blake2b")
    overrides = cli.to_internal_overrides()
    assert overrides["hasher"]["algorithm"] == "blake2b"


def test_cli_to_internal_overrides_with_backend():
    """Test CLI config conversion with renderer backend override."""
    cli = CLIConfig(backend="matplotlib")
    overrides = cli.to_internal_overrides()
    assert overrides["renderer"]["backend"] == "matplotlib"


def test_cli_to_internal_overrides_with_log_level():
    """Test CLI config conversion with log_level override."""
    cli = CLIConfig(log_level="DEBUG")
    overrides = cli.to_internal_overrides()
    assert overrides["logging"]["level"] == "DEBUG"


def test_cli_to_internal_overrides_with_multiple_fields():
    """Test CLI config conversion with multiple overrides."""
    cli = CLIConfig(output_dir="out", algorithm="shake_128", log_level="INFO")
    overrides = cli.to_internal_overrides()
    assert overrides == {
        "output": {"directory": "out"},
        "hasher": {"algorithm": "shake_128"},
        "logging": {"level": "INFO"},
    }


def test_cli_to_internal_overrides_empty():
    """Test CLI config conversion with no overrides."""
    cli = CLIConfig()
    overrides = cli.to_internal_overrides()
    assert overrides == {}


@pytest.mark.parametrize("field, value", [
    ("algorithm", "sha256"),
    ("backend", "svg"),
    ("log_level", "VERBOSE"),
])
def test_cli_rejects_unknown_choices(field, value):
    with pytest.raises(ValidationError):
        CLIConfig(**{field: value})


def test_cli_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        CLIConfig(grid_size=7)
