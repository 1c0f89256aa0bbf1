from pathlib import Path

import pytest

from identicon.setup_directories import setup_output_directory, get_image_path

pytestmark = pytest.mark.unit


def test_setup_output_directory_creates_dir(tmp_path):
    out = setup_output_directory(tmp_path / "icons" / "nested")

    assert isinstance(out, Path)
    assert out.is_dir()
    assert out.is_absolute()


def test_setup_output_directory_is_idempotent(tmp_path):
    first = setup_output_directory(tmp_path)
    second = setup_output_directory(tmp_path)

    assert first == second


def test_setup_output_directory_defaults_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert setup_output_directory() == tmp_path.resolve()


def test_setup_output_directory_expands_user(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert setup_output_directory("~/icons") == (tmp_path / "icons").resolve()


def test_image_path_is_input_plus_png(tmp_path):
    assert get_image_path(tmp_path, "banana") == tmp_path / "banana.png"


def test_image_path_for_empty_input(tmp_path):
    assert get_image_path(tmp_path, "").name == ".png"


def test_image_path_keeps_unicode(tmp_path):
    assert get_image_path(tmp_path, "café").name == "café.png"


def test_image_path_from_bytes(tmp_path):
    assert get_image_path(tmp_path, b"banana") == tmp_path / "banana.png"
    assert get_image_path(tmp_path, bytearray(b"banana")) == tmp_path / "banana.png"


def test_image_path_is_not_sanitized(tmp_path):
    """Separators in the input address a subdirectory."""
    assert get_image_path(tmp_path, "a/b") == tmp_path / "a" / "b.png"


def test_image_path_accepts_str_dir():
    assert get_image_path("/tmp/icons", "x") == Path("/tmp/icons/x.png")
