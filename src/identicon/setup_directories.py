"""
Output location for generated identicons.

Images are written flat into one directory, named after their input:
"banana" -> <output_dir>/banana.png
"""

import os
from pathlib import Path
from typing import Union


def setup_output_directory(base_output_dir: Union[str, Path] = ".") -> Path:
    """
    Resolve and create the image output directory.

    Parameters
    ----------
    base_output_dir : str or Path, optional
        Output directory. "~" is expanded. Defaults to the current
        working directory.

    Returns
    -------
    Path
        Absolute output directory (created if missing).
    """
    output_dir = Path(base_output_dir).expanduser().resolve()
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


def get_image_path(output_dir: Union[str, Path], value: Union[str, bytes]) -> Path:
    """
    Get the file path for the identicon of `value`.

    The input is used verbatim as the file stem. It is not sanitized: an
    input containing a path separator addresses a subdirectory, and the
    write fails if that does not exist.

    Parameters
    ----------
    output_dir : str or Path
        Directory from setup_output_directory()
    value : str or bytes
        Original pipeline input. Bytes are decoded with os.fsdecode.

    Returns
    -------
    Path
        Full path: <output_dir>/<value>.png

    Example
    -------
    >>> get_image_path(Path('/tmp/icons'), 'banana')
    PosixPath('/tmp/icons/banana.png')
    """
    name = os.fsdecode(bytes(value)) if isinstance(value, (bytes, bytearray)) else str(value)
    return Path(output_dir) / f"{name}.png"
