"""Write encoded images to disk.

Bytes go to a temporary file beside the target, which is then renamed
over it. A failed write leaves neither a partial image nor a damaged
previous one. There is no retry: any OSError (permission denied,
invalid path, disk full, existing file with overwrite disabled) reaches
the caller unchanged.
"""

import errno
import logging
import os
import tempfile
from pathlib import Path
from typing import Union

__all__ = ['FilePersister']

logger = logging.getLogger(__name__)

# Mode of a file created by open() under the usual 022 umask
IMAGE_FILE_MODE = 0o644


class FilePersister:
    """Persists image bytes to a path."""

    def __init__(self, overwrite: bool = True):
        """
        Parameters
        ----------
        overwrite : bool, optional
            If False, refuse to replace an existing file (FileExistsError).
        """
        self.overwrite = overwrite

    def persist(self, path: Union[str, Path], data: bytes) -> Path:
        """Write `data` to `path` and return the path written."""
        path = Path(path)
        if not self.overwrite and path.exists():
            raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), str(path))

        tmp = tempfile.NamedTemporaryFile(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
        )
        try:
            with tmp:
                tmp.write(data)
            os.chmod(tmp.name, IMAGE_FILE_MODE)
            os.replace(tmp.name, path)
        except BaseException:
            Path(tmp.name).unlink(missing_ok=True)
            raise

        logger.info("Image saved: %s (%d bytes)", path, len(data))
        return path
