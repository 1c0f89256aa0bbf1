import hashlib
import logging
from typing import Callable, Union

from identicon.constants import DIGEST_SIZE
from identicon.image.descriptor import ImageDescriptor

logger = logging.getLogger(__name__)


# Every strategy returns exactly DIGEST_SIZE bytes
DIGEST_ALGORITHMS: dict[str, Callable[[bytes], bytes]] = {
    "md5": lambda data: hashlib.md5(data).digest(),
    "blake2b": lambda data: hashlib.blake2b(data, digest_size=DIGEST_SIZE).digest(),
    "shake_128": lambda data: hashlib.shake_128(data).digest(DIGEST_SIZE),
}


def to_bytes(value: Union[str, bytes]) -> bytes:
    """Encode str input as UTF-8; pass bytes through."""
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"Identicon input must be str or bytes, got {type(value).__name__}")


class Hasher:
    """Config-driven digest strategy.

    The digest is used only as a deterministic source of bytes, not for
    integrity, so MD5 is the default.
    """

    def __init__(self, algorithm: str = "md5", digest_func: Callable[[bytes], bytes] = None):
        """Select the digest strategy.

        Parameters
        ----------
        algorithm : str
            Name of a registered strategy ("md5", "blake2b", "shake_128").
            Ignored when digest_func is given.
        digest_func : callable, optional
            Custom ``bytes -> bytes`` digest. Lets tests (or callers) swap in
            another source; its output is checked by the hash contract.
        """
        if digest_func is None:
            if algorithm not in DIGEST_ALGORITHMS:
                raise ValueError(f"Unknown digest algorithm: {algorithm}")
            digest_func = DIGEST_ALGORITHMS[algorithm]
        else:
            algorithm = getattr(digest_func, "__name__", "custom")

        self.algorithm = algorithm
        self.digest_func = digest_func
        logger.debug("Hasher initialized: algorithm=%s", self.algorithm)

    def digest(self, data: bytes) -> bytes:
        return self.digest_func(data)

    def hash_input(self, value: Union[str, bytes]) -> ImageDescriptor:
        """Hash the input into a fresh descriptor holding the digest bytes."""
        digest = self.digest(to_bytes(value))
        return ImageDescriptor(digest_bytes=tuple(digest))
