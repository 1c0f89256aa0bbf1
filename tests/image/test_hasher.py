import hashlib

import pytest

from identicon.image.hasher import Hasher, DIGEST_ALGORITHMS, to_bytes
from tests.helpers.fake_digest import EMPTY_MD5

pytestmark = pytest.mark.unit


def test_default_algorithm_is_md5():
    hasher = Hasher()
    assert hasher.algorithm == "md5"


def test_empty_string_digest():
    image = Hasher().hash_input("")
    assert image.digest_bytes == EMPTY_MD5


def test_banana_matches_md5():
    image = Hasher().hash_input("banana")
    assert image.digest_bytes == tuple(hashlib.md5(b"banana").digest())


def test_str_and_utf8_bytes_hash_the_same():
    hasher = Hasher()
    assert hasher.hash_input("héllo") == hasher.hash_input("héllo".encode("utf-8"))


def test_hash_is_deterministic():
    hasher = Hasher()
    assert hasher.hash_input("banana") == hasher.hash_input("banana")


@pytest.mark.parametrize("algorithm", sorted(DIGEST_ALGORITHMS))
@pytest.mark.parametrize("value", ["", "a", "banana", "x" * 10_000])
def test_every_algorithm_yields_16_bytes(algorithm, value):
    image = Hasher(algorithm).hash_input(value)
    assert len(image.digest_bytes) == 16
    assert all(0 <= b <= 255 for b in image.digest_bytes)


def test_algorithms_differ():
    digests = {Hasher(name).hash_input("banana").digest_bytes for name in DIGEST_ALGORITHMS}
    assert len(digests) == len(DIGEST_ALGORITHMS)


def test_unknown_algorithm_raises():
    with pytest.raises(ValueError, match="Unknown digest algorithm"):
        Hasher("sha1")


def test_custom_digest_func():
    hasher = Hasher(digest_func=lambda data: bytes(range(16)))
    image = hasher.hash_input("anything")
    assert image.digest_bytes == tuple(range(16))


def test_hash_input_leaves_derived_fields_empty():
    image = Hasher().hash_input("banana")
    assert image.color is None
    assert image.grid is None
    assert image.pixel_map is None


def test_to_bytes_rejects_other_types():
    with pytest.raises(TypeError, match="str or bytes"):
        to_bytes(42)


def test_to_bytes_accepts_bytearray():
    assert to_bytes(bytearray(b"ab")) == b"ab"
