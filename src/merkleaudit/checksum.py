"""
Checksum Oracles

A checksum oracle is any deterministic function

    checksum(is_leaf: bool, data: bytes) -> bytes

The tree calls it with is_leaf=True for raw blocks and is_leaf=False for the
concatenation of two child digests. Production oracles must be domain
separated: the role tag is absorbed before the data, so a leaf digest and a
branch digest over the same bytes are unrelated.

Only the oracles registered in CHECKSUM_FUNCS are reachable through
get_checksum_func() and build_tree(). The insecure identity oracle used to
inspect tree shapes lives in merkleaudit.testing.
"""

from __future__ import annotations
import hashlib
from typing import Callable, Dict

from .errors import UnknownChecksumError
from .tags import tag_bytes, tag_for


ChecksumFunc = Callable[[bool, bytes], bytes]

CHECKSUM_SIZE = 32
DEFAULT_CHECKSUM = "sha256d"


def sha256_double_hash(is_leaf: bool, data: bytes) -> bytes:
    """SHA256(SHA256(tag ‖ data)), tag = 0x00 for leaves, 0x01 for branches."""
    inner = hashlib.sha256()
    inner.update(tag_bytes(tag_for(is_leaf)))
    inner.update(data)
    return hashlib.sha256(inner.digest()).digest()


def shake256_hash(is_leaf: bool, data: bytes) -> bytes:
    """SHAKE256(tag ‖ data) squeezed to CHECKSUM_SIZE bytes."""
    h = hashlib.shake_256()
    h.update(tag_bytes(tag_for(is_leaf)))
    h.update(data)
    return h.digest(CHECKSUM_SIZE)


CHECKSUM_FUNCS: Dict[str, ChecksumFunc] = {
    "sha256d": sha256_double_hash,
    "shake256": shake256_hash,
}


def get_checksum_func(name: str = DEFAULT_CHECKSUM) -> ChecksumFunc:
    """
    Look up a production checksum oracle by name.

    Raises:
        UnknownChecksumError: if the name is not registered
    """
    try:
        return CHECKSUM_FUNCS[name]
    except KeyError:
        raise UnknownChecksumError(name, CHECKSUM_FUNCS) from None
