"""
Test-Only Helpers

INSECURE: the identity oracle below has no domain separation and no
collision resistance. It exists so tree shapes can be read as plain strings
in tests and must never back a production tree. No module of merkleaudit
imports this one; production trees go through build_tree().
"""

from __future__ import annotations
from typing import Sequence

from .tree import MerkleTree


def identity_hash_for_test(is_leaf: bool, data: bytes) -> bytes:
    """Return data unchanged; branches become the concatenation of children."""
    return bytes(data)


def new_tree_for_test(blocks: Sequence[bytes]) -> MerkleTree:
    """Build a tree whose digests are the literal block bytes."""
    return MerkleTree(identity_hash_for_test, blocks)


def printable(checksum: bytes) -> str:
    """Projector keeping only printable ASCII bytes."""
    return bytes(c for c in checksum if 31 < c < 128).decode('ascii')
