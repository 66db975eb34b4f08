"""
Exceptions raised by merkleaudit.

Verification never raises; these cover construction, oracle selection and
proof lookup.
"""

from __future__ import annotations


class MerkleTreeError(Exception):
    """Base class for all merkleaudit errors."""


class EmptyTreeError(MerkleTreeError, ValueError):
    """A tree was requested over zero blocks."""

    def __init__(self, message: str = "Cannot build empty Merkle tree"):
        super().__init__(message)


class ProofNotFoundError(MerkleTreeError, LookupError):
    """No leaf in the tree carries the requested checksum."""

    def __init__(self, target: bytes):
        self.target = target
        super().__init__(f"No leaf with checksum {target.hex()[:16]}... in tree")


class UnknownChecksumError(MerkleTreeError, ValueError):
    """A checksum oracle name is not registered."""

    def __init__(self, name: str, known):
        self.name = name
        super().__init__(
            f"Unknown checksum algorithm: {name!r} (known: {', '.join(sorted(known))})"
        )
