"""
Audit Proofs

A proof is the list of sibling digests met while walking from a leaf to the
root, each with the side the sibling sits on. It holds no reference to the
tree that produced it and can be checked against any published root.
"""

from __future__ import annotations
import hmac
import logging
from dataclasses import dataclass
from typing import Any, Callable, Tuple

from .checksum import ChecksumFunc
from .render import render_proof

logger = logging.getLogger(__name__)

_BYTES_TYPES = (bytes, bytearray)


@dataclass(frozen=True)
class ProofPart:
    """
    One step of an audit path.

    Attributes:
        checksum: Digest of the sibling at this level
        is_right: True if the sibling sits to the right of the path node
    """
    checksum: bytes
    is_right: bool


@dataclass(frozen=True)
class Proof:
    """Inclusion proof for a leaf digest, parts ordered leaf to root."""
    target: bytes
    parts: Tuple[ProofPart, ...] = ()

    def __post_init__(self):
        if isinstance(self.parts, list):
            object.__setattr__(self, 'parts', tuple(self.parts))

    def equals(self, other: Any) -> bool:
        """Structural, order-sensitive comparison."""
        return isinstance(other, Proof) and self == other

    def verify(self, root_checksum: bytes, checksum_func: ChecksumFunc) -> bool:
        """Check this proof against a root digest. Never raises."""
        if not is_well_formed(self) or not isinstance(root_checksum, _BYTES_TYPES):
            logger.debug("Rejecting malformed proof")
            return False

        if hmac.compare_digest(compute_root(self, checksum_func), bytes(root_checksum)):
            return True

        logger.debug("Proof for %s does not reach root %s",
                     bytes(self.target).hex()[:16], bytes(root_checksum).hex()[:16])
        return False

    def to_string(
        self,
        projector: Callable[[bytes], str],
        checksum_func: ChecksumFunc
    ) -> str:
        """Describe the route from the target leaf to the root."""
        return render_proof(self, projector, checksum_func)


def is_well_formed(proof: Any) -> bool:
    """True if proof has the shape of a Proof with bytes digests and bool sides."""
    if not isinstance(proof, Proof):
        return False
    if not isinstance(proof.target, _BYTES_TYPES):
        return False
    if not isinstance(proof.parts, (tuple, list)):
        return False
    for part in proof.parts:
        if not isinstance(part, ProofPart):
            return False
        if not isinstance(part.checksum, _BYTES_TYPES) or not isinstance(part.is_right, bool):
            return False
    return True


def compute_root(proof: Proof, checksum_func: ChecksumFunc) -> bytes:
    """Fold the proof parts over the target and return the implied root."""
    current = bytes(proof.target)

    for part in proof.parts:
        sibling = bytes(part.checksum)
        if part.is_right:
            current = checksum_func(False, current + sibling)
        else:
            current = checksum_func(False, sibling + current)

    return current
