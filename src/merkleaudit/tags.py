"""
Domain Tags for Merkle Tree Hashing

Leaf and branch digests are computed under different tags so that a leaf
can never be reinterpreted as the concatenation of two child digests.
"""

from enum import IntEnum


class NodeTag(IntEnum):
    """Domain separation tags for tree nodes."""

    LEAF = 0x00        # Digest of an original data block
    BRANCH = 0x01      # Digest of two concatenated child digests


def tag_bytes(tag: NodeTag) -> bytes:
    """Convert tag to canonical bytes (one byte, prefixed to hashed data)."""
    return tag.to_bytes(1, 'big')


def tag_for(is_leaf: bool) -> NodeTag:
    """Select the tag for a node role."""
    return NodeTag.LEAF if is_leaf else NodeTag.BRANCH
