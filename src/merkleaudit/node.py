"""
Tree Nodes

A node is a closed tagged union: either a LEAF wrapping the digest of a
block, or a BRANCH wrapping the digest of its two children. Both variants
share one dataclass so the pairing loop never needs to know which kind it
is combining.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class NodeKind(Enum):
    """Node variant."""
    LEAF = "L"
    BRANCH = "B"


@dataclass(frozen=True, eq=False)
class Node:
    """
    One position in the tree.

    Attributes:
        kind: LEAF or BRANCH
        checksum: Cached digest, computed once at construction
        left: Left child (branches only)
        right: Right child (branches only)
        duplicate: True if this position was added to pad an odd row
    """
    kind: NodeKind
    checksum: bytes
    left: Optional[Node] = None
    right: Optional[Node] = None
    duplicate: bool = False

    @classmethod
    def leaf(cls, checksum: bytes) -> Node:
        return cls(NodeKind.LEAF, checksum)

    @classmethod
    def branch(cls, checksum: bytes, left: Node, right: Node) -> Node:
        return cls(NodeKind.BRANCH, checksum, left, right)

    @property
    def is_leaf(self) -> bool:
        return self.kind is NodeKind.LEAF

    def duplicate_of(self) -> Node:
        """
        Copy this node into a new, distinct position.

        The copy keeps the kind and checksum. A branch's subtree is copied
        as well, so no child is ever owned by two parents.
        """
        if self.is_leaf:
            return Node(NodeKind.LEAF, self.checksum, duplicate=True)
        return Node(
            NodeKind.BRANCH,
            self.checksum,
            self.left.duplicate_of(),
            self.right.duplicate_of(),
            duplicate=True,
        )
