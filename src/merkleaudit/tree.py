"""
Merkle Tree

Binary hash tree over an ordered list of blocks, built bottom-up row by row.
Odd rows are padded by duplicating their last node before pairing, so the
tree stays strictly binary for any leaf count.

Properties:
- Deterministic construction
- O(n) construction, O(log n) proof generation and verification
- Immutable once built; safe for concurrent readers
- Proofs are created for leaves only
"""

from __future__ import annotations
import logging
from typing import Callable, List, Sequence, Tuple

from .checksum import ChecksumFunc, DEFAULT_CHECKSUM, get_checksum_func
from .errors import EmptyTreeError, ProofNotFoundError
from .node import Node
from .proof import Proof, ProofPart
from .render import render_tree

logger = logging.getLogger(__name__)

Row = Tuple[Node, ...]


class MerkleTree:
    """
    Binary Merkle tree with an injected checksum oracle.

    rows[0] is the leaf row, rows[-1] holds only the root. Every row below
    the root has even length; padding nodes are flagged Node.duplicate.
    """

    def __init__(self, checksum_func: ChecksumFunc, blocks: Sequence[bytes]):
        """
        Build a Merkle tree from raw blocks.

        Args:
            checksum_func: Oracle used for leaves and branches
            blocks: Ordered, non-empty list of byte blocks

        Raises:
            EmptyTreeError: if blocks is empty
            TypeError: if a block is not bytes-like
        """
        if not blocks:
            raise EmptyTreeError()

        self._checksum_func = checksum_func
        self._leaf_count = len(blocks)

        leaves = tuple(Node.leaf(checksum_func(True, _as_bytes(block))) for block in blocks)
        self._rows: Tuple[Row, ...] = self._build_rows(leaves)

        logger.debug("Built Merkle tree: %d leaves, %d rows",
                     self._leaf_count, len(self._rows))

    def _build_rows(self, row: Row) -> Tuple[Row, ...]:
        """Pair rows upward until a single root remains."""
        rows: List[Row] = []

        while len(row) > 1:
            if len(row) % 2 == 1:
                logger.debug("Padding row %d (%d nodes) with a duplicate", len(rows), len(row))
                row = row + (row[-1].duplicate_of(),)
            rows.append(row)

            row = tuple(
                self._join(row[i], row[i + 1]) for i in range(0, len(row), 2)
            )

        rows.append(row)
        return tuple(rows)

    def _join(self, left: Node, right: Node) -> Node:
        checksum = self._checksum_func(False, left.checksum + right.checksum)
        return Node.branch(checksum, left, right)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def checksum_func(self) -> ChecksumFunc:
        return self._checksum_func

    @property
    def rows(self) -> Tuple[Row, ...]:
        return self._rows

    @property
    def root(self) -> Node:
        return self._rows[-1][0]

    @property
    def leaf_count(self) -> int:
        """Number of original blocks (padding excluded)."""
        return self._leaf_count

    @property
    def height(self) -> int:
        """Number of rows, leaf row included."""
        return len(self._rows)

    def root_checksum(self) -> bytes:
        return self.root.checksum

    def leaf_checksum(self, block: bytes) -> bytes:
        """Leaf digest of a raw block under this tree's oracle."""
        return self._checksum_func(True, _as_bytes(block))

    # -------------------------------------------------------------------------
    # Proofs
    # -------------------------------------------------------------------------

    def create_proof(self, target: bytes) -> Proof:
        """
        Generate the audit path for the leaf whose checksum equals target.

        Only the leaf row is searched; internal nodes cannot be proven.
        If several leaves share the digest, the leftmost one is used.

        Raises:
            ProofNotFoundError: if no leaf has that checksum
        """
        target = _as_bytes(target)
        index = self._find_leaf(target)

        parts: List[ProofPart] = []
        for row in self._rows[:-1]:  # Exclude root row
            sibling_index = index - 1 if index % 2 == 1 else index + 1
            parts.append(ProofPart(
                checksum=row[sibling_index].checksum,
                is_right=sibling_index > index,
            ))
            index //= 2

        logger.debug("Created proof with %d parts for %s", len(parts), target.hex()[:16])
        return Proof(target=target, parts=tuple(parts))

    def _find_leaf(self, target: bytes) -> int:
        for index, node in enumerate(self._rows[0]):
            if node.checksum == target:
                return index
        raise ProofNotFoundError(target)

    def verify_proof(self, proof: Proof) -> bool:
        """Check that proof leads to this tree's root. Never raises."""
        if not isinstance(proof, Proof):
            return False
        return proof.verify(self.root_checksum(), self._checksum_func)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def to_string(self, projector: Callable[[bytes], str]) -> str:
        """Indented, parenthesized dump of the whole tree."""
        return render_tree(self.root, projector)

    def __repr__(self) -> str:
        return (f"MerkleTree(leaves={self._leaf_count}, height={self.height}, "
                f"root={self.root_checksum().hex()[:16]})")


def build_tree(blocks: Sequence[bytes], algorithm: str = DEFAULT_CHECKSUM) -> MerkleTree:
    """
    Build a tree with a registered cryptographic oracle.

    Args:
        blocks: Ordered, non-empty list of byte blocks
        algorithm: Name from merkleaudit.checksum.CHECKSUM_FUNCS

    Returns:
        MerkleTree whose root commits to every block and its position
    """
    return MerkleTree(get_checksum_func(algorithm), blocks)


def _as_bytes(data) -> bytes:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"Expected bytes-like block, got {type(data).__name__}")
