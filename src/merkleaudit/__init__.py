"""
merkleaudit: Merkle Trees with Audit Proofs

Binary hash tree over an ordered list of blocks, with compact inclusion
proofs for single leaves:
- Leaf and branch digests are domain separated (no tree-shape forgery)
- Odd rows are balanced by duplicating their last node
- Proofs are plain values, verifiable against any published root

Usage:
    from merkleaudit import build_tree

    tree = build_tree([b"alpha", b"beta", b"kappa"])
    proof = tree.create_proof(tree.leaf_checksum(b"alpha"))
    assert tree.verify_proof(proof)

    # Against a root published elsewhere
    from merkleaudit import sha256_double_hash
    assert proof.verify(published_root, sha256_double_hash)

The identity oracle for inspecting tree shapes lives in merkleaudit.testing
and is not exported here.
"""

from .tags import NodeTag, tag_bytes
from .checksum import (
    ChecksumFunc,
    CHECKSUM_SIZE,
    DEFAULT_CHECKSUM,
    CHECKSUM_FUNCS,
    sha256_double_hash,
    shake256_hash,
    get_checksum_func,
)
from .errors import (
    MerkleTreeError,
    EmptyTreeError,
    ProofNotFoundError,
    UnknownChecksumError,
)
from .node import Node, NodeKind
from .proof import Proof, ProofPart, compute_root, is_well_formed
from .tree import MerkleTree, build_tree
from .render import render_tree, render_proof, short_hex

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Tags
    "NodeTag",
    "tag_bytes",
    # Checksum oracles
    "ChecksumFunc",
    "CHECKSUM_SIZE",
    "DEFAULT_CHECKSUM",
    "CHECKSUM_FUNCS",
    "sha256_double_hash",
    "shake256_hash",
    "get_checksum_func",
    # Errors
    "MerkleTreeError",
    "EmptyTreeError",
    "ProofNotFoundError",
    "UnknownChecksumError",
    # Tree
    "Node",
    "NodeKind",
    "MerkleTree",
    "build_tree",
    # Proofs
    "Proof",
    "ProofPart",
    "compute_root",
    "is_well_formed",
    # Rendering
    "render_tree",
    "render_proof",
    "short_hex",
]
