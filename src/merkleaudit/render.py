"""
Human-Readable Dumps

Debug rendering for trees and proofs. A projector turns a digest into the
text shown for it, e.g. short_hex() for real digests or
merkleaudit.testing.printable for trees built with the identity oracle.
"""

from __future__ import annotations
from typing import Callable, List

Projector = Callable[[bytes], str]

INDENT = "  "


def short_hex(length: int = 16) -> Projector:
    """Projector showing the first `length` hex characters of a digest."""
    def project(checksum: bytes) -> str:
        return bytes(checksum).hex()[:length]
    return project


def render_tree(node, projector: Projector, depth: int = 0) -> str:
    """
    Parenthesized dump of a subtree:

        (B root: alphabeta
          (L root: alpha)
          (L root: beta))
    """
    pad = INDENT * depth
    label = f"{node.kind.value} root: {projector(node.checksum)}"
    if node.is_leaf:
        return f"{pad}({label})"

    return (
        f"{pad}({label} \n"
        f"{render_tree(node.left, projector, depth + 1)} \n"
        f"{render_tree(node.right, projector, depth + 1)})"
    )


def render_proof(proof, projector: Projector, checksum_func) -> str:
    """Step-by-step route from the target leaf up to the root."""
    lines: List[str] = [f"route from {projector(proof.target)} (leaf) to root:", ""]

    current = bytes(proof.target)
    for part in proof.parts:
        if part.is_right:
            left, right = current, bytes(part.checksum)
        else:
            left, right = bytes(part.checksum), current
        current = checksum_func(False, left + right)
        lines.append(f"{projector(left)} + {projector(right)} = {projector(current)}")

    return "\n".join(lines)
