#!/usr/bin/env python3
"""
MerkleBench: Timing for Tree Construction and Audit Proofs

Measures, for a range of leaf counts:
- Build latency (O(n) hashing)
- Proof creation latency (leaf search + O(log n) walk)
- Proof verification latency (O(log n) hashing)
- Proof size in parts

Usage:
    merklebench.py [--algorithm sha256d] [--sizes 16,256,4096] [--rounds N] [--output FILE]
"""

from __future__ import annotations
import argparse
import json
import os
import statistics
import sys
import time
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from merkleaudit import CHECKSUM_FUNCS, DEFAULT_CHECKSUM, build_tree


@dataclass
class SizeBenchResult:
    """Result for one leaf count."""
    leaves: int
    height: int
    proof_parts: int
    build_median_ms: float
    create_proof_median_us: float
    verify_proof_median_us: float


def _median_time(fn, rounds: int) -> float:
    samples = []
    for _ in range(rounds):
        start = time.perf_counter()
        fn()
        samples.append(time.perf_counter() - start)
    return statistics.median(samples)


def bench_size(leaves: int, algorithm: str, rounds: int) -> SizeBenchResult:
    blocks = [os.urandom(64) for _ in range(leaves)]
    tree = build_tree(blocks, algorithm)
    # Last leaf: worst case for the linear leaf search
    target = tree.leaf_checksum(blocks[-1])
    proof = tree.create_proof(target)

    return SizeBenchResult(
        leaves=leaves,
        height=tree.height,
        proof_parts=len(proof.parts),
        build_median_ms=_median_time(lambda: build_tree(blocks, algorithm), rounds) * 1e3,
        create_proof_median_us=_median_time(lambda: tree.create_proof(target), rounds) * 1e6,
        verify_proof_median_us=_median_time(lambda: tree.verify_proof(proof), rounds) * 1e6,
    )


def run(sizes: List[int], algorithm: str, rounds: int) -> Dict[str, Any]:
    results = []
    for leaves in sizes:
        result = bench_size(leaves, algorithm, rounds)
        print(f"{leaves:>8} leaves  build {result.build_median_ms:9.3f} ms  "
              f"prove {result.create_proof_median_us:9.1f} us  "
              f"verify {result.verify_proof_median_us:7.1f} us  "
              f"({result.proof_parts} parts)")
        results.append(result)

    return {
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'algorithm': algorithm,
        'rounds': rounds,
        'results': [asdict(r) for r in results],
    }


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Merkle tree benchmark")
    parser.add_argument('--algorithm', default=DEFAULT_CHECKSUM, choices=sorted(CHECKSUM_FUNCS))
    parser.add_argument('--sizes', default="16,256,4096,65536",
                        help="Comma-separated leaf counts")
    parser.add_argument('--rounds', type=int, default=5)
    parser.add_argument('--output', type=Path, help="Write JSON report to this file")
    args = parser.parse_args(argv)

    sizes = [int(s) for s in args.sizes.split(',') if s]
    report = run(sizes, args.algorithm, args.rounds)

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(json.dumps(report, indent=2))
        print(f"\nReport written to {args.output}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
