"""
Tests for Checksum Oracles

Domain separation between leaf and branch digests, and the forgery it
prevents.
"""

import hashlib

import pytest
from merkleaudit import (
    CHECKSUM_FUNCS,
    CHECKSUM_SIZE,
    DEFAULT_CHECKSUM,
    NodeTag,
    UnknownChecksumError,
    build_tree,
    get_checksum_func,
    sha256_double_hash,
    shake256_hash,
    tag_bytes,
)
from merkleaudit.testing import identity_hash_for_test, new_tree_for_test


ORACLES = [sha256_double_hash, shake256_hash]


class TestTags:

    def test_tag_values(self):
        assert tag_bytes(NodeTag.LEAF) == b"\x00"
        assert tag_bytes(NodeTag.BRANCH) == b"\x01"


class TestOracles:

    @pytest.mark.parametrize("oracle", ORACLES)
    def test_deterministic(self, oracle):
        assert oracle(True, b"alpha") == oracle(True, b"alpha")
        assert oracle(False, b"alpha") == oracle(False, b"alpha")

    @pytest.mark.parametrize("oracle", ORACLES)
    def test_output_size(self, oracle):
        assert len(oracle(True, b"")) == CHECKSUM_SIZE
        assert len(oracle(False, b"x" * 10000)) == CHECKSUM_SIZE

    @pytest.mark.parametrize("oracle", ORACLES)
    def test_leaf_and_branch_separated(self, oracle):
        """Same bytes, different role, different digest."""
        for data in (b"", b"alpha", b"\x00" * 64):
            assert oracle(True, data) != oracle(False, data)

    def test_sha256d_definition(self):
        data = b"alpha"
        expected = hashlib.sha256(hashlib.sha256(b"\x00" + data).digest()).digest()
        assert sha256_double_hash(True, data) == expected
        expected = hashlib.sha256(hashlib.sha256(b"\x01" + data).digest()).digest()
        assert sha256_double_hash(False, data) == expected

    def test_shake256_definition(self):
        expected = hashlib.shake_256(b"\x00alpha").digest(32)
        assert shake256_hash(True, b"alpha") == expected

    def test_identity_oracle_ignores_role(self):
        assert identity_hash_for_test(True, b"alpha") == b"alpha"
        assert identity_hash_for_test(False, b"alpha") == b"alpha"


class TestRegistry:

    def test_default(self):
        assert get_checksum_func() is sha256_double_hash
        assert DEFAULT_CHECKSUM in CHECKSUM_FUNCS

    def test_lookup(self):
        assert get_checksum_func("shake256") is shake256_hash

    def test_identity_not_registered(self):
        """The insecure oracle is unreachable by name."""
        assert identity_hash_for_test not in CHECKSUM_FUNCS.values()
        with pytest.raises(UnknownChecksumError) as exc_info:
            get_checksum_func("identity")
        assert exc_info.value.name == "identity"
        assert isinstance(exc_info.value, ValueError)


class TestSecondPreimage:
    """
    Tree-equivalence forgery: feed the level-1 concatenations of one tree
    as the leaves of another.
    """

    @pytest.mark.parametrize("algorithm", sorted(CHECKSUM_FUNCS))
    def test_forged_tree_has_different_root(self, algorithm):
        tree = build_tree([b"alpha", b"beta", b"kappa"], algorithm)
        f = tree.checksum_func

        l = f(True, b"alpha") + f(True, b"beta")
        r = f(True, b"kappa") + f(True, b"kappa")
        forged = build_tree([l, r], algorithm)

        assert tree.root_checksum() != forged.root_checksum()

    def test_forged_leaf_proof_rejected(self):
        """A level-1 concatenation cannot pass as a leaf of the real tree."""
        tree = build_tree([b"alpha", b"beta", b"kappa"])
        f = tree.checksum_func
        forged = build_tree([
            f(True, b"alpha") + f(True, b"beta"),
            f(True, b"kappa") + f(True, b"kappa"),
        ])

        proof = forged.create_proof(forged.leaf_checksum(
            f(True, b"alpha") + f(True, b"beta")
        ))
        assert forged.verify_proof(proof)
        assert not tree.verify_proof(proof)

    def test_identity_oracle_is_forgeable(self):
        """Without separation the attack succeeds, which is why the
        identity oracle is test-only."""
        tree = new_tree_for_test([b"alpha", b"beta", b"kappa"])
        forged = new_tree_for_test([b"alphabeta", b"kappakappa"])
        assert tree.root_checksum() == forged.root_checksum()
