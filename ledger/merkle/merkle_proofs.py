"""
Merkle Audit Proofs
Proof generation from a tree and independent proof verification.

This module provides:
- generate_proof: sibling hashes needed to recompute the root from a leaf
- verify_proof: fold a proof from a leaf hash and compare with a root hash
- MerkleProver / MerkleVerifier: class-based wrappers producing and
  consuming the AuditProof exchange format

Verification Rule:
    current = leaf_hash
    for step in steps:
        current = combine(current, step.sibling_hash) if step.is_right
                  else combine(step.sibling_hash, current)
    valid iff current == root_hash
"""
from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ledger.crypto.hashing import combine, hash_leaf
from ledger.merkle.merkle_tree import path
from ledger.merkle.node import MerkleNode
from ledger.schemas.errors import ErrorCodes
from ledger.schemas.proof import AuditProof, ProofStep


logger = logging.getLogger(__name__)


def generate_proof(root: MerkleNode, leaf_hash: str) -> Optional[list[ProofStep]]:
    """
    Collect the sibling hashes on the path from a leaf up to the root.

    Steps are ordered from the leaf's own sibling up to the level just
    below the root. The root itself contributes no step.

    Args:
        root: Tree containing the leaf
        leaf_hash: Hash of the leaf to prove

    Returns:
        List of proof steps ([] for a single-leaf tree), or None if no
        leaf with that hash exists
    """
    nodes = path(root, leaf_hash)
    if nodes is None:
        logger.debug(f"{ErrorCodes.LEAF_NOT_FOUND}: cannot prove leaf {leaf_hash}")
        return None

    steps: list[ProofStep] = []
    # Walk parents from the leaf's parent back up to the root
    for i in range(len(nodes) - 2, -1, -1):
        parent, child = nodes[i], nodes[i + 1]
        if parent.left is child:
            steps.append(ProofStep(sibling_hash=parent.right.hash, is_right=True))
        else:
            steps.append(ProofStep(sibling_hash=parent.left.hash, is_right=False))
    return steps


def verify_proof(steps: Sequence[ProofStep], root_hash: str, leaf_hash: str) -> bool:
    """
    Verify a leaf hash against a root hash using only proof steps.

    Args:
        steps: Proof steps in leaf-to-root order
        root_hash: The claimed root hash
        leaf_hash: Hash of the leaf whose membership is claimed

    Returns:
        True if folding the steps from leaf_hash reproduces root_hash
    """
    current = leaf_hash
    for step in steps:
        if step.is_right:
            current = combine(current, step.sibling_hash)
        else:
            current = combine(step.sibling_hash, current)

    if current != root_hash:
        logger.info(f"Proof for leaf {leaf_hash} does not reproduce root {root_hash}")
        return False
    return True


class MerkleProver:
    """
    Convenience class for producing AuditProof objects from a tree.

    Example:
        >>> root = generate_full_tree(["a", "b"])
        >>> proof = MerkleProver.prove(root, hash_leaf("a"))
        >>> MerkleVerifier.verify(proof)
        True
    """

    @staticmethod
    def prove(root: MerkleNode, leaf_hash: str) -> Optional[AuditProof]:
        """
        Build an AuditProof for the leaf with the given hash.

        Returns:
            AuditProof, or None if the leaf is not in the tree
        """
        steps = generate_proof(root, leaf_hash)
        if steps is None:
            return None
        return AuditProof(leaf_hash=leaf_hash, root_hash=root.hash, steps=steps)

    @staticmethod
    def prove_transaction(root: MerkleNode, transaction: Any) -> Optional[AuditProof]:
        """Build an AuditProof for a transaction, hashing it first."""
        return MerkleProver.prove(root, hash_leaf(transaction))


class MerkleVerifier:
    """Convenience class for verifying proofs without access to the tree."""

    @staticmethod
    def verify(proof: AuditProof) -> bool:
        return verify_proof(proof.steps, proof.root_hash, proof.leaf_hash)

    @staticmethod
    def verify_transaction(
        transaction: Any,
        steps: Sequence[ProofStep],
        root_hash: str,
    ) -> bool:
        """
        Verify a transaction is a member of the tree with the given root.

        The transaction is hashed locally, so a proof cannot vouch for a
        payload other than the one the verifier holds.
        """
        return verify_proof(steps, root_hash, hash_leaf(transaction))


__all__ = [
    "generate_proof",
    "verify_proof",
    "MerkleProver",
    "MerkleVerifier",
]
