"""
Merkle Tree and Audit Proofs
Power-of-two Merkle trees over transactions, with membership proofs.

This module provides:
- MerkleNode: the tree node type
- generate_full_tree / generate_empty_tree: tree construction
- is_complete / load: skeleton inspection and population
- path: root-to-leaf lookup by leaf hash
- generate_proof / verify_proof: audit proof protocol

Usage:
    from ledger.merkle import generate_full_tree, generate_proof, verify_proof
    from ledger.crypto import hash_leaf

    root = generate_full_tree(transactions)
    leaf_hash = hash_leaf(transactions[2])
    steps = generate_proof(root, leaf_hash)

    # On the verifier side, only the root hash is needed
    assert verify_proof(steps, root.hash, leaf_hash)
"""
from .node import MerkleNode

from .merkle_tree import (
    is_power_of_two,
    generate_full_tree,
    generate_empty_tree,
    compute_tree_depth,
    iter_leaves,
    is_complete,
    load,
    path,
)

from .merkle_proofs import (
    generate_proof,
    verify_proof,
    MerkleProver,
    MerkleVerifier,
)


__all__ = [
    # Core types
    "MerkleNode",
    # Construction
    "is_power_of_two",
    "generate_full_tree",
    "generate_empty_tree",
    "compute_tree_depth",
    "iter_leaves",
    # Inspection
    "is_complete",
    "load",
    "path",
    # Proofs
    "generate_proof",
    "verify_proof",
    "MerkleProver",
    "MerkleVerifier",
]
