"""
Merkle Tree Implementation
Tree construction from transactions or leaf hashes, completeness checks,
leaf population and root-to-leaf path lookup.

This module provides:
- generate_full_tree: build a tree with transactions stored at the leaves
- generate_empty_tree: build a skeleton tree from leaf hashes alone
- is_complete: check every leaf holds a transaction
- load: attach a transaction to the skeleton leaf carrying its hash
- path: find the nodes from root to a leaf identified by hash

Construction Rules (Hard Contracts):
1. Leaf count must be a power of two (1, 2, 4, ...)
2. Leaf hash: hash_leaf(transaction), or the supplied hash for skeletons
3. Parent hash: combine(left.hash, right.hash)
4. Padding: an unpaired last node is combined with a fresh placeholder
   node carrying the same hash (never the same object, never a payload)
5. Leaf order is preserved exactly as given

Thread Safety:
- Construction, is_complete and path are pure
- load mutates a leaf; callers sharing a tree across threads must
  serialize load calls per tree
"""
from __future__ import annotations

import logging
from typing import Any, Iterator, Optional, Sequence

from ledger.crypto.hashing import combine, hash_leaf
from ledger.merkle.node import MerkleNode
from ledger.schemas.errors import ErrorCodes, InvalidLeafCountException


logger = logging.getLogger(__name__)


def is_power_of_two(n: int) -> bool:
    """True for 1, 2, 4, 8, ...; False for zero and negatives."""
    return n > 0 and (n & (n - 1)) == 0


def _check_leaf_count(n: int) -> None:
    if not is_power_of_two(n):
        raise InvalidLeafCountException(n)


def generate_full_tree(transactions: Sequence[Any]) -> MerkleNode:
    """
    Build a tree whose leaves store the given transactions.

    Args:
        transactions: Ordered transactions; the count must be a power of two

    Returns:
        Root node of the tree

    Raises:
        InvalidLeafCountException: If the count is not a power of two

    Example:
        >>> root = generate_full_tree(["a", "b", "c", "d"])
        >>> is_complete(root)
        True
    """
    _check_leaf_count(len(transactions))
    leaves = [
        MerkleNode(hash=hash_leaf(transaction), transaction=transaction)
        for transaction in transactions
    ]
    return _build_tree(leaves)


def generate_empty_tree(hashes: Sequence[str]) -> MerkleNode:
    """
    Build a skeleton tree from leaf hashes only.

    The leaves carry no transactions until populated with load().

    Raises:
        InvalidLeafCountException: If the count is not a power of two
    """
    _check_leaf_count(len(hashes))
    leaves = [MerkleNode(hash=leaf_hash) for leaf_hash in hashes]
    return _build_tree(leaves)


def _build_tree(children: list[MerkleNode]) -> MerkleNode:
    """Combine a level of nodes pairwise until a single root remains."""
    leaf_count = len(children)

    while len(children) != 1:
        parents: list[MerkleNode] = []
        for index in range(0, len(children), 2):
            left = children[index]
            if index + 1 < len(children):
                right = children[index + 1]
            else:
                right = MerkleNode(hash=left.hash)
            parents.append(
                MerkleNode(hash=combine(left.hash, right.hash), left=left, right=right)
            )
        children = parents

    root = children[0]
    logger.debug(f"Built Merkle tree over {leaf_count} leaves, root {root.hash}")
    return root


def compute_tree_depth(num_leaves: int) -> int:
    """
    Number of levels in a tree over num_leaves leaves, root included.

    A single leaf has depth 1, two leaves depth 2, 2**k leaves depth k + 1.

    Raises:
        InvalidLeafCountException: If num_leaves is not a power of two
    """
    _check_leaf_count(num_leaves)
    return num_leaves.bit_length()


def iter_leaves(root: Optional[MerkleNode]) -> Iterator[MerkleNode]:
    """Yield the leaves of a tree from left to right."""
    if root is None:
        return
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_leaf:
            yield node
            continue
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def is_complete(root: Optional[MerkleNode]) -> bool:
    """
    Check whether every leaf of the tree holds a transaction.

    Returns False for a missing tree.
    """
    if root is None:
        return False

    if root.left is not None and root.right is not None:
        return is_complete(root.left) and is_complete(root.right)
    if root.left is not None:
        return is_complete(root.left)
    if root.right is not None:
        return is_complete(root.right)
    return root.transaction is not None


def load(root: Optional[MerkleNode], transaction: Any) -> bool:
    """
    Attach a transaction to the leaf whose hash matches it.

    Args:
        root: The tree to populate
        transaction: The payload; its leaf hash selects the target leaf

    Returns:
        True if a matching leaf was found and populated, False otherwise
        (the tree is left untouched)
    """
    if root is None:
        return False

    found = _load_hash(root, hash_leaf(transaction), transaction)
    if not found:
        logger.debug(f"{ErrorCodes.LEAF_NOT_FOUND}: no leaf matches transaction, tree unchanged")
    return found


def _load_hash(node: MerkleNode, leaf_hash: str, transaction: Any) -> bool:
    if node.left is not None and node.right is not None:
        return (
            _load_hash(node.left, leaf_hash, transaction)
            or _load_hash(node.right, leaf_hash, transaction)
        )
    if node.left is not None:
        return _load_hash(node.left, leaf_hash, transaction)
    if node.right is not None:
        return _load_hash(node.right, leaf_hash, transaction)

    if node.hash == leaf_hash:
        node.transaction = transaction
        return True
    return False


def path(root: Optional[MerkleNode], leaf_hash: str) -> Optional[list[MerkleNode]]:
    """
    Find the nodes from the root down to the leaf with the given hash.

    Nodes have no parent links, so this is an iterative depth-first
    search: the stack always holds the current root-to-node path, and
    fully explored nodes are remembered by identity.

    Args:
        root: The tree to search
        leaf_hash: Hash of the target leaf

    Returns:
        Root-to-leaf list of nodes (both ends included), [] when the root
        itself is the matching leaf, or None when no leaf matches
    """
    if root is None:
        return None

    if root.is_leaf:
        return [] if root.hash == leaf_hash else None

    stack: list[MerkleNode] = [root]
    visited: set[int] = set()

    while stack:
        node = stack[-1]
        if node.is_leaf:
            if node.hash == leaf_hash:
                return list(stack)
            visited.add(id(node))
            stack.pop()
        elif node.left is not None and id(node.left) not in visited:
            stack.append(node.left)
        elif node.right is not None and id(node.right) not in visited:
            stack.append(node.right)
        else:
            visited.add(id(node))
            stack.pop()

    logger.debug(f"{ErrorCodes.LEAF_NOT_FOUND}: no leaf with hash {leaf_hash} in tree {root.hash}")
    return None


__all__ = [
    "is_power_of_two",
    "generate_full_tree",
    "generate_empty_tree",
    "compute_tree_depth",
    "iter_leaves",
    "is_complete",
    "load",
    "path",
]
