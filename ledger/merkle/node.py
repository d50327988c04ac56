"""
Merkle Node
The unit of a Merkle tree: zero or two children, a hash, and an
optional transaction payload on leaves.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class MerkleNode:
    """
    A node in a Merkle tree.

    Children are exclusively owned and there are no parent links.
    Nodes compare by identity; two nodes with equal hashes are still
    distinct positions in the tree.

    Attributes:
        hash: Leaf hash, or combine(left.hash, right.hash) for internal nodes
        left: Left child, None on leaves
        right: Right child, None on leaves
        transaction: Payload attached to a leaf, if any
    """
    hash: str
    left: Optional[MerkleNode] = None
    right: Optional[MerkleNode] = None
    transaction: Any = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        kind = "leaf" if self.is_leaf else "node"
        loaded = ", loaded" if self.transaction is not None else ""
        return f"MerkleNode({kind}, hash={self.hash[:12]}...{loaded})"
