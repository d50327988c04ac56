"""
Schemas
File: proof.py

Purpose: Audit proof exchange format.

A remote verifier needs only the ordered proof steps, the claimed root
hash and the leaf hash; no access to the tree is required.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProofStep(BaseModel):
    """
    One level of an audit proof.

    is_right=True means the sibling sits to the right, so the verifier
    folds combine(current, sibling); otherwise combine(sibling, current).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    sibling_hash: str = Field(..., min_length=1)
    is_right: bool


class AuditProof(BaseModel):
    """A membership proof for one leaf against a root hash."""

    model_config = ConfigDict(extra="forbid")

    leaf_hash: str = Field(..., min_length=1)
    root_hash: str = Field(..., min_length=1)
    steps: list[ProofStep] = Field(
        default_factory=list,
        description="Sibling hashes ordered from the leaf's sibling up to the level below the root",
    )

    @property
    def depth(self) -> int:
        """Number of combination steps from leaf to root."""
        return len(self.steps)
