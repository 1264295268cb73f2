"""Claim scorers."""

from claimcheck.scorer.base import ClaimScorer
from claimcheck.scorer.claimbuster import CLAIMBUSTER_API_URL, ClaimBusterScorer

__all__ = [
    "CLAIMBUSTER_API_URL",
    "ClaimBusterScorer",
    "ClaimScorer",
]
