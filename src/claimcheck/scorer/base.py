from typing import Protocol

from claimcheck.data import ScoredClaim


class ClaimScorer(Protocol):
    """Interface for scoring how check-worthy a claim is."""

    async def score(self, claim: str) -> ScoredClaim:
        """Score a single claim.

        Args:
            claim: Natural-language sentence to score.

        Returns:
            The claim text as echoed by the backend and its 0-1 score.
        """
        ...
