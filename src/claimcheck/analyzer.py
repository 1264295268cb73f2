"""Turn scored claims into claim analyses."""

import logging

from claimcheck.classifier import classify_claim
from claimcheck.data import (
    Category,
    CheckWorthiness,
    ClaimAnalysis,
    ScoredClaim,
    Verdict,
    VerdictStatus,
)

logger = logging.getLogger(__name__)

TIER_ACTIONS: dict[CheckWorthiness, tuple[str, ...]] = {
    CheckWorthiness.HIGH: (
        "High priority for fact-checking",
        "Verify with multiple authoritative sources",
        "Check for recent fact-checks on this topic",
    ),
    CheckWorthiness.MEDIUM: (
        "Consider fact-checking if resources allow",
        "Monitor for related claims",
    ),
    CheckWorthiness.LOW: (
        "No immediate fact-checking needed",
        "Statement is not a factual claim",
    ),
}

CATEGORY_ACTIONS: dict[str, tuple[str, ...]] = {
    Category.MEDICAL_HEALTH: ("Verify with medical journals", "Check WHO guidelines"),
    Category.CLIMATE_WEATHER: ("Consult IPCC reports",),
    Category.SCIENTIFIC: ("Check peer-reviewed literature",),
}

CATEGORY_SOURCES: dict[str, tuple[str, ...]] = {
    Category.MEDICAL_HEALTH: ("PubMed Central", "WHO Database", "CDC Reports", "Medical Journals"),
    Category.CLIMATE_WEATHER: ("NOAA", "NASA Climate", "IPCC Reports"),
    Category.SCIENTIFIC: ("Google Scholar", "Science Direct", "Nature"),
    Category.ECONOMIC: ("World Bank Data", "IMF Statistics", "Federal Reserve"),
    Category.POLITICAL: ("Government Websites", "Official Records"),
    Category.HISTORICAL: ("Academic Databases", "National Archives"),
}

DEFAULT_SOURCES: tuple[str, ...] = (
    "Fact-checking websites",
    "Academic sources",
    "Official records",
)

UNVERIFIED_EXPLANATION = "Claim requires verification from authoritative sources."


class ClaimAnalyzer:
    """Bucket, classify and annotate scored claims.

    Thresholds are inclusive lower bounds: ``score >= high_threshold`` is
    high priority, ``low_threshold <= score < high_threshold`` is medium,
    anything below is low.

    Args:
        low_threshold: Lower bound of the medium tier.
        high_threshold: Lower bound of the high tier.
    """

    def __init__(self, low_threshold: float = 0.3, high_threshold: float = 0.7) -> None:
        self._low = low_threshold
        self._high = high_threshold

    @property
    def low_threshold(self) -> float:
        return self._low

    @property
    def high_threshold(self) -> float:
        return self._high

    def check_worthiness(self, score: float) -> CheckWorthiness:
        if score >= self._high:
            return CheckWorthiness.HIGH
        if score >= self._low:
            return CheckWorthiness.MEDIUM
        return CheckWorthiness.LOW

    def suggested_actions(self, score: float, category: str) -> list[str]:
        """Tier actions for the score followed by any category-specific extras."""
        actions = list(TIER_ACTIONS[self.check_worthiness(score)])
        actions.extend(CATEGORY_ACTIONS.get(category, ()))
        return actions

    def suggest_sources(self, category: str) -> list[str]:
        """Sources worth consulting for ``category``; unknown categories get the defaults."""
        return list(CATEGORY_SOURCES.get(category, DEFAULT_SOURCES))

    def analyze(self, scored: ScoredClaim) -> ClaimAnalysis:
        """Build the full analysis record for one scored claim."""
        category = classify_claim(scored.text)
        worthiness = self.check_worthiness(scored.score)
        logger.info("Claim classified as %s (%s)", category, worthiness)

        return ClaimAnalysis(
            claim=scored.text,
            spotter_score=scored.score,
            check_worthiness=worthiness,
            category=category,
            confidence=scored.score,
            suggested_actions=tuple(self.suggested_actions(scored.score, category)),
            potential_sources=tuple(self.suggest_sources(category)),
            verdict=Verdict(
                status=VerdictStatus.UNVERIFIED,
                explanation=UNVERIFIED_EXPLANATION,
            ),
        )
