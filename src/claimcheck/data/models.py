"""Core data models for claimcheck."""

import json
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class Category(StrEnum):
    """Topical bucket a claim is filed under.

    Declaration order is the order in which the classifier tries the rules.
    """

    SCIENTIFIC = "Scientific"
    MEDICAL_HEALTH = "Medical/Health"
    POLITICAL = "Political"
    ECONOMIC = "Economic"
    CLIMATE_WEATHER = "Climate/Weather"
    HISTORICAL = "Historical"
    GENERAL = "General"


class CheckWorthiness(StrEnum):
    """Priority tier derived from the check-worthiness score."""

    HIGH = "High Priority Check-Worthy Claim"
    MEDIUM = "Medium Priority Check-Worthy Claim"
    LOW = "Non-Check-Worthy Statement"


class VerdictStatus(StrEnum):
    """Outcome of a verification. Only ``UNVERIFIED`` is produced today."""

    TRUE = "true"
    FALSE = "false"
    PARTIALLY_TRUE = "partially_true"
    UNVERIFIED = "unverified"


class EvidenceType(StrEnum):
    SUPPORTING = "supporting"
    CONTRADICTING = "contradicting"
    RELATED = "related"


@dataclass(frozen=True)
class ScoredClaim:
    """A claim together with its 0-1 check-worthiness score."""

    text: str
    score: float


@dataclass(frozen=True)
class ClaimMatch:
    """A previously published fact-check matching the claim."""

    confidence: float
    matched_claim: str | None = None
    existing_verdict: str | None = None
    source: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "matchedClaim": self.matched_claim,
            "existingVerdict": self.existing_verdict,
            "confidence": self.confidence,
            "source": self.source,
        }


@dataclass(frozen=True)
class Evidence:
    """A snippet of evidence bearing on the claim."""

    source: str
    snippet: str
    type: EvidenceType
    confidence: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "snippet": self.snippet,
            "type": str(self.type),
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class Verdict:
    """Verification outcome attached to an analysis."""

    status: VerdictStatus
    explanation: str
    correct_information: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "status": str(self.status),
            "explanation": self.explanation,
        }
        if self.correct_information is not None:
            data["correctInformation"] = self.correct_information
        return data


@dataclass(frozen=True)
class ClaimAnalysis:
    """Everything derived from a single scored claim.

    ``confidence`` mirrors ``spotter_score``; ``matched_fact_checks`` and
    ``evidence`` stay empty until a verification backend exists.
    """

    claim: str
    spotter_score: float
    check_worthiness: CheckWorthiness
    category: Category
    confidence: float
    suggested_actions: tuple[str, ...] = ()
    potential_sources: tuple[str, ...] = ()
    matched_fact_checks: tuple[ClaimMatch, ...] = ()
    evidence: tuple[Evidence, ...] = ()
    verdict: Verdict | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "claim": self.claim,
            "spotterScore": self.spotter_score,
            "checkWorthiness": str(self.check_worthiness),
            "category": str(self.category),
            "confidence": self.confidence,
            "matchedFactChecks": [m.to_dict() for m in self.matched_fact_checks],
            "evidence": [e.to_dict() for e in self.evidence],
            "suggestedActions": list(self.suggested_actions),
            "potentialSources": list(self.potential_sources),
        }
        if self.verdict is not None:
            data["verdict"] = self.verdict.to_dict()
        return data


@dataclass(frozen=True)
class CheckWorthinessBreakdown:
    high_priority: int = 0
    medium_priority: int = 0
    low_priority: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "highPriority": self.high_priority,
            "mediumPriority": self.medium_priority,
            "lowPriority": self.low_priority,
        }


@dataclass(frozen=True)
class VerdictDistribution:
    true: int = 0
    false: int = 0
    partially_true: int = 0
    unverified: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "true": self.true,
            "false": self.false,
            "partially_true": self.partially_true,
            "unverified": self.unverified,
        }


@dataclass(frozen=True)
class ReportSummary:
    total_claims: int
    check_worthiness_breakdown: CheckWorthinessBreakdown
    average_confidence: float
    top_categories: tuple[str, ...]
    verdict_distribution: VerdictDistribution

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalClaims": self.total_claims,
            "checkWorthinessBreakdown": self.check_worthiness_breakdown.to_dict(),
            "averageConfidence": self.average_confidence,
            "topCategories": list(self.top_categories),
            "verdictDistribution": self.verdict_distribution.to_dict(),
        }


@dataclass(frozen=True)
class BatchMetrics:
    """Timing and sizing of one invocation.

    ``batch_size`` is the configured value; it is reported, not enforced.
    """

    processing_time: int
    batch_size: int
    success_rate: float = 1.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "processingTime": self.processing_time,
            "batchSize": self.batch_size,
            "successRate": self.success_rate,
        }


@dataclass(frozen=True)
class FactCheckReport:
    """Aggregate view over one or more claim analyses."""

    summary: ReportSummary
    batch_metrics: BatchMetrics
    detailed_analysis: tuple[ClaimAnalysis, ...] = ()
    verification_priorities: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": self.summary.to_dict(),
            "detailedAnalysis": [a.to_dict() for a in self.detailed_analysis],
            "batchMetrics": self.batch_metrics.to_dict(),
            "verificationPriorities": list(self.verification_priorities),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
