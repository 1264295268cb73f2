"""Data models for claimcheck."""

from claimcheck.data.models import (
    BatchMetrics,
    Category,
    CheckWorthiness,
    CheckWorthinessBreakdown,
    ClaimAnalysis,
    ClaimMatch,
    Evidence,
    EvidenceType,
    FactCheckReport,
    ReportSummary,
    ScoredClaim,
    Verdict,
    VerdictDistribution,
    VerdictStatus,
)

__all__ = [
    "BatchMetrics",
    "Category",
    "CheckWorthiness",
    "CheckWorthinessBreakdown",
    "ClaimAnalysis",
    "ClaimMatch",
    "Evidence",
    "EvidenceType",
    "FactCheckReport",
    "ReportSummary",
    "ScoredClaim",
    "Verdict",
    "VerdictDistribution",
    "VerdictStatus",
]
