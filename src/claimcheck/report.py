"""Aggregate claim analyses into a fact-check report."""

import time
from collections import Counter
from collections.abc import Callable, Sequence

from claimcheck.data import (
    BatchMetrics,
    CheckWorthiness,
    CheckWorthinessBreakdown,
    ClaimAnalysis,
    FactCheckReport,
    ReportSummary,
    VerdictDistribution,
    VerdictStatus,
)

TOP_CATEGORY_COUNT = 3


def build_report(
    analyses: Sequence[ClaimAnalysis],
    started_at: float,
    *,
    batch_size: int = 5,
    detailed_analysis: bool = True,
    clock: Callable[[], float] = time.monotonic,
) -> FactCheckReport:
    """Summarize ``analyses`` into a report.

    Args:
        analyses: Analyses to aggregate.
        started_at: ``clock()`` reading taken when processing began.
        batch_size: Configured batch size, reported as-is.
        detailed_analysis: When False the per-claim list is left empty; the
            summary and priorities are still computed.
        clock: Clock in seconds, same source as ``started_at``.

    Returns:
        The aggregated report.
    """
    tiers = Counter(a.check_worthiness for a in analyses)
    statuses = Counter(a.verdict.status for a in analyses if a.verdict is not None)
    # most_common keeps first-seen order for equal counts
    categories = Counter(str(a.category) for a in analyses)

    summary = ReportSummary(
        total_claims=len(analyses),
        check_worthiness_breakdown=CheckWorthinessBreakdown(
            high_priority=tiers[CheckWorthiness.HIGH],
            medium_priority=tiers[CheckWorthiness.MEDIUM],
            low_priority=tiers[CheckWorthiness.LOW],
        ),
        average_confidence=sum(a.confidence for a in analyses) / max(1, len(analyses)),
        top_categories=tuple(c for c, _ in categories.most_common(TOP_CATEGORY_COUNT)),
        verdict_distribution=VerdictDistribution(
            true=statuses[VerdictStatus.TRUE],
            false=statuses[VerdictStatus.FALSE],
            partially_true=statuses[VerdictStatus.PARTIALLY_TRUE],
            unverified=statuses[VerdictStatus.UNVERIFIED],
        ),
    )

    return FactCheckReport(
        summary=summary,
        detailed_analysis=tuple(analyses) if detailed_analysis else (),
        batch_metrics=BatchMetrics(
            processing_time=int((clock() - started_at) * 1000),
            batch_size=batch_size,
            success_rate=1.0,
        ),
        verification_priorities=tuple(verification_priorities(analyses)),
    )


def verification_priorities(analyses: Sequence[ClaimAnalysis]) -> list[str]:
    """One line per high-priority claim, highest score first."""
    high = [a for a in analyses if a.check_worthiness == CheckWorthiness.HIGH]
    high.sort(key=lambda a: a.spotter_score, reverse=True)
    return [_priority_line(a) for a in high]


def _priority_line(analysis: ClaimAnalysis) -> str:
    verdict = f" [{analysis.verdict.status.upper()}]" if analysis.verdict is not None else ""
    return (
        f"Priority Check Required: {analysis.claim} "
        f"({analysis.category}, Score: {analysis.spotter_score:.2f}{verdict})"
    )
