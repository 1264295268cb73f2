"""Fact-check tool: score, analyze and report on a single claim."""

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from claimcheck.analyzer import ClaimAnalyzer
from claimcheck.data import FactCheckReport
from claimcheck.errors import FactCheckToolError
from claimcheck.report import build_report
from claimcheck.run_logger import RunLogger
from claimcheck.scorer import ClaimBusterScorer, ClaimScorer

if TYPE_CHECKING:
    from claimcheck.config.models import FactCheckConfig

logger = logging.getLogger(__name__)


class ToolInput(BaseModel):
    """Arguments accepted by ``FactCheckTool.call``."""

    input: str = Field(description="The text to analyse for fact-checking")


class FactCheckTool:
    """Score a claim with ClaimBuster, categorise it and suggest verification steps.

    Each invocation handles exactly one claim with one scoring request. Any
    failure on the way is re-raised once as ``FactCheckToolError`` whose
    message is prefixed with ``"FactCheckTool: "``.

    Args:
        config: Tool configuration.
        scorer: Claim scorer; defaults to a ClaimBusterScorer built from config.
        run_logger: Optional RunLogger for per-run JSON traces.
        clock: Monotonic clock in seconds used for timing.
    """

    name = "factCheck"
    description = (
        "Advanced fact-checking tool that scores claims with ClaimBuster, "
        "categorises them and suggests verification steps."
    )
    args_schema = ToolInput

    def __init__(
        self,
        config: "FactCheckConfig",
        *,
        scorer: ClaimScorer | None = None,
        run_logger: RunLogger | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config = config
        self._scorer = scorer or ClaimBusterScorer(
            api_key=config.api_key,
            base_url=config.base_url,
            max_requests_per_minute=config.max_requests_per_minute,
            retries=config.retries,
            backoff_ms=config.backoff_ms,
            timeout=config.timeout,
        )
        self._analyzer = ClaimAnalyzer(config.low_threshold, config.high_threshold)
        self._run_logger = run_logger
        self._clock = clock

    @property
    def config(self) -> "FactCheckConfig":
        return self._config

    @property
    def analyzer(self) -> ClaimAnalyzer:
        return self._analyzer

    async def call(self, input: str) -> str:
        """Run the tool and return the report as a JSON string."""
        args = ToolInput(input=input)
        report = await self.score_and_analyze(args.input)
        return report.to_json()

    async def score_and_analyze(self, claim: str) -> FactCheckReport:
        """Score, analyze and summarize a single claim.

        Raises:
            FactCheckToolError: If scoring or analysis fails for any reason.
        """
        if self._run_logger:
            self._run_logger.start_run(self.name, claim)

        started_at = self._clock()
        try:
            report = await self._run(claim, started_at)
        except Exception as e:
            logger.error("Fact check failed: %s", e)
            if self._run_logger:
                self._run_logger.finish_run(error=e)
            raise FactCheckToolError(f"FactCheckTool: {e}") from e

        if self._run_logger:
            self._run_logger.finish_run(report)
        return report

    async def _run(self, claim: str, started_at: float) -> FactCheckReport:
        scored = await self._scorer.score(claim)
        score_done = self._clock()
        if self._run_logger:
            self._run_logger.log_stage(
                stage="scoring",
                component=type(self._scorer).__name__,
                input_data=claim,
                output_data=scored,
                duration_seconds=score_done - started_at,
            )

        analysis = self._analyzer.analyze(scored)
        analysis_done = self._clock()
        if self._run_logger:
            self._run_logger.log_stage(
                stage="analysis",
                component=type(self._analyzer).__name__,
                input_data=scored,
                output_data=analysis,
                duration_seconds=analysis_done - score_done,
            )

        report = build_report(
            [analysis],
            started_at,
            batch_size=self._config.batch_size,
            detailed_analysis=self._config.detailed_analysis,
            clock=self._clock,
        )
        if self._run_logger:
            self._run_logger.log_stage(
                stage="report",
                component="build_report",
                input_data=[analysis],
                output_data=report.summary,
                duration_seconds=self._clock() - analysis_done,
            )
        return report


async def score_and_analyze(claim: str, config: "FactCheckConfig") -> FactCheckReport:
    """Check one claim with a tool built from ``config``.

    Raises:
        FactCheckToolError: If scoring or analysis fails.
    """
    return await FactCheckTool(config).score_and_analyze(claim)
