"""claimcheck: check-worthiness scoring, categorisation and verification hints for claims."""

from claimcheck.analyzer import ClaimAnalyzer
from claimcheck.classifier import CATEGORY_RULES, classify_claim
from claimcheck.config import (
    ClaimCheckConfig,
    FactCheckConfig,
    LoggingConfig,
    config_from_node_inputs,
    create_from_config,
    load_config,
)
from claimcheck.data import (
    BatchMetrics,
    Category,
    CheckWorthiness,
    ClaimAnalysis,
    FactCheckReport,
    ReportSummary,
    ScoredClaim,
    Verdict,
    VerdictStatus,
)
from claimcheck.errors import (
    ApiError,
    ClaimCheckError,
    ClientError,
    FactCheckToolError,
    MalformedResponseError,
    ServerError,
    TransportError,
)
from claimcheck.http import RetryingFetcher, Throttler
from claimcheck.report import build_report, verification_priorities
from claimcheck.run_logger import RunLogger
from claimcheck.scorer import ClaimBusterScorer, ClaimScorer
from claimcheck.tool import FactCheckTool, ToolInput, score_and_analyze

__all__ = [
    # Models
    "BatchMetrics",
    "Category",
    "CheckWorthiness",
    "ClaimAnalysis",
    "FactCheckReport",
    "ReportSummary",
    "ScoredClaim",
    "Verdict",
    "VerdictStatus",
    # Errors
    "ApiError",
    "ClaimCheckError",
    "ClientError",
    "FactCheckToolError",
    "MalformedResponseError",
    "ServerError",
    "TransportError",
    # HTTP
    "RetryingFetcher",
    "Throttler",
    # Protocols
    "ClaimScorer",
    # Scorers
    "ClaimBusterScorer",
    # Analysis
    "CATEGORY_RULES",
    "ClaimAnalyzer",
    "build_report",
    "classify_claim",
    "verification_priorities",
    # Tool
    "FactCheckTool",
    "ToolInput",
    "score_and_analyze",
    # Logging
    "RunLogger",
    # Config
    "ClaimCheckConfig",
    "FactCheckConfig",
    "LoggingConfig",
    "config_from_node_inputs",
    "create_from_config",
    "load_config",
]
