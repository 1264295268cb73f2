#!/usr/bin/env python
"""CLI for the claimcheck fact-check tool."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, field_validator

from claimcheck.config import create_from_config, get_default_config_path, load_config
from claimcheck.errors import FactCheckToolError

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    claim: str
    config: Path
    log: bool = False
    log_dir: str = "logs"

    @field_validator("claim")
    @classmethod
    def claim_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Claim must not be empty")
        return v

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


async def run(args: CLIArgs) -> None:
    """Check the claim with the given configuration and print the report.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    tool, run_logger = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
    )

    logger.info(f"Checking claim: {args.claim}")
    logger.info(f"Config: {args.config}")

    report = await tool.score_and_analyze(args.claim)
    print(report.to_json())

    summary = report.summary
    logger.info("\n--- Summary ---")
    logger.info(f"Top categories: {', '.join(summary.top_categories)}")
    logger.info(f"Average confidence: {summary.average_confidence:.2f}")
    for line in report.verification_priorities:
        logger.info(line)
    logger.info(f"Processing time: {report.batch_metrics.processing_time}ms")

    if run_logger and run_logger.last_log_path:
        logger.info(f"\nRun log written to: {run_logger.last_log_path}")


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Score and categorise a claim for fact-checking.")
    parser.add_argument(
        "claim",
        help="Claim or sentence to analyse",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Write a JSON trace of the run",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            claim=ns.claim,
            config=config_path,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(run(args))
    except (FactCheckToolError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
