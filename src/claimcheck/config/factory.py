"""Factory functions to create components from configuration."""

from pathlib import Path

from claimcheck.config.models import ClaimCheckConfig
from claimcheck.run_logger import RunLogger
from claimcheck.tool import FactCheckTool


def create_from_config(
    config: ClaimCheckConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[FactCheckTool, RunLogger | None]:
    """Create a fact-check tool from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (tool, run_logger).
        run_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    run_logger: RunLogger | None = None
    if log_enabled:
        run_logger = RunLogger(log_dir=log_dir, enabled=True)

    tool = FactCheckTool(config.tool, run_logger=run_logger)
    return (tool, run_logger)
