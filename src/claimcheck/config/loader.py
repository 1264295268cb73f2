"""YAML configuration loading utilities."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from claimcheck.config.models import ClaimCheckConfig, FactCheckConfig


def load_config(path: Path | str) -> ClaimCheckConfig:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML config file.

    Returns:
        Validated ClaimCheckConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    path = Path(path)
    with path.open() as f:
        raw = yaml.safe_load(f)

    return ClaimCheckConfig.model_validate(raw or {})


def get_default_config_path() -> Path:
    """Get path to default config file."""
    return Path(__file__).parent.parent.parent.parent / "configs" / "default.yaml"


def config_from_node_inputs(
    inputs: Mapping[str, Any] | None,
    *,
    api_key: str | None = None,
) -> FactCheckConfig:
    """Build a tool config from host-style node inputs.

    Keys may be camelCase or snake_case. ``None`` values are dropped so the
    defaults apply, and numeric strings are coerced by validation.

    Args:
        inputs: Raw node inputs, e.g. ``{"lowThreshold": "0.4"}``.
        api_key: Resolved credential; takes precedence over any key in inputs.

    Raises:
        pydantic.ValidationError: If an input has the wrong type or range.
    """
    values = {k: v for k, v in (inputs or {}).items() if v is not None}
    # the claim text itself is not configuration
    values.pop("input", None)
    if api_key is not None:
        values.pop("apiKey", None)
        values["api_key"] = api_key
    return FactCheckConfig.model_validate(values)
