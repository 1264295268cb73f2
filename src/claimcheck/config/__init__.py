"""Configuration module for claimcheck."""

from claimcheck.config.factory import create_from_config
from claimcheck.config.loader import (
    config_from_node_inputs,
    get_default_config_path,
    load_config,
)
from claimcheck.config.models import ClaimCheckConfig, FactCheckConfig, LoggingConfig

__all__ = [
    "ClaimCheckConfig",
    "FactCheckConfig",
    "LoggingConfig",
    "config_from_node_inputs",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
