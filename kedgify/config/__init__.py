# kedgify/config/__init__.py
"""
Configuration management for kedgify.

    from kedgify.config import load_config

    config = load_config()  # package defaults
    config.resolver.patterns  # always present
"""

from kedgify.config.loader import deep_merge, load_config
from kedgify.config.schema import KedgifyConfig, LoggingConfig, ResolverConfig

__all__ = [
    "load_config",
    "deep_merge",
    "KedgifyConfig",
    "ResolverConfig",
    "LoggingConfig",
]
