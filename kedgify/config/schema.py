# kedgify/config/schema.py

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kedgify.ingestion.source.resolver import DEFAULT_PATTERNS
from kedgify.logging.logger import DEFAULT_FORMAT


class ResolverConfig(BaseModel):
    patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PATTERNS),
        min_length=1,
        description="Glob patterns used to expand directories, in order",
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("patterns")
    @classmethod
    def _plain_file_patterns(cls, value: list[str]) -> list[str]:
        # Patterns match names inside one directory; expansion never recurses.
        for pattern in value:
            if not pattern.strip():
                raise ValueError("empty pattern")
            if "/" in pattern or "\\" in pattern or os.sep in pattern:
                raise ValueError(f"pattern {pattern!r} must not contain a path separator")
            if "**" in pattern:
                raise ValueError(f"recursive pattern {pattern!r} is not supported")
        return value


class LoggingConfig(BaseModel):
    level: str = Field("INFO", description="Root log level name")
    format: str = Field(DEFAULT_FORMAT, description="logging.Formatter format string")

    model_config = ConfigDict(extra="forbid")

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        name = value.upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level {value!r}")
        return name


class KedgifyConfig(BaseModel):
    """
    Central configuration for kedgify.

    Rules:
    - The pipeline is built FROM config (it does not own config).
    - Values are passed explicitly; nothing here is process-wide state.
    """

    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid", frozen=True)
