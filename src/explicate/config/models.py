"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (EXPLICATE__SECTION__KEY)
3. Repo YAML (.explicate/config.yaml)
4. Built-in defaults (this file)

Environment Variable Format:
    EXPLICATE__<SECTION>__<KEY>=<VALUE>

Examples:
    EXPLICATE__LOGGING__LEVEL=DEBUG
    EXPLICATE__SYNTHESIS__MAX_DEPTH=16
    EXPLICATE__EXECUTION__MAX_WORKERS=4
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from explicate.config.constants import DEFAULT_TYPE_DEPTH, MAX_TYPE_DEPTH_CEILING

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_java_version(version: str) -> int:
    """Feature release number: ``"1.8"`` -> 8, ``"17.0.2"`` -> 17."""
    head = version.strip().removeprefix("1.").split(".", 1)[0]
    if not head.isdigit():
        raise ValueError(f"Not a Java version: {version!r}")
    return int(head)


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        EXPLICATE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every abstained declaration.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class SynthesisConfig(BaseModel):
    """Explicit type synthesis configuration.

    Env vars:
        EXPLICATE__SYNTHESIS__MAX_DEPTH: Max nesting depth of a synthesized type
    """

    max_depth: int = Field(
        default=DEFAULT_TYPE_DEPTH,
        description="Max nesting depth of generic arguments, arrays and wildcards. "
        "Deeper types abstain instead of being rendered.",
    )

    @field_validator("max_depth")
    @classmethod
    def validate_max_depth(cls, v: int) -> int:
        if not (1 <= v <= MAX_TYPE_DEPTH_CEILING):
            raise ValueError(f"max_depth must be 1-{MAX_TYPE_DEPTH_CEILING}, got {v}")
        return v


class RuleConfig(BaseModel):
    """Rule gating configuration.

    Env vars:
        EXPLICATE__RULE__JAVA_VERSION: Language level of the rewritten sources
    """

    java_version: str = Field(
        default="17",
        description="Language level of the sources. The rule is skipped below its minimal version.",
    )

    @field_validator("java_version")
    @classmethod
    def validate_java_version(cls, v: str) -> str:
        try:
            parse_java_version(v)
        except ValueError as e:
            raise ValueError(f"java_version must look like '8', '1.8' or '17.0.2', got {v!r}") from e
        return v


class ExecutionConfig(BaseModel):
    """Batch execution configuration.

    Env vars:
        EXPLICATE__EXECUTION__MAX_WORKERS: Compilation units rewritten in parallel
    """

    max_workers: int = Field(
        default=1,
        description="Compilation units rewritten in parallel. Each unit owns its own state.",
    )

    @field_validator("max_workers")
    @classmethod
    def validate_max_workers(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_workers must be >= 1, got {v}")
        return v


class ExplicateConfig(BaseModel):
    """Root configuration for Explicate."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    synthesis: SynthesisConfig = Field(default_factory=SynthesisConfig)
    rule: RuleConfig = Field(default_factory=RuleConfig)
    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)
