"""Config module exports."""

from explicate.config.loader import load_config
from explicate.config.models import (
    ExecutionConfig,
    ExplicateConfig,
    LoggingConfig,
    RuleConfig,
    SynthesisConfig,
)

__all__ = [
    "load_config",
    "ExplicateConfig",
    "ExecutionConfig",
    "LoggingConfig",
    "RuleConfig",
    "SynthesisConfig",
]
