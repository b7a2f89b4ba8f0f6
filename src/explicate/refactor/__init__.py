"""Refactor module - the UseExplicitTypes rewrite rule and its batch driver."""

from explicate.refactor.context import CompilationContext
from explicate.refactor.ops import RewriteReport, rewrite_source, rewrite_sources
from explicate.refactor.rule import (
    CandidateState,
    RewriteOutcome,
    RuleMetadata,
    UseExplicitTypes,
)
from explicate.refactor.synthesizer import SynthesisResult, TypeSynthesizer, synthesize

__all__ = [
    "CandidateState",
    "CompilationContext",
    "RewriteOutcome",
    "RewriteReport",
    "RuleMetadata",
    "SynthesisResult",
    "TypeSynthesizer",
    "UseExplicitTypes",
    "rewrite_source",
    "rewrite_sources",
    "synthesize",
]
