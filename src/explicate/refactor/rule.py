"""The UseExplicitTypes rewrite rule.

Turns ``var i = 10;`` into ``int i = 10;``: the opposite of local variable
type inference. Each declaration moves through

    FILTERED -> RESOLVING -> SYNTHESIZING -> REWRITING -> APPLIED | ABSTAINED

and may abstain from any non-terminal state. Abstaining leaves the unit and
its imports untouched; only APPLIED changes them, together.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from explicate.config.constants import (
    RULE_ID,
    RULE_MINIMAL_JAVA_VERSION,
    RULE_SEE_URLS,
    RULE_TAGS,
)
from explicate.config.models import SynthesisConfig, parse_java_version
from explicate.core.errors import ExplicateError, InternalError, RewriteError
from explicate.core.logging import get_logger
from explicate.refactor import candidates
from explicate.refactor.context import CompilationContext
from explicate.refactor.rewriter import rewrite
from explicate.refactor.synthesizer import TypeSynthesizer
from explicate.types.semantic import describe

if TYPE_CHECKING:
    from explicate.index.parser import LocalDeclaration, NodeKey
    from explicate.refactor.host import RewriteHost, TypeOracle

log = get_logger(__name__)


@dataclass(frozen=True)
class RuleMetadata:
    """Static description used by the host for gating and documentation."""

    identifier: str
    minimal_java_version: str
    tags: frozenset[str]
    see_urls: tuple[str, ...]
    pmd_url: str | None = None
    sonar_id: str | None = None
    jsparrow_id: str | None = None

    def supports(self, java_version: str) -> bool:
        """Whether sources at ``java_version`` may use this rule."""
        return parse_java_version(java_version) >= parse_java_version(self.minimal_java_version)


class CandidateState(Enum):
    FILTERED = "filtered"
    RESOLVING = "resolving"
    SYNTHESIZING = "synthesizing"
    REWRITING = "rewriting"
    APPLIED = "applied"
    ABSTAINED = "abstained"


@dataclass
class RewriteOutcome:
    """What happened to one declaration."""

    key: NodeKey
    state: CandidateState
    # Last non-terminal state reached before abstaining
    stage: CandidateState
    variable_name: str | None = None
    type_text: str | None = None
    declaration: str | None = None
    imports_added: tuple[str, ...] = ()
    reason: str | None = None
    error: ExplicateError | None = field(default=None, repr=False)

    @property
    def applied(self) -> bool:
        return self.state is CandidateState.APPLIED


class UseExplicitTypes:
    """Replaces ``var`` with the explicit type of the initializer."""

    metadata = RuleMetadata(
        identifier=RULE_ID,
        minimal_java_version=RULE_MINIMAL_JAVA_VERSION,
        tags=RULE_TAGS,
        see_urls=RULE_SEE_URLS,
        pmd_url=RULE_SEE_URLS[1],
    )

    def __init__(self, oracle: TypeOracle, *, config: SynthesisConfig | None = None) -> None:
        self._oracle = oracle
        self._synthesizer = TypeSynthesizer((config or SynthesisConfig()).max_depth)

    def is_eligible(self, declaration: LocalDeclaration) -> bool:
        return candidates.is_eligible(declaration)

    def apply(self, declaration: LocalDeclaration, host: RewriteHost) -> bool:
        """Run the whole pipeline; True only when the replacement was committed."""
        return self.process(declaration, host).applied

    def process(self, declaration: LocalDeclaration, host: RewriteHost) -> RewriteOutcome:
        """Run the whole pipeline and report how far it got.

        Never raises: every failure becomes an ABSTAINED outcome.
        """
        stage = CandidateState.FILTERED
        try:
            verdict = candidates.evaluate(declaration)
            candidate = verdict.candidate
            if candidate is None:
                error = None
                if verdict.unsupported_initializer:
                    error = RewriteError.unsupported_initializer(
                        verdict.reason or "", declaration.unit.text_of(declaration.initializer)
                    )
                return self._abstain(declaration, stage, verdict.reason, error)

            stage = CandidateState.RESOLVING
            semantic_type = self._oracle.resolve(candidate.initializer, declaration.unit)
            if semantic_type is None:
                raise RewriteError.resolution_failure(declaration.unit.text_of(candidate.initializer))

            stage = CandidateState.SYNTHESIZING
            context = CompilationContext.for_declaration(declaration, host)
            result = self._synthesizer.synthesize(semantic_type, context)
            if result.failure is not None:
                raise result.failure
            type_text = result.text
            if type_text is None:
                raise InternalError.unexpected("synthesis produced no type")

            stage = CandidateState.REWRITING
            new = rewrite(candidate, type_text, context, host)
            if new is None:
                raise RewriteError.mutation_rejected(
                    "host declined the replacement", variable=candidate.variable_name
                )
        except ExplicateError as e:
            return self._abstain(declaration, stage, e.error_name.lower(), e)
        except Exception as e:
            error = InternalError.unexpected(str(e) or type(e).__name__, exception=type(e).__name__)
            log.debug("rewrite_fault", key=str(declaration.key), stage=stage.value, exc_info=True)
            return self._abstain(declaration, stage, "unexpected_fault", error)

        imports_added = tuple(directive.name for directive in context.pending)
        log.debug(
            "rewrite_applied",
            variable=candidate.variable_name,
            resolved=describe(semantic_type),
            type_text=type_text,
            imports_added=list(imports_added),
        )
        return RewriteOutcome(
            key=declaration.key,
            state=CandidateState.APPLIED,
            stage=CandidateState.REWRITING,
            variable_name=candidate.variable_name,
            type_text=type_text,
            declaration=new.render(),
            imports_added=imports_added,
        )

    def _abstain(
        self,
        declaration: LocalDeclaration,
        stage: CandidateState,
        reason: str | None,
        error: ExplicateError | None,
    ) -> RewriteOutcome:
        if error is not None:
            log.debug(
                "rewrite_abstained",
                key=str(declaration.key),
                stage=stage.value,
                code=error.error_name,
                message=error.message,
            )
        return RewriteOutcome(
            key=declaration.key,
            state=CandidateState.ABSTAINED,
            stage=stage,
            variable_name=declaration.variable_name,
            reason=reason,
            error=error,
        )
