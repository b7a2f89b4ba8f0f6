"""Batch rewriting - run UseExplicitTypes over whole compilation units.

Each unit gets its own parse tree, SourceMutator and oracle; nothing is
shared between units, so several units may be rewritten in parallel.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from explicate.config.models import ExplicateConfig
from explicate.core.errors import ExplicateError, InternalError
from explicate.core.logging import (
    clear_request_id,
    configure_logging,
    get_logger,
    set_request_id,
)
from explicate.index.parser import JavaParser
from explicate.mutation.ops import MutationDelta, SourceMutator
from explicate.refactor.rule import RewriteOutcome, UseExplicitTypes

if TYPE_CHECKING:
    from explicate.refactor.host import TypeOracle

log = get_logger(__name__)

OracleFactory = Callable[[str], "TypeOracle"]


@dataclass
class RewriteReport:
    """Result of rewriting one compilation unit."""

    path: str
    source: str
    new_source: str
    outcomes: list[RewriteOutcome] = field(default_factory=list)
    imports_added: list[str] = field(default_factory=list)
    delta: MutationDelta | None = None
    # Set when the whole unit was skipped (language level, fault)
    skipped_reason: str | None = None
    error: ExplicateError | None = field(default=None, repr=False)

    @property
    def changed(self) -> bool:
        return self.new_source != self.source

    @property
    def applied(self) -> list[RewriteOutcome]:
        return [o for o in self.outcomes if o.applied]

    @property
    def abstained(self) -> list[RewriteOutcome]:
        return [o for o in self.outcomes if not o.applied]


def rewrite_source(
    source: str,
    oracle: TypeOracle,
    config: ExplicateConfig | None = None,
    *,
    path: str = "<source>",
    parser: JavaParser | None = None,
) -> RewriteReport:
    """Rewrite every eligible ``var`` declaration of one unit.

    Declarations are visited in document order with a fresh context each.
    Sources below the rule's minimal Java version are returned unchanged.
    """
    config = config or ExplicateConfig()
    rule = UseExplicitTypes(oracle, config=config.synthesis)
    if not rule.metadata.supports(config.rule.java_version):
        log.info(
            "unit_skipped",
            path=path,
            java_version=config.rule.java_version,
            minimal_java_version=rule.metadata.minimal_java_version,
        )
        return RewriteReport(
            path=path, source=source, new_source=source, skipped_reason="java_version"
        )

    unit = (parser or JavaParser()).parse(source)
    mutator = SourceMutator(unit)
    outcomes = [rule.process(declaration, mutator) for declaration in unit.local_declarations()]
    delta = mutator.delta()
    report = RewriteReport(
        path=path,
        source=source,
        new_source=mutator.render(),
        outcomes=outcomes,
        imports_added=delta.imports_added,
        delta=delta,
    )
    log.info(
        "unit_rewritten",
        path=path,
        declarations=len(outcomes),
        applied=len(report.applied),
        imports_added=len(report.imports_added),
        parse_errors=unit.error_count,
    )
    return report


def rewrite_sources(
    sources: Mapping[str, str],
    oracle_factory: OracleFactory,
    config: ExplicateConfig | None = None,
    *,
    configure_logs: bool = False,
) -> dict[str, RewriteReport]:
    """Rewrite several units, keyed by path.

    ``oracle_factory(path)`` builds the oracle for one unit. A unit whose
    rewrite fails unexpectedly is reported unchanged; the others proceed.
    Results keep the order of ``sources``. With ``configure_logs`` the
    ``logging`` section of ``config`` is applied before the first unit.
    """
    config = config or ExplicateConfig()
    if configure_logs:
        configure_logging(config.logging)

    def run(path: str) -> RewriteReport:
        set_request_id()
        try:
            return rewrite_source(sources[path], oracle_factory(path), config, path=path)
        except Exception as e:
            error = e if isinstance(e, ExplicateError) else InternalError.unexpected(
                str(e) or type(e).__name__, path=path, exception=type(e).__name__
            )
            log.warning("unit_failed", path=path, error=str(error))
            return RewriteReport(
                path=path,
                source=sources[path],
                new_source=sources[path],
                skipped_reason="unexpected_fault",
                error=error,
            )
        finally:
            clear_request_id()

    paths = list(sources)
    workers = min(config.execution.max_workers, len(paths)) or 1
    if workers == 1:
        reports = [run(path) for path in paths]
    else:
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="explicate") as executor:
            reports = list(executor.map(run, paths))

    log.info(
        "batch_rewritten",
        units=len(reports),
        changed=sum(1 for r in reports if r.changed),
        failed=sum(1 for r in reports if r.error is not None),
    )
    return {report.path: report for report in reports}
