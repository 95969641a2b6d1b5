"""FNOL processor: one field source in, one processing result out."""

from __future__ import annotations

import time
import traceback
from typing import TYPE_CHECKING

from loguru import logger

from fnol_agent.core.assembler import assemble_document
from fnol_agent.core.completeness import find_missing_fields
from fnol_agent.core.result import build_result, failed_result
from fnol_agent.core.routing import RoutingEngine
from fnol_agent.core.rules import DEFAULT_RULES, RuleTable
from fnol_agent.extraction.factory import create_strategy
from fnol_agent.schemas.result import ProcessingResult

if TYPE_CHECKING:
    from omegaconf import DictConfig

    from fnol_agent.extraction.source import FieldSource


class FNOLProcessor:
    """Run extraction, completeness checking and routing for one document.

    The processor holds only the read-only rule table, so one instance can
    serve concurrent requests without coordination.
    """

    def __init__(self, rules: RuleTable = DEFAULT_RULES) -> None:
        self.rules = rules
        self.engine = RoutingEngine(rules)

    @classmethod
    def from_config(cls, cfg: DictConfig) -> FNOLProcessor:
        """Build a processor from the full Hydra config (uses ``cfg.rules``)."""
        return cls(RuleTable.from_config(cfg.get("rules")))

    def process(self, source: FieldSource) -> ProcessingResult:
        """Process *source* and return the result.

        This is the only place a fault is caught: anything raised while
        extracting, assembling or routing becomes a FAILED result.
        """
        start = time.time()
        try:
            strategy = create_strategy(source, self.rules)
            document = assemble_document(strategy)
            missing = find_missing_fields(document)
            outcome = self.engine.decide(document, missing)
            result = build_result(document, missing, outcome)
        except Exception as exc:
            logger.error(
                "FNOL processing failed: {err}\n{tb}",
                err=exc,
                tb=traceback.format_exc(),
            )
            return failed_result(exc)

        logger.info(
            "FNOL processed in {ms:.0f}ms: status={status} route={route} missing={n}",
            ms=(time.time() - start) * 1000,
            status=result.status.value,
            route=outcome.decision.value,
            n=len(missing),
        )
        return result
