"""Routing engine: an ordered decision list over the assembled claim.

Rules are evaluated top to bottom and the first match wins:

1. any mandatory field missing  -> MANUAL_REVIEW
2. fraud keyword in description -> INVESTIGATION
3. injury claim                 -> SPECIALIST_QUEUE
4. damage below fast-track line -> FAST_TRACK
5. anything else                -> STANDARD_PROCESSING

Each rule carries its own reasoning builder, so a rule can be exercised and
inspected on its own.  Warnings are computed independently of the route.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable, NamedTuple, Optional

from loguru import logger

from fnol_agent.core.rules import DEFAULT_RULES, RuleTable
from fnol_agent.schemas.claim import ClaimType, FNOLDocument
from fnol_agent.schemas.result import RoutingDecision

WARN_NO_INCIDENT_TIME = "Incident time not provided - may affect investigation"
WARN_NO_ATTACHMENTS = "No attachments/supporting documents provided"
WARN_HIGH_VALUE = "High damage amount - may require additional approval"


@dataclass(frozen=True)
class RoutingContext:
    """Everything a rule may look at."""

    document: FNOLDocument
    missing_fields: tuple[str, ...]
    rules: RuleTable

    @property
    def damage(self) -> Optional[Decimal]:
        return self.document.estimated_damage

    @property
    def fraud_keywords(self) -> list[str]:
        incident = self.document.incident_information
        if incident is None:
            return []
        return incident.fraud_indicators(self.rules.fraud_keywords)


class RoutingRule(NamedTuple):
    name: str
    applies: Callable[[RoutingContext], bool]
    decision: RoutingDecision
    explain: Callable[[RoutingContext], list[str]]


@dataclass(frozen=True)
class RoutingOutcome:
    decision: RoutingDecision
    rule: str
    reasoning: str
    warnings: list[str] = field(default_factory=list)


def _money(amount: Decimal) -> str:
    return f"${amount:,.2f}"


# ---------------------------------------------------------------------------
# Reasoning builders
# ---------------------------------------------------------------------------


def _explain_manual_review(ctx: RoutingContext) -> list[str]:
    return [
        "Missing mandatory fields: " + ", ".join(ctx.missing_fields),
        "Manual review required to complete claim information",
    ]


def _explain_investigation(ctx: RoutingContext) -> list[str]:
    reasons = ["Fraud indicators detected in incident description"]
    reasons += [f"Contains keyword: '{kw}'" for kw in ctx.fraud_keywords]
    reasons.append("Requires investigation before processing")
    return reasons


def _explain_specialist(ctx: RoutingContext) -> list[str]:
    return [
        "Claim type is INJURY - requires specialist handling",
        "Routing to medical claims specialist queue",
    ]


def _explain_fast_track(ctx: RoutingContext) -> list[str]:
    damage = ctx.damage or Decimal("0")
    return [
        f"Estimated damage of {_money(damage)} is below the fast-track threshold "
        f"of {_money(ctx.rules.fast_track_threshold)}",
        "All mandatory fields are present",
        "No fraud indicators detected",
    ]


def _explain_standard(ctx: RoutingContext) -> list[str]:
    reasons = ["Claim meets all standard processing criteria"]
    if ctx.damage is not None:
        reasons.append(
            f"Estimated damage: {_money(ctx.damage)} (at or above the fast-track threshold "
            f"of {_money(ctx.rules.fast_track_threshold)})"
        )
    return reasons


DECISION_RULES: tuple[RoutingRule, ...] = (
    RoutingRule(
        "missing-fields",
        lambda ctx: bool(ctx.missing_fields),
        RoutingDecision.MANUAL_REVIEW,
        _explain_manual_review,
    ),
    RoutingRule(
        "fraud-keywords",
        lambda ctx: bool(ctx.fraud_keywords),
        RoutingDecision.INVESTIGATION,
        _explain_investigation,
    ),
    RoutingRule(
        "injury-claim",
        lambda ctx: ctx.document.claim_type is ClaimType.INJURY,
        RoutingDecision.SPECIALIST_QUEUE,
        _explain_specialist,
    ),
    RoutingRule(
        "low-damage",
        lambda ctx: ctx.damage is not None and ctx.damage < ctx.rules.fast_track_threshold,
        RoutingDecision.FAST_TRACK,
        _explain_fast_track,
    ),
    RoutingRule(
        "default",
        lambda ctx: True,
        RoutingDecision.STANDARD_PROCESSING,
        _explain_standard,
    ),
)


class RoutingEngine:
    """Apply :data:`DECISION_RULES` (or a substitute list) with first-match-wins."""

    def __init__(
        self,
        rules: RuleTable = DEFAULT_RULES,
        decision_rules: tuple[RoutingRule, ...] = DECISION_RULES,
    ) -> None:
        if not decision_rules:
            raise ValueError("Routing engine needs at least one rule")
        self.rules = rules
        self.decision_rules = decision_rules

    def decide(self, document: FNOLDocument, missing_fields: list[str]) -> RoutingOutcome:
        ctx = RoutingContext(document, tuple(missing_fields), self.rules)
        for rule in self.decision_rules:
            if rule.applies(ctx):
                logger.info(
                    "Routing rule {rule} matched -> {decision}",
                    rule=rule.name,
                    decision=rule.decision.value,
                )
                return RoutingOutcome(
                    decision=rule.decision,
                    rule=rule.name,
                    reasoning=". ".join(rule.explain(ctx)) + ".",
                    warnings=self.warnings(document),
                )
        raise LookupError("No routing rule matched; the rule list needs a catch-all")

    def warnings(self, document: FNOLDocument) -> list[str]:
        """Soft issues that do not change the route."""
        warnings: list[str] = []
        incident = document.incident_information
        if incident is not None and not incident.incident_time:
            warnings.append(WARN_NO_INCIDENT_TIME)
        if not document.attachments:
            warnings.append(WARN_NO_ATTACHMENTS)
        damage = document.estimated_damage
        if damage is not None and damage > self.rules.high_value_threshold:
            warnings.append(WARN_HIGH_VALUE)
        return warnings
