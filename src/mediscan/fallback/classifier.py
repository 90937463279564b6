"""
Deterministic keyword classifier used when the upstream model is unavailable.

Pure function of (symptoms, age): no I/O and no shared mutable state, so it
doubles as a reference oracle in tests.
"""

from typing import Sequence

import structlog

from mediscan.fallback.rules import (
    CONDITION_RULES,
    DEFAULT_URGENCY,
    IMMEDIATE_ATTENTION,
    URGENCY_RULES,
    ConditionRule,
    UrgencyRule,
)
from mediscan.models.enums import UrgencyLevel
from mediscan.models.output_models import AnalysisResult, Condition, default_condition
from mediscan.monitoring.metrics import local_rule_matches_total

logger = structlog.get_logger(__name__)


class LocalClassifier:
    """
    Keyword classifier over ordered rule tables.

    Condition rules are not mutually exclusive: every match appends one
    condition in table order. Urgency rules are evaluated in priority order
    and the first match wins.
    """

    def __init__(
        self,
        condition_rules: Sequence[ConditionRule] = CONDITION_RULES,
        urgency_rules: Sequence[UrgencyRule] = URGENCY_RULES,
        immediate_attention: Sequence[str] = IMMEDIATE_ATTENTION,
    ):
        self.condition_rules = tuple(condition_rules)
        self.urgency_rules = tuple(urgency_rules)
        self.immediate_attention = tuple(immediate_attention)

    def classify(self, symptoms: str, age: int) -> AnalysisResult:
        """
        Classify free-text symptoms.

        Args:
            symptoms: Symptom description (matched case-insensitively)
            age: Patient age in years

        Returns:
            AnalysisResult with at least one condition, an urgency label and
            the fixed red-flag list
        """
        text = (symptoms or "").lower()

        conditions = self._match_conditions(text, age)
        urgency = self._determine_urgency(text, age)

        logger.debug(
            "Local classification complete",
            matched=[c.name for c in conditions],
            urgency=urgency.value,
        )

        return AnalysisResult(
            conditions=conditions,
            urgency=urgency.value,
            immediate_attention=list(self.immediate_attention),
        )

    def _match_conditions(self, text: str, age: int) -> list[Condition]:
        conditions = []
        for rule in self.condition_rules:
            if rule.matches(text, age):
                # Copies keep the rule table immutable from the caller's side
                conditions.append(rule.condition.model_copy(deep=True))
                local_rule_matches_total.labels(condition=rule.condition.name).inc()

        if not conditions:
            conditions.append(default_condition())
        return conditions

    def _determine_urgency(self, text: str, age: int) -> UrgencyLevel:
        for rule in self.urgency_rules:
            if rule.matches(text, age):
                return rule.urgency
        return DEFAULT_URGENCY


_default_classifier = LocalClassifier()


def classify(symptoms: str, age: int) -> AnalysisResult:
    """Classify with the built-in rule tables."""
    return _default_classifier.classify(symptoms, age)
