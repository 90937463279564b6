"""
Local fallback analysis.

- rules.py: ordered condition and urgency rule tables
- classifier.py: LocalClassifier evaluating the tables
"""

from mediscan.fallback.classifier import LocalClassifier, classify
from mediscan.fallback.rules import (
    CONDITION_RULES,
    IMMEDIATE_ATTENTION,
    URGENCY_RULES,
    ConditionRule,
    UrgencyRule,
)

__all__ = [
    "LocalClassifier",
    "classify",
    "ConditionRule",
    "UrgencyRule",
    "CONDITION_RULES",
    "URGENCY_RULES",
    "IMMEDIATE_ATTENTION",
]
