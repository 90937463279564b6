"""
Rule tables for the local keyword classifier.

Two ordered tables:
- CONDITION_RULES: every matching rule contributes its condition, in table order
- URGENCY_RULES: the first matching rule decides the urgency

Predicates receive the lowercased symptom text and the patient age.
"""

from dataclasses import dataclass
from typing import Callable

from mediscan.models.enums import UrgencyLevel
from mediscan.models.output_models import Condition

Predicate = Callable[[str, int], bool]


def contains_all(*terms: str) -> Predicate:
    """Match when every term occurs in the text."""
    return lambda text, age: all(term in text for term in terms)


def contains_any(*terms: str) -> Predicate:
    """Match when at least one term occurs in the text."""
    return lambda text, age: any(term in text for term in terms)


@dataclass(frozen=True)
class ConditionRule:
    """Appends a copy of `condition` when `predicate` matches."""

    predicate: Predicate
    condition: Condition

    def matches(self, text: str, age: int) -> bool:
        return self.predicate(text, age)


@dataclass(frozen=True)
class UrgencyRule:
    """Sets `urgency` when `predicate` matches (first match wins)."""

    predicate: Predicate
    urgency: UrgencyLevel

    def matches(self, text: str, age: int) -> bool:
        return self.predicate(text, age)


CONDITION_RULES: tuple[ConditionRule, ...] = (
    ConditionRule(
        predicate=contains_all("fever", "cough"),
        condition=Condition(
            name="Influenza (Flu)",
            confidence="75%",
            description="Viral infection affecting respiratory system",
            recommendations=[
                "Rest and stay hydrated",
                "Consider antiviral medications",
                "Use fever reducers as needed",
            ],
        ),
    ),
    ConditionRule(
        predicate=contains_any("runny nose", "sneezing"),
        condition=Condition(
            name="Common Cold",
            confidence="70%",
            description="Viral upper respiratory infection",
            recommendations=[
                "Get plenty of rest",
                "Stay hydrated",
                "Use over-the-counter cold medications",
            ],
        ),
    ),
    ConditionRule(
        predicate=contains_all("sore throat", "fever"),
        condition=Condition(
            name="Strep Throat",
            confidence="65%",
            description="Bacterial throat infection",
            recommendations=[
                "See doctor for strep test",
                "Complete antibiotics if prescribed",
                "Gargle warm salt water",
            ],
        ),
    ),
    ConditionRule(
        predicate=contains_any("shortness of breath", "chest pain"),
        condition=Condition(
            name="Seek Immediate Care",
            confidence="90%",
            description="These symptoms require urgent evaluation",
            recommendations=[
                "Go to emergency room",
                "Call emergency services if severe",
            ],
        ),
    ),
)


URGENCY_RULES: tuple[UrgencyRule, ...] = (
    UrgencyRule(
        predicate=contains_any("emergency", "severe pain", "bleeding"),
        urgency=UrgencyLevel.EMERGENCY,
    ),
    UrgencyRule(
        predicate=lambda text, age: "fever" in text and age > 65,
        urgency=UrgencyLevel.URGENT_CARE,
    ),
    UrgencyRule(
        predicate=contains_any("persistent", "worsening"),
        urgency=UrgencyLevel.PRIMARY_CARE,
    ),
)

DEFAULT_URGENCY = UrgencyLevel.SELF_CARE

# Independent of input
IMMEDIATE_ATTENTION: tuple[str, ...] = (
    "Difficulty breathing",
    "Chest pain or pressure",
    "Severe bleeding",
    "Sudden confusion",
    "High fever that doesn't respond to medication",
)
