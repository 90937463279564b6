"""
Enumerations for MediScan data models.
"""

from enum import Enum


class UrgencyLevel(str, Enum):
    """
    Fixed urgency labels produced by the local classifier and requested
    from the upstream model.

    Ordered from most to least severe. Results sourced from raw model text
    may carry a free-form label instead, so result models store urgency as
    a plain string.
    """

    EMERGENCY = "Emergency"
    URGENT_CARE = "Urgent Care"
    PRIMARY_CARE = "Primary Care"
    SELF_CARE = "Self-Care"


class UrgencyCategory(str, Enum):
    """
    Display category for an urgency label (CSS class used by the UI).
    """

    EMERGENCY = "urgency-emergency"
    URGENT = "urgency-urgent"
    PRIMARY = "urgency-primary"
    SELF = "urgency-self"

    @classmethod
    def from_label(cls, urgency: str | None) -> "UrgencyCategory":
        """
        Map any urgency label, fixed or free-form, to a display category.

        Case-insensitive substring checks, most severe first:
        "emergency", then "urgent", then "primary", else self-care.
        """
        label = (urgency or "").lower()
        if "emergency" in label:
            return cls.EMERGENCY
        if "urgent" in label:
            return cls.URGENT
        if "primary" in label:
            return cls.PRIMARY
        return cls.SELF
