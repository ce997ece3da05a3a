"""
Centralized plan limit keys.

Every catalog plan stores its numeric policy limits under these key names.
Import from this module instead of hardcoding key strings in validators.
"""


class PlanLimitKeys:
    """Catalog key names for the per-plan policy limits."""

    RECURRING_SCHEDULE_COUNT: str = "recurring_schedule_count"
    SPECIFIC_DATE_COUNT: str = "specific_date_count"
    SCALING_RULES_COUNT: str = "scaling_rules_count"

    @classmethod
    def all(cls) -> tuple[str, ...]:
        """Return every limit key in validation order"""
        return (
            cls.RECURRING_SCHEDULE_COUNT,
            cls.SPECIFIC_DATE_COUNT,
            cls.SCALING_RULES_COUNT,
        )
