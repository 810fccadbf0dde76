"""Display tiers for severity levels."""

from carescore.core.exceptions import ValidationError
from carescore.models.enums import SeverityLevel

SEVERITY_TIERS = {
    SeverityLevel.MINIMAL: "success",
    SeverityLevel.MILD: "warning",
    SeverityLevel.MODERATE: "warning-strong",
    SeverityLevel.MODERATELY_SEVERE: "error",
    SeverityLevel.SEVERE: "error-strong",
}


def display_tier(severity_level: SeverityLevel | str) -> str:
    """Map a severity level to its UI tier tag.

    Raises:
        ValidationError: If the value is not a severity level
    """
    try:
        level = SeverityLevel(severity_level)
    except ValueError:
        raise ValidationError(
            f"Unknown severity level: {severity_level!r}",
            field="severity_level",
        ) from None
    return SEVERITY_TIERS[level]
