"""Re-administration schedule for assigned instruments."""

from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

from carescore.core.config import settings
from carescore.core.exceptions import ValidationError
from carescore.models.enums import AssessmentSchedule

BIWEEKLY_INTERVAL = timedelta(days=14)


def next_due_at(
    schedule: AssessmentSchedule | str,
    completed_at: datetime,
) -> datetime | None:
    """Compute when the next administration is due.

    Monthly schedules advance one calendar month, clamping to the last day
    of shorter months. One-off assessments never fall due again.

    Raises:
        ValidationError: If `schedule` is not a known frequency
    """
    try:
        schedule = AssessmentSchedule(schedule)
    except ValueError:
        raise ValidationError(
            f"Unknown schedule: {schedule!r}",
            field="schedule",
        ) from None

    if schedule == AssessmentSchedule.BIWEEKLY:
        return completed_at + BIWEEKLY_INTERVAL
    if schedule == AssessmentSchedule.MONTHLY:
        return completed_at + relativedelta(months=1)
    return None


def is_overdue(
    due_at: datetime | None,
    now: datetime,
    grace_days: int | None = None,
) -> bool:
    """Check if an assessment is more than `grace_days` past due."""
    if due_at is None:
        return False
    if grace_days is None:
        grace_days = settings.overdue_grace_days
    return due_at < now - timedelta(days=grace_days)
