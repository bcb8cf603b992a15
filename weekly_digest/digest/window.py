"""Reporting window computation and date range formatting."""

from datetime import datetime, timedelta

from pydantic import BaseModel, model_validator

WEEK = timedelta(days=7)


class ReportingWindow(BaseModel):
    """Half-open interval [start, end) covering one calendar week."""

    model_config = {"frozen": True}

    start: datetime
    end: datetime

    @model_validator(mode="after")
    def _check_length(self) -> "ReportingWindow":
        if self.end - self.start != WEEK:
            raise ValueError(
                f"Reporting window must span 7 days, got {self.end - self.start}"
            )
        return self

    def contains(self, moment: datetime) -> bool:
        """Check whether a timestamp falls within [start, end)."""
        return self.start <= moment < self.end


def compute_reporting_window(now: datetime) -> ReportingWindow:
    """Compute the most recently completed Monday-to-Monday week.

    A naive ``now`` is interpreted in the local timezone. The returned bounds
    are midnight in ``now``'s timezone.

    Args:
        now: Current time

    Returns:
        ReportingWindow from last week's Monday 00:00 to this week's Monday 00:00

    Example:
        >>> w = compute_reporting_window(datetime(2025, 6, 11, 15, 0).astimezone())
        >>> (w.start.day, w.end.day)
        (2, 9)
    """
    if now.tzinfo is None:
        now = now.astimezone()

    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    this_monday = midnight - timedelta(days=now.weekday())
    return ReportingWindow(start=this_monday - WEEK, end=this_monday)


def ordinal(day: int) -> str:
    """Return a day number with its English ordinal suffix (1st, 2nd, 11th)."""
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_day(moment: datetime) -> str:
    """Format a date as full month name and ordinal day, e.g. 'June 2nd'."""
    return f"{moment.strftime('%B')} {ordinal(moment.day)}"


def format_date_range(start: datetime, end: datetime) -> str:
    """Format a window for display, showing the last day included.

    The end bound is exclusive, so one day is subtracted before formatting.

    Example:
        >>> format_date_range(datetime(2025, 6, 2), datetime(2025, 6, 9))
        'June 2nd - June 8th'
    """
    return f"{format_day(start)} - {format_day(end - timedelta(days=1))}"
