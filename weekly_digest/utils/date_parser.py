"""Parsing of the --as-of reference time for reproducible digest runs."""

from datetime import datetime, timezone

# Date formats accepted for the reference time
AS_OF_FORMATS = [
    "%Y-%m-%d",  # 2024-01-01
    "%Y-%m-%dT%H:%M:%SZ",  # 2024-01-01T10:00:00Z
    "%Y-%m-%dT%H:%M:%S",  # 2024-01-01T10:00:00
    "%B %d, %Y",  # January 1, 2024
    "%b %d, %Y",  # Jan 1, 2024
    "%B %d %Y",  # January 1 2024
    "%b %d %Y",  # Jan 1 2024
    "%Y/%m/%d",  # 2024/01/01
]


def parse_as_of(date_str: str) -> datetime:
    """Parse a reference time into a timezone-aware datetime.

    A trailing ``Z`` means UTC; every other format is read as local time.

    Args:
        date_str: Date string to parse

    Returns:
        Timezone-aware datetime

    Raises:
        ValueError: If date format is not recognized
    """
    value = date_str.strip()
    for fmt in AS_OF_FORMATS:
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        if fmt.endswith("Z"):
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone()

    raise ValueError(
        f"Unable to parse date '{date_str}'. "
        f"Supported formats include: YYYY-MM-DD, YYYY-MM-DDTHH:MM:SSZ, "
        f"'January 1, 2024', 'Jan 1 2024', YYYY/MM/DD"
    )
