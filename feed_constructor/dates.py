"""Date rendering for the different feed formats.

Feeds store dates as strings. Callers may pass a string, which is kept as
given, or a date/datetime, which is rendered in the style the target format
uses.
"""

from datetime import date, datetime, time
from email.utils import format_datetime
from enum import Enum

from dateutil import tz

DateValue = str | date | datetime


class DateStyle(Enum):
    RFC822 = "rfc822"  # RSS 2.0 pubDate / lastBuildDate
    RFC3339 = "rfc3339"  # Atom updated, dc:date


def format_date(value: DateValue, style: DateStyle) -> str:
    """Render ``value`` in ``style``. Strings pass through untouched.

    Naive datetimes are assumed to be UTC. A plain date is taken as midnight
    UTC of that day.

    Raises:
        TypeError: If ``value`` is not a string, date or datetime
    """
    if isinstance(value, str):
        return value
    if not isinstance(value, date):
        raise TypeError(
            f"expected a str, date or datetime, got {type(value).__name__}"
        )
    # datetime is a subclass of date
    if not isinstance(value, datetime):
        value = datetime.combine(value, time())
    if value.tzinfo is None:
        value = value.replace(tzinfo=tz.UTC)

    if style is DateStyle.RFC822:
        return format_datetime(value)
    text = value.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text
