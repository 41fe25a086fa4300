"""Timestamp and elapsed-time formatting.

Everything here is a pure function of its arguments except now().
"""

from datetime import datetime

TIMESTAMP_FORMAT = "%d-%m-%Y %H:%M:%S"


def now():
    """Current local time, timezone-aware, truncated to whole seconds."""
    return datetime.now().astimezone().replace(microsecond=0)


def format_timestamp(dt):
    return dt.strftime(TIMESTAMP_FORMAT)


def elapsed_seconds(begin, end):
    return int((end - begin).total_seconds())


def format_elapsed(seconds):
    """Render seconds as '<h>h <m>m <s>s', e.g. 3900 -> '1h 5m 0s'."""
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60
    return f"{hours}h {minutes}m {secs}s"


def decimal_hours(seconds):
    return round(seconds / 3600, 2)
