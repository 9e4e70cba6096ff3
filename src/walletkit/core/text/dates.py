"""Token-substitution date formatting.

Supported tokens:

    y+  year (width 2 -> last two digits, width 4 -> full year)
    M+  month 1-12
    d+  day of month
    h+  hour, 24-hour clock
    m+  minute
    s+  second
    q+  quarter 1-4
    S   milliseconds

Only the first run of each token class is replaced. "hh:mm hh" becomes
"09:05 hh", not "09:05 09".
"""

import re
from datetime import datetime
from typing import Final

DEFAULT_DATE_FORMAT: Final[str] = "yyyy-MM-dd hh:mm:ss"

_YEAR_TOKEN = re.compile(r"(y+)")

# Substitution order matters: month before minute, both before milliseconds
_TOKEN_PATTERNS: Final[tuple[tuple[str, re.Pattern[str]], ...]] = (
    ("month", re.compile(r"(M+)")),
    ("day", re.compile(r"(d+)")),
    ("hour", re.compile(r"(h+)")),
    ("minute", re.compile(r"(m+)")),
    ("second", re.compile(r"(s+)")),
    ("quarter", re.compile(r"(q+)")),
    ("millisecond", re.compile(r"(S)")),
)


def _token_values(value: datetime) -> dict[str, int]:
    return {
        "month": value.month,
        "day": value.day,
        "hour": value.hour,
        "minute": value.minute,
        "second": value.second,
        "quarter": (value.month + 2) // 3,
        "millisecond": value.microsecond // 1000,
    }


def format_date(value: datetime, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    """Render value using the token format fmt.

    Args:
        value: Date/time to render. Used as-is, no timezone conversion.
        fmt: Format string (default "yyyy-MM-dd hh:mm:ss").

    Returns:
        Formatted string.

    Example:
        >>> format_date(datetime(2024, 3, 7, 9, 5, 2))
        '2024-03-07 09:05:02'
        >>> format_date(datetime(2024, 11, 1), "yy/M q")
        '24/11 4'
    """
    year_match = _YEAR_TOKEN.search(fmt)
    if year_match:
        token = year_match.group(1)
        # Negative start for widths > 4 counts from the end, e.g. "yyyyy" -> "4"
        fmt = fmt.replace(token, str(value.year)[4 - len(token) :], 1)

    values = _token_values(value)
    for name, pattern in _TOKEN_PATTERNS:
        match = pattern.search(fmt)
        if not match:
            continue
        token = match.group(1)
        number = values[name]
        rendered = str(number) if len(token) == 1 else str(number).zfill(len(token))
        fmt = fmt.replace(token, rendered, 1)

    return fmt
