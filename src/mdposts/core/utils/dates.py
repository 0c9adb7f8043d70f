"""Post date normalization and display formatting"""

import re
from datetime import date


DATE_RE = re.compile(r'^(\d{4})-(\d{2})-(\d{2})')
MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def normalize_date(value: str) -> str | None:
    """Return the YYYY-MM-DD prefix of value if it names a real calendar day, else None."""
    m = DATE_RE.match(value.strip())
    if not m:
        return None
    try:
        date(*(int(g) for g in m.groups()))
    except ValueError:
        return None
    return m.group(0)


def format_date(value: str) -> str:
    """'2026-02-14' -> 'February 14, 2026'. Empty stays empty; unparsable input is returned as-is."""
    if not value:
        return ''
    normalized = normalize_date(value)
    if normalized is None:
        return value
    year, month, day = (int(part) for part in normalized.split('-'))
    return f"{MONTHS[month - 1]} {day}, {year}"
