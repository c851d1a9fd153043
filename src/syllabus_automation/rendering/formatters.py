"""Small utility formatters shared by the section and table renderers."""

import textwrap
from typing import Any

from ..config.validation import coerce_credits, parse_iso_date

SEASONS = {
    "SP": "Spring",
    "FA": "Fall",
    "SU": "Summer",
    "WI": "Winter",
}

CALLOUT_TYPES = ("warning", "important", "note", "tip")


def format_semester_display(semester: str | None) -> str:
    """Turn a semester code into a display name.

    >>> format_semester_display("SP2026")
    'Spring 2026'
    >>> format_semester_display("XX2026")
    'Unknown 2026'
    """
    if semester is None or not str(semester).strip():
        return "TBA"

    code = str(semester).strip()
    season = SEASONS.get(code[:2], "Unknown")
    year = code[2:6]
    return f"{season} {year}".strip()


def format_email_link(email: str | None, obfuscate: bool = False) -> str:
    """Format an email address as a markdown ``mailto:`` link.

    Args:
        email: Email address
        obfuscate: Show a generic "Email" label instead of the address

    Returns:
        Markdown link, or "Email TBA" when no address is given
    """
    if email is None or not str(email).strip():
        return "Email TBA"

    email = str(email).strip()
    if obfuscate:
        return f"[Email](mailto:{email})"
    return f"[{email}](mailto:{email})"


def format_credits(credits: Any) -> str:
    """Format a credit-hour count with the right plural."""
    number = coerce_credits(credits)
    if number is None or number == 0:
        return "Credit hours not specified"

    unit = "credit hour" if number == 1 else "credit hours"
    return f"{number} {unit}"


def format_date_range(start_date: Any, end_date: Any) -> str:
    """Format a start/end pair as ``"Jan 21 - May 08, 2026"``.

    Falls back to the values as written if either one is not an ISO date.
    """
    start = parse_iso_date(start_date)
    end = parse_iso_date(end_date)
    if start is None or end is None:
        return f"{start_date} - {end_date}"

    return f"{start.strftime('%b %d')} - {end.strftime('%b %d, %Y')}"


def format_callout_box(content: str, type: str = "note") -> str:
    """Wrap content in a Quarto callout block; unknown types become notes."""
    if type not in CALLOUT_TYPES:
        type = "note"
    return f"::: {{.callout-{type}}}\n{content}\n:::"


def format_wrapped_text(text: str, width: int = 80) -> str:
    """Re-wrap text to the given line width, collapsing whitespace."""
    return textwrap.fill(" ".join(str(text).split()), width=width)
