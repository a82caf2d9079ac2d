from datetime import date, datetime
from utils.constants import DATE_FORMAT, MONTH_FORMAT


def today() -> date:
    return date.today()


def parse_date(date_str: str | None) -> date | None:
    """Parse a stored date string, returning None on failure.

    Accepts ISO 'YYYY-MM-DD' as well as the non-padded 'YYYY-M-D' form
    older rows were written with.
    """
    if not date_str:
        return None
    text = date_str.strip()
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        pass
    parts = text.split("-")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        return None
    try:
        return date(int(parts[0]), int(parts[1]), int(parts[2]))
    except ValueError:
        return None


def to_date(value: date | str | None) -> date | None:
    """Coerce a date or a date string into a date. Raises ValueError on junk."""
    if value is None or isinstance(value, date):
        return value
    parsed = parse_date(value)
    if parsed is None:
        raise ValueError(f"Invalid date: {value}")
    return parsed


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def format_month(d: date) -> str:
    return d.strftime(MONTH_FORMAT)


def is_future(d: date) -> bool:
    return d > today()
