from datetime import date, datetime
from typing import List, Optional, Sequence, TypeVar
import regex as re
from dateutil.relativedelta import relativedelta

T = TypeVar("T")

FIELD_DELIMITER = "/"

MONTH_MAP = {
    "JAN": 1, "FEB": 2, "MAR": 3, "APR": 4, "MAY": 5, "JUN": 6,
    "JUL": 7, "AUG": 8, "SEP": 9, "OCT": 10, "NOV": 11, "DEC": 12,
}

# ddMMMyy, e.g. 12JUL64
_DOC_DATE_RE = re.compile(r"(?i)^\s*(\d{1,2})([A-Z]{3})(\d{2})\s*$")
# ddMMyy[HHmm[ss]]
_PNR_DATE_TIME_RE = re.compile(r"^(\d{2})(\d{2})(\d{2})(?:(\d{2})(\d{2})(\d{2})?)?$")

# two-digit years resolve into the window [today - 80y, today + 20y)
CENTURY_WINDOW_YEARS = 80


def split_free_text(free_text: Optional[str], delimiter: str = FIELD_DELIMITER) -> Optional[List[str]]:
    """Split a free-text payload on the delimiter, trimming each field.

    Empty fields keep their position. ``None`` input gives ``None`` so callers
    can tell "no free text" apart from "no fields".
    """
    if free_text is None:
        return None
    return [s.strip() for s in free_text.split(delimiter)]


def safe_get(values: Optional[Sequence[T]], i: int) -> Optional[T]:
    if values is None or i < 0 or i >= len(values):
        return None
    return values[i]


def is_blank(s: Optional[str]) -> bool:
    return s is None or not s.strip()


def is_empty(s: Optional[str]) -> bool:
    return s is None or s == ""


def expand_year(yy: int, month: int, day: int, today: Optional[date] = None) -> int:
    today = today or date.today()
    start = today - relativedelta(years=CENTURY_WINDOW_YEARS)
    year = start.year - start.year % 100 + yy
    if (year, month, day) < (start.year, start.month, start.day):
        year += 100
    return year


def parse_doc_date(s: Optional[str]) -> Optional[date]:
    """Parse a travel-document date (``12JUL64``). Returns None when it does not fit."""
    if is_blank(s):
        return None
    m = _DOC_DATE_RE.match(s)
    if not m:
        return None
    month = MONTH_MAP.get(m.group(2).upper())
    if not month:
        return None
    day, yy = int(m.group(1)), int(m.group(3))
    try:
        return date(expand_year(yy, month, day), month, day)
    except ValueError:
        return None


def parse_date_time(dt: Optional[str]) -> Optional[datetime]:
    """PNR date stamps: ddMMyy, ddMMyyHHmm or ddMMyyHHmmss."""
    if is_blank(dt):
        return None
    m = _PNR_DATE_TIME_RE.match(dt.strip())
    if not m:
        return None
    day, month, yy = int(m.group(1)), int(m.group(2)), int(m.group(3))
    hh, mm, ss = (int(g) if g else 0 for g in m.group(4, 5, 6))
    try:
        return datetime(expand_year(yy, month, day), month, day, hh, mm, ss)
    except ValueError:
        return None


def calculate_age(dob: Optional[date], today: Optional[date] = None) -> Optional[int]:
    if dob is None:
        return None
    if isinstance(dob, datetime):
        dob = dob.date()
    return relativedelta(today or date.today(), dob).years


def prep_telephone_number(s: Optional[str]) -> Optional[str]:
    """Keep digits only."""
    if is_blank(s):
        return None
    return re.sub(r"\D", "", s)
