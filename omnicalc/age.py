"""Age calculator: exact age, total days and next birthday between two dates.

Pure calendar arithmetic on ``datetime.date`` using dateutil's
relativedelta, which clamps month ends (a Feb 29 birthday falls on Feb 28 in
common years).
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Union

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from omnicalc.errors import AgeError
from omnicalc.models import AgeReport, NextBirthday

DateLike = Union[date, str]


def parse_date(value: DateLike) -> date:
    """Accept a date or an ISO-ish string ("2000-01-15", "15 Jan 2000")."""
    if isinstance(value, date):
        return value
    try:
        return date_parser.parse(value).date()
    except (ValueError, OverflowError) as e:
        raise AgeError(f"Invalid date: {value!r}") from e


def next_birthday(birth: date, target: date) -> NextBirthday:
    """First anniversary of ``birth`` on or after ``target``."""
    upcoming = birth + relativedelta(years=target.year - birth.year)
    if upcoming < target:
        upcoming = birth + relativedelta(years=target.year + 1 - birth.year)
    return NextBirthday(on=upcoming, days_until=(upcoming - target).days)


def calculate_age(birth: DateLike, target: Optional[DateLike] = None) -> Optional[AgeReport]:
    """Exact age of someone born on ``birth`` as of ``target`` (default today).

    Returns None when ``birth`` is after ``target``.
    """
    start = parse_date(birth)
    end = parse_date(target) if target is not None else date.today()
    if start > end:
        return None

    delta = relativedelta(end, start)
    return AgeReport(
        birth=start,
        target=end,
        years=delta.years,
        months=delta.months,
        days=delta.days,
        total_days=(end - start).days,
        next_birthday=next_birthday(start, end),
    )
