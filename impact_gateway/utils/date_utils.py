"""Date manipulation utilities"""

from datetime import date


def subtract_years(from_date: date, years: int) -> date:
    """Same calendar day `years` earlier (Feb 29 rolls forward to Mar 1)"""
    try:
        return from_date.replace(year=from_date.year - years)
    except ValueError:
        return date(from_date.year - years, 3, 1)


def shift_months(from_date: date, months: int) -> date:
    """First day of the month `months` away from from_date (negative goes back)"""
    index = from_date.year * 12 + (from_date.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def age_in_years(start: date, end: date) -> float:
    """Elapsed years between two dates using a flat 365-day year"""
    return (end - start).days / 365
