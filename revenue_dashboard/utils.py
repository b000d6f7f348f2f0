import datetime as dt
import numbers
from decimal import Decimal
from typing import Any, Iterable, List, Mapping, Union

import pandas as pd

from .definitions import ELLIPSIS, PaginationItem, Revenue, YAxis

_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# Short-date layout per locale (lower-cased, dash separated)
_DATE_LAYOUTS = {
    "en": "{month} {day}, {year}",
    "en-us": "{month} {day}, {year}",
    "en-ca": "{month} {day}, {year}",
    "en-gb": "{day} {month} {year}",
    "en-au": "{day} {month} {year}",
    "en-nz": "{day} {month} {year}",
    "en-ie": "{day} {month} {year}",
    "en-in": "{day} {month} {year}",
}

DEFAULT_LOCALE = "en-US"


def today_key() -> str:
    """Cache-busting key that changes daily."""
    return dt.date.today().isoformat()


def format_currency(amount: int) -> str:
    """Format an amount in cents as US dollars, e.g. 123456789 -> "$1,234,567.89".

    Negative amounts put the sign before the currency symbol ("-$50.00").
    """
    if isinstance(amount, bool) or not isinstance(amount, numbers.Integral):
        raise TypeError(f"amount must be an integer number of cents, got {amount!r}")
    dollars = Decimal(int(amount)) / 100
    sign = "-" if dollars < 0 else ""
    return f"{sign}${abs(dollars):,.2f}"


def _layout_for(locale: str) -> str:
    key = (locale or DEFAULT_LOCALE).replace("_", "-").lower()
    try:
        return _DATE_LAYOUTS[key]
    except KeyError:
        raise ValueError(f"Unsupported locale: {locale!r}") from None


def check_locale(locale: str) -> str:
    """Return `locale` if dates can be formatted for it, raise ValueError otherwise."""
    _layout_for(locale)
    return locale


def format_date_to_local(date_str: str, locale: str = DEFAULT_LOCALE) -> str:
    """Render the calendar date of `date_str` as a short localized date.

    "2024-01-15T12:00:00" -> "Jan 15, 2024" (en-US) or "15 Jan 2024" (en-GB).
    The time of day is dropped; the date is taken as written, without any
    timezone conversion.
    """
    layout = _layout_for(locale)
    day = pd.to_datetime(date_str).date()
    return layout.format(month=_MONTH_ABBR[day.month - 1], day=day.day, year=f"{day.year:04d}")


def _as_revenue(point: Union[Revenue, Mapping[str, Any]]) -> Revenue:
    if isinstance(point, Revenue):
        return point
    return Revenue.model_validate(point)


def generate_y_axis(revenue: Iterable[Union[Revenue, Mapping[str, Any]]]) -> YAxis:
    """Chart ceiling rounded up to the next thousand plus "$<k>K" tick labels, top first."""
    points = [_as_revenue(p) for p in revenue]
    if not points:
        raise ValueError("generate_y_axis needs at least one revenue point")

    highest = max(p.revenue for p in points)
    if highest < 0:
        raise ValueError(f"revenue must not be negative, got maximum {highest}")

    top_label = -(-highest // 1000) * 1000
    labels = [f"${k}K" for k in range(top_label // 1000, -1, -1)]
    return YAxis(top_label=top_label, y_axis_labels=labels)


def generate_pagination(current_page: int, total_pages: int) -> List[PaginationItem]:
    """Page numbers to show in a pagination bar, with "..." for skipped runs.

    Up to 7 pages are all shown. Otherwise the first and last pages stay
    visible along with the neighbourhood of the current page.
    """
    if total_pages < 1:
        raise ValueError(f"total_pages must be at least 1, got {total_pages}")
    if not 1 <= current_page <= total_pages:
        raise ValueError(f"current_page must be within 1..{total_pages}, got {current_page}")

    if total_pages <= 7:
        return list(range(1, total_pages + 1))

    if current_page <= 3:
        return [1, 2, 3, ELLIPSIS, total_pages - 1, total_pages]

    if current_page >= total_pages - 2:
        return [1, 2, ELLIPSIS, total_pages - 2, total_pages - 1, total_pages]

    return [
        1,
        ELLIPSIS,
        current_page - 1,
        current_page,
        current_page + 1,
        ELLIPSIS,
        total_pages,
    ]
