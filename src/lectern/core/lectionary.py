"""Liturgical reading calendar anchored to the date of Easter."""

import calendar
import logging
from datetime import date, timedelta

from lectern.core.errors import CalendarError
from lectern.core.models import LiturgicalDay
from lectern.core.readings import (
    CYCLE_LENGTH,
    EVENING_READINGS,
    MORNING_READINGS,
    MOVABLE_FEASTS,
    PSALTER,
)

logger = logging.getLogger(__name__)

# Entry dropped from the cycle in common years
COMMON_YEAR_SKIPPED_INDEX = 58


def easter(year: int) -> date:
    """Date of Easter Sunday in the Gregorian calendar.

    Uses the anonymous Gregorian algorithm (Meeus/Jones/Butcher).

    Raises:
        CalendarError: if the result is not a valid date.
    """
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    try:
        return date(year, month, day + 1)
    except ValueError as err:
        raise CalendarError(f"Could not compute Easter for {year}: {err}") from err


def reading_skeleton(year: int) -> list[LiturgicalDay]:
    """Undated daily readings for a year, before movable feasts are added.

    Pairs the lesson tables with the 30 day psalter. Leap years keep all
    360 entries; common years drop one so the year comes out at 365 days
    once the feasts are inserted.
    """
    days = [
        LiturgicalDay(
            morning=(PSALTER[i % len(PSALTER)][0], *MORNING_READINGS[i]),
            evening=(PSALTER[i % len(PSALTER)][1], *EVENING_READINGS[i]),
        )
        for i in range(CYCLE_LENGTH)
    ]
    if not calendar.isleap(year):
        del days[COMMON_YEAR_SKIPPED_INDEX]
    return days


def insert_movable_feasts(days: list[LiturgicalDay], easter_ordinal: int) -> list[LiturgicalDay]:
    """Insert the Easter-relative observances into a skeleton in place.

    Feasts go in by ascending offset at ``easter_ordinal + offset``, so every
    earlier insert sits before the next index and each feast lands on its
    final ordinal.
    """
    for offset, description, morning, evening in MOVABLE_FEASTS:
        days.insert(
            easter_ordinal + offset,
            LiturgicalDay(morning=morning, evening=evening, description=description),
        )
    return days


def build_year(year: int) -> list[LiturgicalDay]:
    """Dated readings for every day of a year.

    Raises:
        CalendarError: if Easter cannot be computed for the year.
    """
    easter_day = easter(year)
    new_year = date(year, 1, 1)
    logger.debug("Easter %d falls on %s", year, easter_day)

    days = insert_movable_feasts(reading_skeleton(year), (easter_day - new_year).days)
    return [
        day.model_copy(update={"day": new_year + timedelta(days=i), "ordinal": i})
        for i, day in enumerate(days)
    ]


def day_for(year_days: list[LiturgicalDay], when: date) -> LiturgicalDay:
    """Row of a calendar built by :func:`build_year` for a given date.

    Raises:
        CalendarError: if the date is not covered by the calendar.
    """
    ordinal = when.timetuple().tm_yday - 1
    if ordinal >= len(year_days) or year_days[ordinal].day != when:
        raise CalendarError(f"{when} is not in this calendar")
    return year_days[ordinal]
