"""End-of-life classification for assets — pure functions, no I/O.

Every asset is due for replacement three years after purchase. The time left
until that date is mapped to a status band:

    EXPIRED   remaining <= 0 days
    CRITICAL  0 < remaining < 90 days     (near end of life)
    WARNING   90 <= remaining < 180 days  (approaching end of life)
    NORMAL    remaining >= 180 days

A boundary day always belongs to the less urgent band.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

LIFETIME_YEARS = 3
CRITICAL_DAYS = 90
WARNING_DAYS = 180


class LifecycleStatus(str, Enum):
    """Status bands ordered from most to least urgent."""

    EXPIRED = "expired"
    CRITICAL = "critical"
    WARNING = "warning"
    NORMAL = "normal"


@dataclass(frozen=True)
class LifecycleAssessment:
    """Plain result handed to the presentation layer for formatting."""

    status: LifecycleStatus
    remaining_days: int
    end_of_life_date: date


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def add_years(start: date, years: int) -> date:
    """Shift a date by whole years; 29 February falls back to 28 February."""
    try:
        return start.replace(year=start.year + years)
    except ValueError:
        return start.replace(year=start.year + years, day=28)


def end_of_life_date(purchase_date: date | datetime) -> date:
    return add_years(_as_date(purchase_date), LIFETIME_YEARS)


def remaining_days(purchase_date: date | datetime, now: date | datetime) -> int:
    """Whole days from ``now`` until end of life; negative once expired."""
    return (end_of_life_date(purchase_date) - _as_date(now)).days


def status_for_remaining(days: int) -> LifecycleStatus:
    if days <= 0:
        return LifecycleStatus.EXPIRED
    if days < CRITICAL_DAYS:
        return LifecycleStatus.CRITICAL
    if days < WARNING_DAYS:
        return LifecycleStatus.WARNING
    return LifecycleStatus.NORMAL


def classify(purchase_date: date | datetime, now: date | datetime) -> LifecycleAssessment:
    """Classify an asset purchased on ``purchase_date`` as seen at ``now``."""
    days = remaining_days(purchase_date, now)
    return LifecycleAssessment(
        status=status_for_remaining(days),
        remaining_days=days,
        end_of_life_date=end_of_life_date(purchase_date),
    )
