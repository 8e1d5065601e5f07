from __future__ import annotations

import math
from typing import List, Sequence

from pydantic import BaseModel

from fundcalc.models import Account, RateSegment

MONTHS_PER_YEAR = 12


class YearlyProjectionPoint(BaseModel):
    year: int
    balance: int
    age: int
    # initial amount + contributions of the *completed* years before this one
    contributionsToDate: float
    interestToDate: int


def round_half_up(value: float) -> int:
    """Round .5 toward +inf, the way the browser's Math.round does; 0 when not finite."""
    if not math.isfinite(value):
        return 0
    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole


def monthly_rate(annual_rate_percent: float) -> float:
    return annual_rate_percent / 100 / MONTHS_PER_YEAR


def rate_for_year(schedule: Sequence[RateSegment], year: int) -> float:
    """
    Annual rate (percent) in effect for projection ``year``.

    The latest segment with startYear <= year wins; ties on startYear go to the
    one listed last. Before any segment starts, the earliest segment applies.
    """
    if not schedule:
        return 0.0
    ordered = sorted(schedule, key=lambda seg: seg.startYear)
    rate = ordered[0].annualRatePercent
    for segment in ordered:
        if segment.startYear <= year:
            rate = segment.annualRatePercent
    return rate


def project(account: Account, schedule: Sequence[RateSegment]) -> List[YearlyProjectionPoint]:
    """
    Build a year-by-year table for years 0..horizon (inclusive).

    Order of operations (per year):
      1) Look up the annual rate for the year and turn it into a monthly rate.
      2) Twelve times: add the monthly contribution, then grow by the monthly rate.
      3) Record the point; balance and interest are rounded independently from
         the unrounded running balance.

    Year 0 already compounds twelve months, so even a zero horizon grows.
    """
    horizon = account.horizon_years
    balance = float(account.initialAmount)
    yearly_deposit = account.monthlyContribution * MONTHS_PER_YEAR

    points: List[YearlyProjectionPoint] = []
    for year in range(horizon + 1):
        rate = monthly_rate(rate_for_year(schedule, year))

        for _ in range(MONTHS_PER_YEAR):
            balance += account.monthlyContribution
            balance *= 1 + rate

        contributed = account.initialAmount + yearly_deposit * year
        points.append(
            YearlyProjectionPoint(
                year=year,
                balance=round_half_up(balance),
                age=account.currentAge + year,
                contributionsToDate=contributed,
                interestToDate=round_half_up(balance - contributed),
            )
        )

    return points


__all__ = [
    "MONTHS_PER_YEAR",
    "YearlyProjectionPoint",
    "round_half_up",
    "monthly_rate",
    "rate_for_year",
    "project",
]
