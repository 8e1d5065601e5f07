"""Per-year chart series across several accounts."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Sequence

from pydantic import BaseModel

from fundcalc.core.projection import project
from fundcalc.models import Account, RateSegment


class ViewMode(str, Enum):
    GENERAL = "general"  # one shared horizon for every account
    INDIVIDUAL = "individual"  # each account runs to its own target age


class ChartPoint(BaseModel):
    year: int
    # accounts whose own horizon ended before this year are left out, not zeroed
    perAccountBalance: Dict[str, int]
    perAccountAge: Dict[str, int]


def chart_horizon(accounts: Sequence[Account], view_mode: ViewMode, time_horizon: int) -> int:
    if view_mode == ViewMode.GENERAL:
        return max(0, time_horizon)
    return max((account.horizon_years for account in accounts), default=0)


def aggregate(
    accounts: Sequence[Account],
    schedule: Sequence[RateSegment],
    horizon_years: int,
) -> List[ChartPoint]:
    """
    One ChartPoint per year 0..horizon_years, keyed by account name.

    Accounts sharing a name land on the same key; the later account wins.
    """
    projections = [(account.name, project(account, schedule)) for account in accounts]

    series: List[ChartPoint] = []
    for year in range(max(0, horizon_years) + 1):
        balances: Dict[str, int] = {}
        ages: Dict[str, int] = {}
        for name, points in projections:
            if year < len(points):
                balances[name] = points[year].balance
                ages[name] = points[year].age
        series.append(ChartPoint(year=year, perAccountBalance=balances, perAccountAge=ages))

    return series
