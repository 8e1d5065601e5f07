"""Summary milestones: balance at the target age and at adulthood.

Both are plain re-runs of :func:`fundcalc.core.projection.project` with the
target age swapped, so they can never drift from the charted series.
"""

from __future__ import annotations

from typing import List, Sequence

from pydantic import BaseModel

from fundcalc.core.projection import YearlyProjectionPoint, project
from fundcalc.models import ADULTHOOD_AGE, Account, RateSegment


class AccountMilestones(BaseModel):
    accountId: int
    name: str
    currentAge: int
    targetAge: int
    yearsToTarget: int
    atTarget: YearlyProjectionPoint
    yearsToAdulthood: int
    atAdulthood: YearlyProjectionPoint


def balance_at_age(
    account: Account, schedule: Sequence[RateSegment], age: int
) -> YearlyProjectionPoint:
    """Project ``account`` as if its target were ``age`` and return the last point."""
    rerun = account.model_copy(update={"targetAge": age})
    return project(rerun, schedule)[-1]


def milestones_for(
    account: Account,
    schedule: Sequence[RateSegment],
    adulthood_age: int = ADULTHOOD_AGE,
) -> AccountMilestones:
    at_target = project(account, schedule)[account.horizon_years]

    if account.targetAge == adulthood_age:
        at_adulthood = at_target
    else:
        # already past adulthood: zero-horizon rerun, i.e. the year-0 point
        at_adulthood = balance_at_age(account, schedule, adulthood_age)

    return AccountMilestones(
        accountId=account.id,
        name=account.name,
        currentAge=account.currentAge,
        targetAge=account.targetAge,
        yearsToTarget=account.horizon_years,
        atTarget=at_target,
        yearsToAdulthood=max(0, adulthood_age - account.currentAge),
        atAdulthood=at_adulthood,
    )


def summarize(
    accounts: Sequence[Account],
    schedule: Sequence[RateSegment],
    adulthood_age: int = ADULTHOOD_AGE,
) -> List[AccountMilestones]:
    return [milestones_for(account, schedule, adulthood_age) for account in accounts]
