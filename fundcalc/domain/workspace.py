from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from fundcalc.config import DEFAULT_RATE_PERCENT
from fundcalc.core.aggregation import ChartPoint, ViewMode, aggregate, chart_horizon
from fundcalc.core.coercion import coerce_int
from fundcalc.core.milestones import AccountMilestones, summarize
from fundcalc.models import ADULTHOOD_AGE, Account, RateSegment

logger = logging.getLogger(__name__)

DEFAULT_TIME_HORIZON = 18
ACCOUNT_FIELDS = ("name", "initialAmount", "monthlyContribution", "currentAge", "targetAge")
SEGMENT_FIELDS = ("startYear", "annualRatePercent")


def default_accounts() -> List[Account]:
    return [
        Account(
            id=1,
            name="Child 1",
            initialAmount=10000,
            monthlyContribution=500,
            currentAge=5,
            targetAge=18,
        )
    ]


def default_schedule(rate_percent: float = DEFAULT_RATE_PERCENT) -> List[RateSegment]:
    return [RateSegment(startYear=0, annualRatePercent=rate_percent)]


@dataclass
class Workspace:
    """
    The editable inputs of one projection session.

    Owns the account list and the rate schedule; the engine only ever reads
    them. Both collections keep at least one entry: removing the last account
    or the last rate segment is ignored. Rate segments stay ordered by
    startYear, and segment indices always refer to that order.
    """

    accounts: List[Account] = field(default_factory=default_accounts)
    # None means one segment at default_rate_percent
    rate_schedule: Optional[List[RateSegment]] = None
    time_horizon: int = DEFAULT_TIME_HORIZON
    view_mode: ViewMode = ViewMode.GENERAL
    default_rate_percent: float = DEFAULT_RATE_PERCENT
    adulthood_age: int = ADULTHOOD_AGE

    def __post_init__(self) -> None:
        if self.rate_schedule is None:
            self.rate_schedule = default_schedule(self.default_rate_percent)
        self._sort_schedule()

    # ---------- accounts ----------

    def add_account(self) -> Account:
        next_id = max((account.id for account in self.accounts), default=0) + 1
        account = Account(id=next_id, name=f"Child {len(self.accounts) + 1}")
        self.accounts.append(account)
        logger.debug("added account %s (%s)", account.id, account.name)
        return account

    def remove_account(self, account_id: int) -> bool:
        if len(self.accounts) <= 1:
            return False
        remaining = [account for account in self.accounts if account.id != account_id]
        if len(remaining) == len(self.accounts):
            return False
        self.accounts[:] = remaining
        logger.debug("removed account %s", account_id)
        return True

    def update_account(self, account_id: int, field_name: str, value: Any) -> bool:
        if field_name not in ACCOUNT_FIELDS:
            raise ValueError(f"unknown account field: {field_name}")
        for account in self.accounts:
            if account.id == account_id:
                # validate_assignment runs the coercing validators
                setattr(account, field_name, value)
                logger.debug("account %s: %s=%r", account_id, field_name, getattr(account, field_name))
                return True
        return False

    # ---------- rate schedule ----------

    def add_rate_segment(self) -> RateSegment:
        start = max((seg.startYear for seg in self.rate_schedule), default=-1) + 1
        segment = RateSegment(startYear=start, annualRatePercent=self.default_rate_percent)
        self.rate_schedule.append(segment)
        self._sort_schedule()
        logger.debug("added rate segment from year %s", start)
        return segment

    def remove_rate_segment(self, index: int) -> bool:
        if len(self.rate_schedule) <= 1 or not 0 <= index < len(self.rate_schedule):
            return False
        removed = self.rate_schedule.pop(index)
        logger.debug("removed rate segment from year %s", removed.startYear)
        return True

    def update_rate_segment(self, index: int, field_name: str, value: Any) -> bool:
        if field_name not in SEGMENT_FIELDS:
            raise ValueError(f"unknown rate segment field: {field_name}")
        if not 0 <= index < len(self.rate_schedule):
            return False
        setattr(self.rate_schedule[index], field_name, value)
        self._sort_schedule()
        return True

    def _sort_schedule(self) -> None:
        self.rate_schedule.sort(key=lambda seg: seg.startYear)

    # ---------- view ----------

    def set_time_horizon(self, value: Any) -> int:
        self.time_horizon = coerce_int(value)
        return self.time_horizon

    def set_view_mode(self, mode: ViewMode | str) -> ViewMode:
        self.view_mode = ViewMode(mode)
        return self.view_mode

    @property
    def horizon_years(self) -> int:
        return chart_horizon(self.accounts, self.view_mode, self.time_horizon)

    def chart_series(self) -> List[ChartPoint]:
        return aggregate(self.accounts, self.rate_schedule, self.horizon_years)

    def milestones(self) -> List[AccountMilestones]:
        return summarize(self.accounts, self.rate_schedule, self.adulthood_age)
