"""Data contracts for the projection endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from fundcalc.core.aggregation import ChartPoint, ViewMode
from fundcalc.core.coercion import coerce_int
from fundcalc.core.milestones import AccountMilestones
from fundcalc.core.projection import YearlyProjectionPoint
from fundcalc.domain.workspace import DEFAULT_TIME_HORIZON, default_accounts
from fundcalc.models import Account, RateSegment


class ProjectionRequest(BaseModel):
    """Everything the browser form holds: accounts, rates, horizon and view."""

    accounts: List[Account] = Field(
        default_factory=default_accounts,
        description="Savings accounts to project; one chart line each.",
    )
    rateSchedule: Optional[List[RateSegment]] = Field(
        None,
        description="Step schedule of annual rates indexed by projection year; omitted means the configured default rate.",
    )
    timeHorizon: int = Field(
        DEFAULT_TIME_HORIZON,
        description="Shared horizon in years, used by the general view.",
    )
    viewMode: ViewMode = Field(
        ViewMode.GENERAL,
        description="'general' charts timeHorizon years, 'individual' runs each account to its target age.",
    )

    @field_validator("timeHorizon", mode="before")
    @classmethod
    def _coerce_horizon(cls, value):
        return coerce_int(value)


class ProjectionResponse(BaseModel):
    """Chart series plus the per-account summary cards."""

    viewMode: ViewMode
    horizonYears: int = Field(..., ge=0)
    series: List[ChartPoint]
    milestones: List[AccountMilestones]


class AccountProjectionRequest(BaseModel):
    """Inputs required to project a single account."""

    account: Account
    rateSchedule: Optional[List[RateSegment]] = None


class AccountProjectionResponse(BaseModel):
    """Year-by-year projection of a single account."""

    points: List[YearlyProjectionPoint]
