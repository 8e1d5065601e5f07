from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from fundcalc.core.coercion import coerce_int, coerce_name, coerce_number

DEFAULT_TARGET_AGE = 18
ADULTHOOD_AGE = 18


class Account(BaseModel):
    """One savings line, usually one per child."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    id: int = 1
    name: str = ""
    initialAmount: float = 0.0
    monthlyContribution: float = 0.0
    currentAge: int = 0
    targetAge: int = DEFAULT_TARGET_AGE

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value):
        return coerce_name(value)

    @field_validator("initialAmount", "monthlyContribution", mode="before")
    @classmethod
    def _coerce_amount(cls, value):
        return coerce_number(value)

    @field_validator("id", "currentAge", "targetAge", mode="before")
    @classmethod
    def _coerce_whole(cls, value):
        return coerce_int(value)

    @property
    def horizon_years(self) -> int:
        return max(0, self.targetAge - self.currentAge)


class RateSegment(BaseModel):
    """Annual rate in percent, effective from ``startYear`` of the projection."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    startYear: int = 0
    annualRatePercent: float = 0.0

    @field_validator("startYear", mode="before")
    @classmethod
    def _coerce_start(cls, value):
        return coerce_int(value)

    @field_validator("annualRatePercent", mode="before")
    @classmethod
    def _coerce_rate(cls, value):
        return coerce_number(value)
