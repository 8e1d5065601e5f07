from __future__ import annotations

import pytest

from fundcalc.core.aggregation import ViewMode
from fundcalc.domain.workspace import Workspace
from fundcalc.models import Account, RateSegment


def test_default_workspace():
    ws = Workspace()

    assert len(ws.accounts) == 1
    child = ws.accounts[0]
    assert (child.name, child.initialAmount, child.monthlyContribution) == ("Child 1", 10000, 500)
    assert (child.currentAge, child.targetAge) == (5, 18)
    assert [(s.startYear, s.annualRatePercent) for s in ws.rate_schedule] == [(0, 7)]
    assert ws.time_horizon == 18
    assert ws.view_mode == ViewMode.GENERAL


def test_add_account_uses_next_id_and_defaults():
    ws = Workspace()

    added = ws.add_account()

    assert added.id == 2
    assert added.name == "Child 2"
    assert (added.initialAmount, added.monthlyContribution, added.currentAge, added.targetAge) == (0, 0, 0, 18)
    assert ws.accounts[-1] is added


def test_last_account_cannot_be_removed():
    ws = Workspace()

    assert ws.remove_account(1) is False
    assert len(ws.accounts) == 1


def test_remove_account_by_id():
    ws = Workspace()
    ws.add_account()

    assert ws.remove_account(99) is False
    assert ws.remove_account(1) is True
    assert [a.id for a in ws.accounts] == [2]


def test_update_account_coerces_numbers_and_keeps_names():
    ws = Workspace()

    assert ws.update_account(1, "initialAmount", "abc") is True
    ws.update_account(1, "monthlyContribution", "125.5")
    ws.update_account(1, "targetAge", "21")
    ws.update_account(1, "name", "Ana")

    child = ws.accounts[0]
    assert child.initialAmount == 0.0
    assert child.monthlyContribution == 125.5
    assert child.targetAge == 21
    assert child.name == "Ana"


def test_update_account_unknown_id_or_field():
    ws = Workspace()

    assert ws.update_account(42, "initialAmount", 1) is False
    with pytest.raises(ValueError):
        ws.update_account(1, "balance", 1)


def test_add_rate_segment_starts_after_latest():
    ws = Workspace(rate_schedule=[RateSegment(startYear=4, annualRatePercent=3)], default_rate_percent=6)

    added = ws.add_rate_segment()

    assert (added.startYear, added.annualRatePercent) == (5, 6)


def test_add_rate_segment_to_empty_schedule_starts_at_zero():
    ws = Workspace(rate_schedule=[])

    assert ws.add_rate_segment().startYear == 0


def test_rate_schedule_stays_ordered_by_start_year():
    ws = Workspace(
        rate_schedule=[
            RateSegment(startYear=5, annualRatePercent=8),
            RateSegment(startYear=0, annualRatePercent=5),
        ]
    )
    assert [s.startYear for s in ws.rate_schedule] == [0, 5]

    ws.update_rate_segment(0, "startYear", "9")

    assert [(s.startYear, s.annualRatePercent) for s in ws.rate_schedule] == [(5, 8), (9, 5)]


def test_remove_rate_segment_keeps_one():
    ws = Workspace()
    ws.add_rate_segment()

    assert ws.remove_rate_segment(5) is False
    assert ws.remove_rate_segment(1) is True
    assert ws.remove_rate_segment(0) is False
    assert len(ws.rate_schedule) == 1


def test_update_rate_segment_coerces_rate():
    ws = Workspace()

    assert ws.update_rate_segment(0, "annualRatePercent", "not a rate") is True
    assert ws.rate_schedule[0].annualRatePercent == 0.0
    assert ws.update_rate_segment(3, "annualRatePercent", 5) is False
    with pytest.raises(ValueError):
        ws.update_rate_segment(0, "rate", 5)


def test_time_horizon_and_view_mode():
    ws = Workspace()

    assert ws.set_time_horizon("12.7") == 12
    assert ws.set_time_horizon("soon") == 0
    assert ws.set_view_mode("individual") == ViewMode.INDIVIDUAL
    assert ws.horizon_years == 13
    with pytest.raises(ValueError):
        ws.set_view_mode("sideways")


def test_general_series_pads_past_account_horizon():
    ws = Workspace()

    series = ws.chart_series()

    assert len(series) == 19
    assert "Child 1" in series[13].perAccountBalance
    assert series[14].perAccountBalance == {}


def test_milestones_follow_workspace_adulthood_age():
    ws = Workspace(
        accounts=[Account(id=1, name="Ana", currentAge=10, targetAge=25)],
        adulthood_age=21,
    )

    (milestones,) = ws.milestones()

    assert milestones.yearsToAdulthood == 11
    assert milestones.atAdulthood.age == 21


def test_default_schedule_uses_configured_rate():
    ws = Workspace(default_rate_percent=3)

    assert [(s.startYear, s.annualRatePercent) for s in ws.rate_schedule] == [(0, 3)]
    assert ws.add_rate_segment().annualRatePercent == 3


def test_explicit_empty_schedule_is_kept():
    ws = Workspace(rate_schedule=[], default_rate_percent=3)

    assert ws.rate_schedule == []
