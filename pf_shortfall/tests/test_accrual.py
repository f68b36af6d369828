from __future__ import annotations

from pf_shortfall.core.accrual import accrue_shortfall
from pf_shortfall.core.aggregation import YearTotals
from pf_shortfall.core.fiscal_years import fiscal_year_range


def empty_totals(config) -> dict:
    return {fy: YearTotals() for fy in fiscal_year_range(config)}


def test_no_shortfall_means_zero_ledger(config):
    ledger, balance = accrue_shortfall(empty_totals(config), config)

    assert len(ledger) == 29
    assert balance == 0
    assert all(year.total == 0 for year in ledger)


def test_first_year_earns_interest_on_its_own_difference(config):
    totals = empty_totals(config)
    totals["1995-96"] = YearTotals(wages=20000, contribution=1666, paid=417)

    ledger, balance = accrue_shortfall(totals, config)

    first, second = ledger[0], ledger[1]
    assert first.difference == 1249
    assert first.interest == 150  # 1249 * 12%
    assert first.total == 1399
    assert second.difference == 0
    assert second.interest == 168  # 1399 * 12%
    assert second.total == 168
    assert balance == sum(year.total for year in ledger)


def test_later_years_earn_interest_on_carried_balance_only(config):
    totals = empty_totals(config)
    totals["2022-23"] = YearTotals(wages=80000, contribution=6664, paid=2500)

    ledger, balance = accrue_shortfall(totals, config)
    by_year = {year.fiscalYear: year for year in ledger}

    assert by_year["2022-23"].difference == 4164
    assert by_year["2022-23"].interest == 0
    assert by_year["2022-23"].total == 4164
    assert by_year["2023-24"].interest == 344  # 4164 * 8.25%
    assert balance == 4164 + 344


def test_difference_never_negative(config):
    totals = empty_totals(config)
    totals["2010-11"] = YearTotals(wages=1000, contribution=83, paid=6492)

    ledger, _ = accrue_shortfall(totals, config)

    assert all(year.difference >= 0 for year in ledger)
    assert all(year.total == year.difference + year.interest for year in ledger)


def test_balance_matches_running_total(config):
    totals = empty_totals(config)
    totals["1998-99"] = YearTotals(wages=60000, contribution=4998, paid=5004)
    totals["2005-06"] = YearTotals(wages=120000, contribution=9996, paid=6492)
    totals["2016-17"] = YearTotals(wages=240000, contribution=19992, paid=15000)

    ledger, balance = accrue_shortfall(totals, config)

    running = 0
    for year in ledger:
        running += year.total
    assert balance == running
