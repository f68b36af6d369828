"""Compounding shortfall ledger over the configured fiscal years."""

from __future__ import annotations

from typing import Dict, List, Tuple

from pf_shortfall.core.aggregation import YearTotals
from pf_shortfall.core.config import CalculatorConfig
from pf_shortfall.core.fiscal_years import interest_rate
from pf_shortfall.core.rounding import round_half_up
from pf_shortfall.schemas.shortfall import YearAggregate


def accrue_shortfall(
    totals: Dict[str, YearTotals],
    config: CalculatorConfig,
) -> Tuple[List[YearAggregate], int]:
    """Build the ledger and return it with the final cumulative balance.

    ``totals`` must be in chronological order. The first year earns interest on
    its own shortfall; every later year earns interest only on the balance
    carried in from the years before it, not on its own difference.
    """
    ledger: List[YearAggregate] = []
    cumulative_balance = 0

    for index, (fy, year) in enumerate(totals.items()):
        difference = max(year.contribution - year.paid, 0)
        rate = interest_rate(fy, config)
        base = difference if index == 0 else cumulative_balance
        interest = round_half_up(base * rate / 100)
        total = difference + interest
        cumulative_balance += total

        ledger.append(
            YearAggregate(
                fiscalYear=fy,
                wages=year.wages,
                contribution=year.contribution,
                paid=year.paid,
                difference=difference,
                interest=interest,
                total=total,
            )
        )

    return ledger, cumulative_balance
