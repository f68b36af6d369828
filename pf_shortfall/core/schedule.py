"""Projected amount payable at fixed future settlement dates."""

from __future__ import annotations

from typing import List

from pf_shortfall.core.config import CalculatorConfig
from pf_shortfall.core.rounding import round_half_up
from pf_shortfall.schemas.shortfall import ScheduleEntry


def project_payment_schedule(total_amount: int, config: CalculatorConfig) -> List[ScheduleEntry]:
    """Simple monthly interest within each window, re-based between windows.

    Entry ``i`` of a window accrues ``i + month_offset`` months of interest on
    the window's base. The first window's base is ``total_amount``; each later
    window starts from the previous window's final ``totalPayable``.
    """
    schedule: List[ScheduleEntry] = []
    base = total_amount
    annual_rate = config.schedule.annual_rate

    for window in config.schedule.windows:
        for index, date in enumerate(window.dates):
            months = index + window.month_offset
            interest = round_half_up(base * annual_rate * months / 1200)
            schedule.append(
                ScheduleEntry(
                    date=date,
                    openingBalance=base,
                    interest=interest,
                    totalPayable=base + interest,
                )
            )
        base = schedule[-1].totalPayable

    return schedule
