from __future__ import annotations

from typing import List, Tuple

from pf_shortfall.core.config import CalculatorConfig


class MalformedMonthError(ValueError):
    def __init__(self, value: str):
        super().__init__(f"unparsable wage month {value!r}, expected M/YYYY")
        self.value = value


def parse_month_year(value: str) -> Tuple[int, int]:
    """Split an ``M/YYYY`` wage month into ``(month, year)``."""
    parts = value.strip().split("/")
    if len(parts) != 2:
        raise MalformedMonthError(value)
    month_text, year_text = (part.strip() for part in parts)
    if not month_text.isdecimal() or not year_text.isdecimal():
        raise MalformedMonthError(value)
    month, year = int(month_text), int(year_text)
    if not 1 <= month <= 12:
        raise MalformedMonthError(value)
    return month, year


def fiscal_year_key(start_year: int) -> str:
    return f"{start_year}-{str(start_year + 1)[-2:]}"


def fiscal_year_for(month: int, year: int, cutoff_month: int = 3) -> str:
    # Jan..cutoff belong to the fiscal year that started the previous April.
    if month <= cutoff_month:
        return fiscal_year_key(year - 1)
    return fiscal_year_key(year)


def fiscal_year_range(config: CalculatorConfig) -> List[str]:
    return [
        fiscal_year_key(year)
        for year in range(config.first_fiscal_year, config.last_fiscal_year + 1)
    ]


def interest_rate(fiscal_year: str, config: CalculatorConfig) -> float:
    """Statutory rate in percent; unknown years fall back to the default rate."""
    return config.interest_rates.get(fiscal_year, config.default_interest_rate)


def minimum_paid(month_year: str, config: CalculatorConfig) -> int:
    """Minimum contribution treated as already paid for a wage month."""
    month, year = parse_month_year(month_year)
    rule = config.minimum_paid
    for row in rule.exact:
        if (row.year, row.month) == (year, month):
            return row.amount
    for row in rule.before:
        if (year, month) < (row.year, row.month):
            return row.amount
    return rule.otherwise
