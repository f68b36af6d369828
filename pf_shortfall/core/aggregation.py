"""Fold wage rows into per-fiscal-year totals."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping

from pf_shortfall.core.config import CalculatorConfig
from pf_shortfall.core.fiscal_years import (
    MalformedMonthError,
    fiscal_year_for,
    fiscal_year_range,
    minimum_paid,
    parse_month_year,
)
from pf_shortfall.core.rounding import round_half_up
from pf_shortfall.schemas.shortfall import WAGE_MONTH_FIELD, WAGES_FIELD

logger = logging.getLogger(__name__)

_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")


@dataclass
class YearTotals:
    wages: int = 0
    contribution: int = 0
    paid: int = 0


@dataclass
class AggregationResult:
    totals: Dict[str, YearTotals]
    warnings: List[str] = field(default_factory=list)
    accepted_rows: int = 0
    dropped_rows: int = 0


def parse_wages(value: Any) -> int:
    """Integer part of a wage cell; anything without leading digits counts as 0."""
    if value is None:
        return 0
    match = _LEADING_INTEGER.match(str(value))
    if not match:
        return 0
    return int(match.group(1))


def aggregate_contributions(
    rows: Iterable[Mapping[str, Any]],
    config: CalculatorConfig,
) -> AggregationResult:
    totals: Dict[str, YearTotals] = {fy: YearTotals() for fy in fiscal_year_range(config)}
    result = AggregationResult(totals=totals)

    for index, row in enumerate(rows):
        raw_month = row.get(WAGE_MONTH_FIELD)
        if raw_month is None or str(raw_month) == "":
            continue
        wage_month = str(raw_month)

        try:
            month, year = parse_month_year(wage_month)
        except MalformedMonthError as exc:
            message = f"row {index + 1}: {exc}; row skipped"
            logger.warning(message)
            result.warnings.append(message)
            continue

        fy = fiscal_year_for(month, year, config.fiscal_year_cutoff_month)
        bucket = totals.get(fy)
        if bucket is None:
            logger.debug("row %d: fiscal year %s outside configured range, dropped", index + 1, fy)
            result.dropped_rows += 1
            continue

        wages = parse_wages(row.get(WAGES_FIELD))
        bucket.wages += wages
        bucket.contribution += round_half_up(wages * config.contribution_rate)
        if config.contribution_model == "minimum_paid":
            bucket.paid += minimum_paid(wage_month, config)
        result.accepted_rows += 1

    return result
