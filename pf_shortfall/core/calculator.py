"""Entry point the API calls: wage rows in, ledger and schedule out."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

from pf_shortfall.core.accrual import accrue_shortfall
from pf_shortfall.core.aggregation import aggregate_contributions
from pf_shortfall.core.config import CalculatorConfig, load_config
from pf_shortfall.core.schedule import project_payment_schedule
from pf_shortfall.schemas.shortfall import CalculationOutcome, ResultBundle

logger = logging.getLogger(__name__)


def compute(
    rows: Iterable[Mapping[str, Any]],
    config: Optional[CalculatorConfig] = None,
) -> ResultBundle:
    """Run aggregation, accrual and projection over ``rows``."""
    config = config or load_config()

    aggregation = aggregate_contributions(rows, config)
    ledger, total_amount = accrue_shortfall(aggregation.totals, config)
    schedule = project_payment_schedule(total_amount, config)
    logger.info(
        "computed shortfall: %d rows accepted, %d out of range, total %d",
        aggregation.accepted_rows,
        aggregation.dropped_rows,
        total_amount,
    )
    return ResultBundle(
        yearlyData=ledger,
        paymentSchedule=schedule,
        totalAmount=total_amount,
        warnings=aggregation.warnings,
    )


def calculate(
    rows: Iterable[Mapping[str, Any]],
    config: Optional[CalculatorConfig] = None,
) -> CalculationOutcome:
    """Like :func:`compute`, but failures come back as a single error message."""
    try:
        bundle = compute(rows, config)
    except Exception as exc:
        logger.exception("shortfall calculation failed")
        return CalculationOutcome(ok=False, error=f"Error processing data: {exc}")
    return CalculationOutcome(ok=True, result=bundle)
