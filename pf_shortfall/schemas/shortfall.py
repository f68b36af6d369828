"""Data contracts for the shortfall calculator."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

WAGE_MONTH_FIELD = "Wage Month (all the months from date of joining to date of leaving)"
WAGES_FIELD = "Wages on which PF contribution was paid"


class ShortfallRequest(BaseModel):
    """Wage rows as decoded from the member's CSV export."""

    model_config = ConfigDict(extra="forbid")

    rows: List[Dict[str, Any]] = Field(
        ...,
        description="One mapping per wage month, keyed by CSV column header.",
    )


class YearAggregate(BaseModel):
    """Single row of the yearly shortfall ledger."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    fiscalYear: str
    wages: int
    contribution: int
    paid: int = Field(..., ge=0)
    difference: int = Field(..., ge=0)
    interest: int = Field(..., ge=0)
    total: int = Field(..., ge=0)

    @model_validator(mode="after")
    def ensure_total(self) -> "YearAggregate":
        if self.total != self.difference + self.interest:
            raise ValueError("total must equal difference + interest")
        return self


class ScheduleEntry(BaseModel):
    """Amount payable if the shortfall is settled by ``date``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    date: str
    openingBalance: int = Field(..., ge=0)
    interest: int = Field(..., ge=0)
    totalPayable: int = Field(..., ge=0)


class ResultBundle(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    yearlyData: List[YearAggregate]
    paymentSchedule: List[ScheduleEntry]
    totalAmount: int = Field(..., ge=0)
    warnings: List[str] = Field(default_factory=list)


class CalculationOutcome(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    ok: bool
    result: Optional[ResultBundle] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def ensure_exclusive(self) -> "CalculationOutcome":
        if self.ok and (self.result is None or self.error is not None):
            raise ValueError("successful outcome needs a result and no error")
        if not self.ok and (self.result is not None or not self.error):
            raise ValueError("failed outcome needs an error and no result")
        return self
