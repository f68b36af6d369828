"""Calculator configuration: statutory tables and projection windows."""

from __future__ import annotations

import json
import os
from datetime import datetime
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"
CONFIG_ENV_VAR = "PF_CALCULATOR_CONFIG"

SCHEDULE_DATE_FORMAT = "%d-%m-%Y"


class MonthAmount(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(ge=1900, le=2200)
    month: int = Field(ge=1, le=12)
    amount: int = Field(ge=0)


class MinimumPaidRule(BaseModel):
    """Minimum monthly payment by calendar month.

    ``exact`` entries win first; otherwise the first ``before`` entry whose
    (year, month) lies strictly after the wage month applies; otherwise
    ``otherwise``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    exact: List[MonthAmount] = Field(default_factory=list)
    before: List[MonthAmount] = Field(default_factory=list)
    otherwise: int = Field(ge=0)

    @model_validator(mode="after")
    def ensure_sorted(self) -> "MinimumPaidRule":
        keys = [(row.year, row.month) for row in self.before]
        if keys != sorted(keys):
            raise ValueError("minimum_paid.before must be in chronological order")
        return self


class ScheduleWindow(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    month_offset: int = Field(0, ge=0)
    dates: List[str] = Field(min_length=1)

    @model_validator(mode="after")
    def ensure_dates(self) -> "ScheduleWindow":
        parsed = [datetime.strptime(value, SCHEDULE_DATE_FORMAT) for value in self.dates]
        for earlier, later in zip(parsed, parsed[1:]):
            if later <= earlier:
                raise ValueError(f"schedule dates must increase: {self.dates}")
        return self


class ScheduleConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    annual_rate: float = Field(ge=0)
    windows: List[ScheduleWindow] = Field(min_length=1)

    @model_validator(mode="after")
    def ensure_windows_ordered(self) -> "ScheduleConfig":
        for earlier, later in zip(self.windows, self.windows[1:]):
            last = datetime.strptime(earlier.dates[-1], SCHEDULE_DATE_FORMAT)
            first = datetime.strptime(later.dates[0], SCHEDULE_DATE_FORMAT)
            if first <= last:
                raise ValueError("schedule windows must not overlap")
        return self


class CalculatorConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    first_fiscal_year: int = Field(ge=1900)
    last_fiscal_year: int = Field(ge=1900)
    fiscal_year_cutoff_month: int = Field(3, ge=1, le=12)
    contribution_model: Literal["minimum_paid", "contribution_only"] = "minimum_paid"
    contribution_rate: float = Field(ge=0, le=1)
    default_interest_rate: float = Field(ge=0)
    interest_rates: Dict[str, float] = Field(default_factory=dict)
    minimum_paid: MinimumPaidRule
    schedule: ScheduleConfig

    @model_validator(mode="after")
    def ensure_range(self) -> "CalculatorConfig":
        if self.last_fiscal_year < self.first_fiscal_year:
            raise ValueError("last_fiscal_year must not precede first_fiscal_year")
        return self


def config_path() -> Path:
    """Return the configuration file in use (env override or packaged default)."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return _CONFIG_DIR / "calculator.json"


@lru_cache(maxsize=4)
def _load(path: str) -> CalculatorConfig:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return CalculatorConfig.model_validate(data)


def load_config(path: Optional[Path] = None) -> CalculatorConfig:
    """Load and validate the calculator configuration, cached per path."""
    return _load(str(path or config_path()))


def preview_config(base: Optional[CalculatorConfig] = None) -> CalculatorConfig:
    """Variant used by the preview calculator: February cutoff, no minimum-paid credit."""
    base = base or load_config()
    return base.model_copy(
        update={
            "fiscal_year_cutoff_month": 2,
            "contribution_model": "contribution_only",
        }
    )
