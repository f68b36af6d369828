"""Decode an uploaded wage CSV into row mappings for the calculator."""

from __future__ import annotations

import io
import logging
from typing import Dict, List, Union

import pandas as pd

logger = logging.getLogger(__name__)


class WageCsvError(ValueError):
    pass


def read_wage_csv(data: Union[bytes, str]) -> List[Dict[str, str]]:
    """Every cell comes back as a string; blank lines are skipped."""
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise WageCsvError(f"file is not UTF-8 text: {exc}") from exc

    if not data.strip():
        raise WageCsvError("file is empty")

    try:
        frame = pd.read_csv(
            io.StringIO(data),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise WageCsvError(str(exc)) from exc

    frame = frame.fillna("")
    frame.columns = [str(column).strip() for column in frame.columns]
    rows = frame.to_dict(orient="records")
    logger.debug("decoded %d wage rows with columns %s", len(rows), list(frame.columns))
    return rows
