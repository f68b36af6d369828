"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict, List

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from pf_shortfall.core.calculator import calculate
from pf_shortfall.core.config import load_config
from pf_shortfall.core.wage_csv import WageCsvError, read_wage_csv
from pf_shortfall.schemas.shortfall import ShortfallRequest, WAGE_MONTH_FIELD

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors()}), HTTPStatus.UNPROCESSABLE_ENTITY


def _respond(rows: List[Dict[str, Any]]) -> Any:
    outcome = calculate(rows)
    if not outcome.ok:
        return jsonify({"error": outcome.error}), HTTPStatus.INTERNAL_SERVER_ERROR
    return jsonify(outcome.result.model_dump()), HTTPStatus.OK


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify({"message": "pong"})


@api_bp.get("/config")
def config() -> Any:
    """Rate table, minimum-paid rule and projection windows in use."""
    return jsonify(load_config().model_dump())


@api_bp.post("/calc/shortfall")
def shortfall() -> Any:
    """Ledger and payment schedule for wage rows posted as JSON."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ShortfallRequest.model_validate(raw_payload)
    return _respond(payload.rows)


@api_bp.post("/calc/shortfall/upload")
def shortfall_upload() -> Any:
    """Same as ``/calc/shortfall`` for a CSV uploaded in the ``file`` field."""
    upload = request.files.get("file")
    if upload is None or not upload.filename:
        return jsonify({"error": "No file uploaded"}), HTTPStatus.BAD_REQUEST

    try:
        rows = read_wage_csv(upload.read())
    except WageCsvError as exc:
        return jsonify({"error": f"Error parsing CSV: {exc}"}), HTTPStatus.BAD_REQUEST

    if rows and WAGE_MONTH_FIELD not in rows[0]:
        return (
            jsonify({"error": f"Error parsing CSV: missing column {WAGE_MONTH_FIELD!r}"}),
            HTTPStatus.BAD_REQUEST,
        )
    return _respond(rows)
