"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict, Optional

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from investcalc.core.growth import generate_growth_series, summarize_growth
from investcalc.core.planner import run_plan
from investcalc.core.solver import percent_of_balance, solve_per_period_amount
from investcalc.core.strategies import STRATEGY_NAMES
from investcalc.schemas.growth import GrowthConfig, GrowthResponse
from investcalc.schemas.ping import PingResponse, StrategyInfo
from investcalc.schemas.projection import PlanRequest
from investcalc.schemas.solver import SolveRequest, SolveResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


def _json_body() -> Optional[Dict[str, Any]]:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else None


def _bad_request():
    return jsonify({"detail": "request body must be a JSON object"}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(PingResponse(message="pong").model_dump())


@api_bp.get("/strategies")
def strategies() -> Any:
    """List the available strategies in display order."""
    catalog = [StrategyInfo(key=key, name=name).model_dump() for key, name in STRATEGY_NAMES.items()]
    return jsonify(catalog)


@api_bp.post("/growth")
def growth() -> Any:
    """Historical growth series for a lump-sum or recurring investment."""
    raw_payload = _json_body()
    if raw_payload is None:
        return _bad_request()
    config = GrowthConfig.model_validate(raw_payload)
    series = generate_growth_series(config)
    response = GrowthResponse(series=series, summary=summarize_growth(series))
    logger.info("growth series: %d points", len(series))
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/solve")
def solve() -> Any:
    """Constant per-period contribution (or withdrawal) that reaches a target."""
    raw_payload = _json_body()
    if raw_payload is None:
        return _bad_request()
    payload = SolveRequest.model_validate(raw_payload)
    amount = solve_per_period_amount(
        payload.startBalance,
        payload.targetAmount,
        payload.periods,
        payload.roiPercentage / 100,
        payload.frequency,
    )
    response = SolveResponse(
        amount=amount,
        direction="invest" if amount >= 0 else "withdraw",
        totalAmount=abs(amount) * max(payload.periods, 0),
        percentOfBalance=percent_of_balance(amount, payload.startBalance),
    )
    logger.info("solved %s %.2f per period", response.direction, abs(amount))
    return jsonify(response.model_dump())


@api_bp.post("/plan")
def plan() -> Any:
    """Historical series plus the strategy projection that follows it."""
    raw_payload = _json_body()
    if raw_payload is None:
        return _bad_request()
    payload = PlanRequest.model_validate(raw_payload)
    result = run_plan(payload.growth, payload.projection)
    return jsonify(result.model_dump(mode="json"))
