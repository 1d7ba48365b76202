"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict, Optional

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from zinsrechner.config import Settings
from zinsrechner.core.calculator import build_projection
from zinsrechner.core.formatting import SUPPORTED_LOCALES
from zinsrechner.core.inputs import CalculatorState, UnknownFieldError
from zinsrechner.core.ping import get_ping_message
from zinsrechner.core.projection import tick_interval
from zinsrechner.schemas.ping import PingResponse
from zinsrechner.schemas.projection import (
    DefaultsResponse,
    EditRequest,
    EditResponse,
    ProjectionRequest,
    ScenarioPayload,
    TickIntervalResponse,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


class InvalidRequest(ValueError):
    pass


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected payload: %d validation error(s)", exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(UnknownFieldError)
@api_bp.errorhandler(InvalidRequest)
def _handle_bad_request(exc: ValueError):
    logger.warning("bad request: %s", exc)
    return jsonify({"detail": str(exc)}), HTTPStatus.BAD_REQUEST


def _settings() -> Settings:
    return current_app.config["SETTINGS"]


def _json_body() -> Dict[str, Any]:
    payload = request.get_json(force=True, silent=True)
    if not isinstance(payload, dict):
        raise InvalidRequest("request body must be JSON")
    return payload


def _locale(requested: Optional[str]) -> str:
    return requested or _settings().locale


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message=get_ping_message())
    return jsonify(response.model_dump())


@api_bp.get("/defaults")
def defaults() -> Any:
    """Scenario the calculator form starts with."""
    settings = _settings()
    response = DefaultsResponse(
        scenario=ScenarioPayload(
            initialCapital=settings.DEFAULT_INITIAL_CAPITAL,
            monthlyContribution=settings.DEFAULT_MONTHLY_CONTRIBUTION,
            years=settings.DEFAULT_YEARS,
            interestRate=settings.DEFAULT_INTEREST_RATE,
        ),
        locale=settings.locale,
        locales=list(SUPPORTED_LOCALES),
    )
    return jsonify(response.model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Full year-by-year projection plus summary text and chart ticks."""
    payload = ProjectionRequest.model_validate(_json_body())
    scenario = payload.to_inputs()
    result = build_projection(scenario, _locale(payload.locale))
    logger.info(
        "projection: %s years at %s%% -> %d",
        scenario.years,
        scenario.interest_rate,
        result.final.total_amount,
    )
    return jsonify(result.model_dump(by_alias=True, mode="json"))


@api_bp.post("/scenario/edit")
def edit_scenario() -> Any:
    """Apply one form edit to the last valid scenario and recompute."""
    payload = EditRequest.model_validate(_json_body())
    state = CalculatorState(payload.scenario.to_inputs(), _locale(payload.locale))
    accepted, result = state.edit(payload.field, payload.value)
    response = EditResponse(accepted=accepted, projection=result)
    return jsonify(response.model_dump(by_alias=True, mode="json"))


@api_bp.get("/tick-interval")
def get_tick_interval() -> Any:
    years = request.args.get("years", type=int)
    if years is None:
        raise InvalidRequest("query parameter 'years' must be an integer")
    response = TickIntervalResponse(years=years, tick_interval=tick_interval(years))
    return jsonify(response.model_dump(by_alias=True))
