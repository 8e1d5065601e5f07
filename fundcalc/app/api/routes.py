"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from fundcalc.config import Settings
from fundcalc.core.projection import project
from fundcalc.domain.workspace import Workspace, default_schedule
from fundcalc.schemas.health import HealthResponse
from fundcalc.schemas.projection import (
    AccountProjectionRequest,
    AccountProjectionResponse,
    ProjectionRequest,
    ProjectionResponse,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("rejected payload: %d validation error(s)", exc.error_count())
    detail = exc.errors(include_url=False, include_context=False)
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    return jsonify(HealthResponse().model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Chart series and summary milestones for every account."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ProjectionRequest.model_validate(raw_payload)
    settings: Settings = current_app.config["SETTINGS"]

    workspace = Workspace(
        accounts=payload.accounts,
        rate_schedule=payload.rateSchedule,
        time_horizon=payload.timeHorizon,
        view_mode=payload.viewMode,
        default_rate_percent=settings.default_rate_percent,
        adulthood_age=settings.adulthood_age,
    )
    logger.info(
        "projecting %d account(s) over %d year(s) in %s view",
        len(workspace.accounts),
        workspace.horizon_years,
        workspace.view_mode.value,
    )

    response = ProjectionResponse(
        viewMode=workspace.view_mode,
        horizonYears=workspace.horizon_years,
        series=workspace.chart_series(),
        milestones=workspace.milestones(),
    )
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/projection/account")
def account_projection() -> Any:
    """Year-by-year table for a single account."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = AccountProjectionRequest.model_validate(raw_payload)
    settings: Settings = current_app.config["SETTINGS"]
    schedule = payload.rateSchedule
    if schedule is None:
        schedule = default_schedule(settings.default_rate_percent)

    logger.info("projecting account %r", payload.account.name)
    response = AccountProjectionResponse(points=project(payload.account, schedule))
    return jsonify(response.model_dump(mode="json"))
