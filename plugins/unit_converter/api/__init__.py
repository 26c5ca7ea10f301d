"""Unit converter HTTP adapter with standardized responses."""

from __future__ import annotations

import math
from typing import Any, Mapping

from flask import Blueprint, Flask, Response, current_app, jsonify, request
from pydantic import ConfigDict, Field

from common.errors import AppError, NotFoundAppError, ValidationAppError
from common.logging import get_logger
from common.responses import fail, ok, text
from common.validation import SchemaModel, ValidationError, parse_model

from ..core import (
    BadInputError,
    Dispatcher,
    build_dispatcher,
    format_value,
    group_for,
    list_groups,
)

EXTENSION_KEY = "unit_converter"
DEFAULT_DECIMALS = 6

logger = get_logger("unit_converter.api")


class PrecisionPayload(SchemaModel):
    decimals: int | None = None
    sig_figs: int | None = None


class ConvertPayload(PrecisionPayload):
    # Signatures are exact tokens.
    model_config = ConfigDict(str_strip_whitespace=False)

    value: float = Field(allow_inf_nan=False)
    from_unit: str
    to_unit: str


class LegacyQuery(SchemaModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=False)

    from_unit: str = Field(default="", alias="from")
    to_unit: str = Field(default="", alias="to")
    value: float


api_bp = Blueprint("unit_converter_api", __name__, url_prefix="/api/unit_converter")
legacy_bp = Blueprint("unit_converter_legacy", __name__)


def _dispatcher() -> Dispatcher:
    return current_app.extensions[EXTENSION_KEY]


def _settings() -> Mapping[str, Any]:
    return current_app.config.get("PLUGIN_SETTINGS", {}).get(EXTENSION_KEY, {}) or {}


def _query_args() -> dict[str, str]:
    # Repeated keys resolve to the last occurrence.
    return {key: values[-1] for key, values in request.args.lists()}


def _no_match_error(dispatcher: Dispatcher, from_unit: str, to_unit: str) -> AppError:
    for signature in (from_unit, to_unit):
        if dispatcher.unit(signature) is None:
            return ValidationAppError(
                message=f"Unknown unit '{signature}'.", code="unit.invalid_unit"
            )
    source = dispatcher.unit(from_unit)
    target = dispatcher.unit(to_unit)
    return ValidationAppError(
        message=(
            f"Cannot convert {source.quantity} '{from_unit}' "
            f"to {target.quantity} '{to_unit}'."
        ),
        code="unit.dimension_mismatch",
        status_code=422,
    )


@api_bp.get("/groups")
def groups() -> Response:
    payload = list_groups(_dispatcher())
    return ok({"groups": payload, "quantities": [item["quantity"] for item in payload]})


@api_bp.get("/units/<quantity>")
def units_endpoint(quantity: str) -> Response:
    group = group_for(_dispatcher(), quantity)
    if group is None:
        return fail(
            NotFoundAppError(
                message=f"Unknown quantity '{quantity}'.", code="unit.unknown_quantity"
            )
        )
    return ok(group.to_dict())


def _convert(raw_payload: Mapping[str, Any]) -> Response:
    try:
        payload = parse_model(ConvertPayload, raw_payload)
    except ValidationError as exc:
        return fail(
            ValidationAppError(
                message=str(exc),
                code="unit.invalid_request",
                details={"errors": getattr(exc, "details", None)},
            )
        )
    dispatcher = _dispatcher()
    result = dispatcher.process(payload.from_unit, payload.to_unit, payload.value)
    if result is None:
        logger.info("no conversion from %r to %r", payload.from_unit, payload.to_unit)
        return fail(_no_match_error(dispatcher, payload.from_unit, payload.to_unit))
    if not math.isfinite(result):
        # Strict JSON has no NaN or Infinity.
        return fail(
            ValidationAppError(
                message=(
                    f"Converting {payload.value!r} from '{payload.from_unit}' "
                    f"to '{payload.to_unit}' overflows."
                ),
                code="unit.non_finite_result",
                status_code=422,
            )
        )
    try:
        formatted = format_value(
            result, decimals=payload.decimals, sig_figs=payload.sig_figs
        )
    except BadInputError as exc:
        return fail(ValidationAppError(message=str(exc), code="unit.invalid_precision"))
    return ok(
        {
            "value": result,
            "from_unit": payload.from_unit,
            "to_unit": payload.to_unit,
            "quantity": dispatcher.unit(payload.from_unit).quantity,
            "formatted": formatted,
        }
    )


@api_bp.get("/convert")
def convert_query_endpoint() -> Response:
    return _convert(_query_args())


@api_bp.post("/convert")
def convert_endpoint() -> Response:
    return _convert(request.get_json(silent=True) or {})


@legacy_bp.get("/convert")
def legacy_convert() -> Response:
    """Query-string conversion answering ``{"result": "<value>"}``."""

    try:
        query = parse_model(LegacyQuery, _query_args())
    except ValidationError:
        return text("Invalid value!", status=501)
    result = _dispatcher().process(query.from_unit, query.to_unit, query.value)
    if result is None:
        return text("Unknown conversion type!", status=501)
    decimals = _settings().get("decimals", DEFAULT_DECIMALS)
    return jsonify({"result": format_value(result, decimals=int(decimals))})


def init_app(app: Flask) -> None:
    """Build the dispatcher before the first request is served."""

    app.extensions[EXTENSION_KEY] = build_dispatcher()
    settings = app.config.get("PLUGIN_SETTINGS", {}).get(EXTENSION_KEY, {}) or {}
    if settings.get("legacy_endpoint", True):
        app.register_blueprint(legacy_bp)
    logger.info(
        "unit converter ready with %d conversion entries",
        len(app.extensions[EXTENSION_KEY].entries),
    )


blueprints = [api_bp]


__all__ = [
    "blueprints",
    "init_app",
    "groups",
    "units_endpoint",
    "convert_query_endpoint",
    "convert_endpoint",
    "legacy_convert",
]
