"""HTTP entrypoint exposing hotel competitor analysis reports."""

from __future__ import annotations

import hmac
import logging
import os
from typing import Any, Callable

from flask import Flask, jsonify, request

from hotel_intel.core.config import get_settings
from hotel_intel.core.errors import Unauthorized, ValidationError
from hotel_intel.core.models import Report
from hotel_intel.jobs.pipeline import PipelineOrchestrator, build_orchestrator

# ---------- Logging ----------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

# ---------- App ----------
app = Flask(__name__)

_PUBLIC_ENDPOINTS = {"root", "healthcheck"}
MISSING_NAME_MESSAGE = "Please provide a hotel name."


@app.before_request
def require_api_key() -> None:
    """Reject analysis requests without the configured shared secret."""
    # Unmatched URLs have no endpoint and fall through to Flask's 404.
    if request.endpoint is None or request.endpoint in _PUBLIC_ENDPOINTS:
        return None
    expected = get_settings().authorized_api_key
    presented = request.args.get("api_key") or request.headers.get("Authorization") or ""
    if not expected or not hmac.compare_digest(presented.encode(), expected.encode()):
        raise Unauthorized("Unauthorized")
    return None


@app.errorhandler(Unauthorized)
def handle_unauthorized(exc: Unauthorized) -> Any:
    logger.warning("Rejected unauthorized request to %s", request.path)
    return jsonify({"error": str(exc)}), 403


# ---------- Routes ----------


@app.get("/")
def root() -> Any:
    return "ok", 200


@app.get("/healthz")
def healthcheck() -> Any:
    settings = get_settings()
    return (
        jsonify(
            {
                "status": "ok",
                "places_configured": bool(settings.places_api_key),
                "openai_configured": bool(settings.openai_api_key),
                "revision": os.getenv("K_REVISION", "unknown"),
            }
        ),
        200,
    )


@app.get("/analyze")
def analyze() -> Any:
    """Basic report: the hotel and its enriched competitors."""
    return _run_report(lambda orchestrator, name: orchestrator.basic_report(name))


@app.get("/analyzeApi")
def analyze_with_amenities() -> Any:
    """Extended report: competitors plus nearby amenities and their analysis."""
    return _run_report(lambda orchestrator, name: orchestrator.extended_report(name))


# ---------- Internals ----------


def _run_report(produce: Callable[[PipelineOrchestrator, str], Report]) -> Any:
    hotel_name = (request.args.get("hotel_name") or "").strip()
    if not hotel_name:
        return jsonify({"error": MISSING_NAME_MESSAGE}), 400

    try:
        report = produce(build_orchestrator(), hotel_name)
    except ValidationError as exc:
        return jsonify({"error": str(exc)}), 400
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error processing request for %r: %s", hotel_name, exc)
        return jsonify({"error": str(exc)}), 500

    return jsonify(report.to_dict()), 200


def main() -> None:
    port = get_settings().port
    logger.info("[BOOT] Binding on 0.0.0.0:%d", port)
    app.run(host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
