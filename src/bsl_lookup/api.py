"""
HTTP surface for the lookup pipeline (Flask).

  GET /api/scrape?phrase=black+hat     -> ordered videos, one per resolved word
  GET /api/scrape-client?phrase=...    -> per-word dictionary URLs only
  GET /api/test                        -> probe the dictionary site
"""

import logging

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from bsl_lookup.domain.errors import InternalFault, SignLookupError

logger = logging.getLogger(__name__)


def _error_payload(err: SignLookupError, debug: bool):
    payload = {"error": err.message, "kind": err.kind}
    if debug and err.detail:
        payload["detail"] = err.detail
    return jsonify(payload), err.status_code


def create_app(pipeline=None, app_env=None) -> Flask:
    """Build the Flask app. pipeline defaults to the live SignLookupPipeline."""
    from bsl_lookup import config

    if pipeline is None:
        from bsl_lookup.adapters import default_adapters
        from bsl_lookup.application.pipeline import SignLookupPipeline
        pipeline = SignLookupPipeline(**default_adapters(), time_budget=config.RESOLUTION_TIME_BUDGET)

    app = Flask(__name__)
    app.config["APP_ENV"] = app_env or config.APP_ENV
    app.extensions["bsl_pipeline"] = pipeline
    CORS(app, resources={r"/api/*": {"origins": "*"}}, methods=["GET", "OPTIONS"])

    def is_dev() -> bool:
        return app.config["APP_ENV"] == "development"

    @app.errorhandler(SignLookupError)
    def handle_lookup_error(err):
        logger.info("Lookup error (%s): %s", err.kind, err.message)
        return _error_payload(err, is_dev())

    @app.errorhandler(Exception)
    def handle_unexpected(err):
        if isinstance(err, HTTPException):
            return err
        logger.exception("Server error")
        return _error_payload(InternalFault(detail=repr(err)), is_dev())

    @app.route("/api/scrape")
    def scrape():
        report = pipeline.run(request.args.get("phrase"))
        return jsonify(report.to_dict())

    @app.route("/api/scrape-client")
    def scrape_client():
        return jsonify({"urls": pipeline.word_urls(request.args.get("phrase"))})

    @app.route("/api/test")
    def probe():
        result = pipeline.probe()
        return jsonify(result), (200 if result["success"] else 500)

    return app


def main() -> None:
    from bsl_lookup import config

    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    app = create_app()
    logger.info("BSL Lookup API on http://%s:%s (%s)", config.API_HOST, config.API_PORT, config.APP_ENV)
    app.run(host=config.API_HOST, port=config.API_PORT, debug=False)


if __name__ == "__main__":
    main()
