from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ..common.db import QueryExecutor
from ..common.errors import JobBoardError
from ..jobs.db_operations import JobDB
from . import jobs as jobs_api

logger = logging.getLogger(__name__)


def _error_body(message: str, status: int):
    return jsonify({"error": {"message": message, "status": status}}), status


def create_app(db: QueryExecutor) -> Flask:
    """Build the Flask app around a query collaborator."""
    app = Flask(__name__)
    app.extensions["job_db"] = JobDB(db)

    app.register_blueprint(jobs_api.bp)

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    @app.errorhandler(JobBoardError)
    def handle_jobboard_error(exc: JobBoardError):
        logger.info(
            "Request rejected",
            extra={"error": exc.message, "status": exc.status_code},
        )
        return _error_body(exc.message, exc.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        return _error_body(exc.description, exc.code)

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc: Exception):
        logger.error(
            "Unhandled error while serving request",
            extra={"error": str(exc), "error_type": type(exc).__name__},
            exc_info=True,
        )
        return _error_body("Internal Server Error", 500)

    return app
