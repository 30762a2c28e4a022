import logging

from flask import jsonify
from storefront.domain.invariants.exceptions import (
    IllegalTransition,
    InvariantViolation,
    PersistenceError,
    StaleWrite,
    ValidationError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        response = jsonify({
            "error": "InvariantViolation",
            "message": str(error)
        })
        response.status_code = 400
        return response

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        response = jsonify({
            "error": "ValidationError",
            "errors": error.errors
        })
        response.status_code = 400
        return response

    @app.errorhandler(IllegalTransition)
    def handle_illegal_transition(error):
        response = jsonify({
            "error": "IllegalTransition",
            "message": str(error)
        })
        response.status_code = 409
        return response

    @app.errorhandler(PersistenceError)
    def handle_persistence_error(error):
        logger.error("Persistence failure: %s", error.reason)
        response = jsonify({
            "error": "PersistenceError",
            "message": error.reason
        })
        response.status_code = 502
        return response

    @app.errorhandler(StaleWrite)
    def handle_stale_write(error):
        response = jsonify({
            "error": "StaleWrite",
            "message": str(error)
        })
        response.status_code = 409
        return response
