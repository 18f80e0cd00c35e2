from flask import jsonify
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from werkzeug.exceptions import HTTPException
from babystore.extensions import db

# Fixed messages for the status codes the catalog API answers itself
ERROR_MESSAGES = {
    400: "Bad request",
    404: "Resource not found",
    405: "Method not allowed",
}


def error_response(message, status, **extra):
    """JSON error body shared by every handler"""
    return jsonify({"error": message, **extra}), status


def register_error_handlers(app):
    """Register error handlers"""

    def handle_known_status(error):
        return error_response(ERROR_MESSAGES[error.code], error.code)

    for code in ERROR_MESSAGES:
        app.register_error_handler(code, handle_known_status)

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(error):
        # The failed flush leaves the session unusable until rolled back
        db.session.rollback()
        app.logger.warning(f"Integrity error: {error.orig}")
        return error_response("Database integrity error", 409, details=str(error.orig))

    @app.errorhandler(SQLAlchemyError)
    def handle_sqlalchemy_error(error):
        db.session.rollback()
        app.logger.error(f"Database error ({type(error).__name__}): {error}")
        return error_response("Database error", 500)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        if error.code >= 500:
            app.logger.error(f"{type(error).__name__}: {error.description}")
        return error_response(error.description, error.code)

    @app.errorhandler(Exception)
    def handle_exception(error):
        app.logger.exception(f"Unhandled {type(error).__name__}: {error}")
        return error_response("An unexpected error occurred", 500)
