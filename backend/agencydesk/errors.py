from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException
from agencydesk.domain.exceptions import DomainError
from agencydesk.extensions import jwt


def _error_response(message, status_code, details=None):
    body = {"error": message}
    if details:
        body["details"] = details
    response = jsonify(body)
    response.status_code = status_code
    return response


def register_error_handlers(app):
    @app.errorhandler(DomainError)
    def handle_domain_error(error):
        if error.status_code >= 500:
            current_app.logger.error("%s: %s", type(error).__name__, error.message)
        return _error_response(error.message, error.status_code, error.details)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return _error_response(error.description, error.code)

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        current_app.logger.exception("Unhandled error: %s", error)
        return _error_response("Internal server error", 500)

    @jwt.unauthorized_loader
    def handle_missing_token(reason):
        return _error_response("Unauthorized", 401)

    @jwt.invalid_token_loader
    def handle_invalid_token(reason):
        return _error_response("Invalid token", 401)

    @jwt.expired_token_loader
    def handle_expired_token(jwt_header, jwt_payload):
        return _error_response("Token has expired", 401)
