from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException


class DomainException(Exception):
    """Base class for errors the API turns into an HTTP status."""

    status_code = 500
    title = 'An internal server error occurred.'
    code = 'server_error'

    def __init__(self, detail=None):
        super().__init__(detail or self.title)
        self.detail = detail

    def to_dict(self):
        return {'error': self.title, 'code': self.code}


class InvalidPayload(DomainException):
    status_code = 400
    title = 'You have provided an invalid request payload.'
    code = 'invalid_payload'


class Unauthorized(DomainException):
    status_code = 401
    title = 'Unauthorized'
    code = 'unauthorized'


class NotFound(DomainException):
    status_code = 404
    title = 'Resource not found.'
    code = 'not_found'


class StoreFailure(DomainException):
    status_code = 500
    title = 'An internal server error occurred.'
    code = 'server_error'


def register_error_handlers(flask_app):
    @flask_app.errorhandler(DomainException)
    def handle_domain_exception(exc):
        # detail stays in the logs, the client only gets the generic title
        if exc.status_code >= 500:
            current_app.logger.error(f"[error] {exc.code}: {exc.detail or exc.title}")
        return jsonify(exc.to_dict()), exc.status_code

    @flask_app.errorhandler(HTTPException)
    def handle_http_exception(exc):
        return jsonify({'error': exc.description, 'code': f'http_{exc.code}'}), exc.code

    @flask_app.errorhandler(Exception)
    def handle_unexpected(exc):
        current_app.logger.error('Unhandled exception', exc_info=(type(exc), exc, exc.__traceback__))
        return jsonify(StoreFailure().to_dict()), 500
