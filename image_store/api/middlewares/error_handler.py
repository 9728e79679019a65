# image_store/api/middlewares/error_handler.py
import logging

from flask import Flask, current_app, jsonify
from werkzeug.exceptions import HTTPException

from image_store.core.exceptions import AppError
from image_store.infrastructure.storage.errors import InvalidPathError, StorageError

logger = logging.getLogger(__name__)


def _error(message: str, status_code: int, details: str | None = None):
    body = {"error": message}
    if details:
        body["details"] = details
    return jsonify(body), status_code


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(AppError)
    def handle_app_error(err: AppError):
        return _error(str(err), err.status_code, err.details)

    @app.errorhandler(InvalidPathError)
    def handle_invalid_path(err: InvalidPathError):
        return _error(str(err), 400)

    @app.errorhandler(StorageError)
    def handle_storage_error(err: StorageError):
        logger.warning("Falha de storage (path=%s): %s", err.path, err.cause or err)
        details = str(err.cause) if current_app.debug and err.cause else None
        return _error(str(err), 500, details)

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        return _error(err.description, err.code)

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        logger.exception("Erro inesperado")

        if current_app.debug:
            return _error("Internal server error", 500, str(err))

        return _error("Internal server error", 500)
