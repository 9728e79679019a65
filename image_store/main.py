# image_store/main.py
from __future__ import annotations

import logging

from flask import Flask
from flask_cors import CORS

from image_store.api.middlewares.error_handler import register_error_handlers
from image_store.api.routes import register_routes
from image_store.api.routes.image_routes import ImageKeyConverter
from image_store.config.flask_config import configure_app
from image_store.config.logging_config import configure_logging
from image_store.config.settings import Settings, get_settings
from image_store.infrastructure.storage.local_file_storage import (
    LocalFileStorage,
    LocalFileStorageConfig,
)
from image_store.services.image_service import ImageService

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def create_app(settings: Settings | None = None) -> Flask:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = Flask(__name__)

    CORS(
        app,
        resources={rf"{API_PREFIX}/*": {"origins": settings.cors_origin_list}},
        allow_headers=["Content-Type"],
        methods=["GET", "HEAD", "POST", "DELETE", "OPTIONS"],
    )

    configure_app(app, settings)

    # a raiz do storage entra por injeção; nenhum componente lê config global
    storage = LocalFileStorage(
        config=LocalFileStorageConfig(base_path=settings.image_storage_path)
    )
    app.extensions["image_storage"] = storage
    app.extensions["image_service"] = ImageService(storage=storage)

    # sem merge_slashes: "//etc/passwd" não pode virar redirect para outra chave
    app.url_map.merge_slashes = False
    app.url_map.converters["image_key"] = ImageKeyConverter

    register_routes(app, api_prefix=API_PREFIX)
    register_error_handlers(app)

    logger.info("Image storage path: %s", storage.base_path)

    return app


def run() -> None:
    settings = get_settings()
    app = create_app(settings)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    run()
