# image_store/api/routes/__init__.py

from flask import Flask

from image_store.api.routes.docs_routes import bp_docs
from image_store.api.routes.health_routes import bp_health
from image_store.api.routes.image_routes import bp_images


def register_routes(app: Flask, *, api_prefix: str) -> None:
    # health e docs fora de /api/images
    app.register_blueprint(bp_health, url_prefix="/health")
    app.register_blueprint(bp_docs)

    app.register_blueprint(bp_images, url_prefix=f"{api_prefix}/images")
