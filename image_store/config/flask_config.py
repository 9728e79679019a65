from flask import Flask

from image_store.config.settings import Settings


def configure_app(app: Flask, settings: Settings) -> None:
    app.config["ENV"] = settings.environment
    app.config["DEBUG"] = settings.debug
    app.config["SETTINGS"] = settings

    # folga de 1MB para os demais campos do multipart; o limite fino é validado na rota
    app.config["MAX_CONTENT_LENGTH"] = settings.max_file_size_bytes + 1024 * 1024
