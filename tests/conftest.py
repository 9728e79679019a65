"""
Fixtures compartilhadas: storage em diretório temporário, app Flask e client.
"""

import io
from pathlib import Path

import pytest

from image_store.config.settings import Settings
from image_store.infrastructure.storage.local_file_storage import (
    LocalFileStorage,
    LocalFileStorageConfig,
)
from image_store.main import create_app
from image_store.services.image_service import ImageService

# PNG 1x1 mínimo
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d49484452000000010000000108060000001f15c489"
    "0000000d4944415478da636400000000060005d7a4b1a10000000049454e44ae426082"
)
JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00\xff\xd9"


@pytest.fixture
def storage_root(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def storage(storage_root: Path) -> LocalFileStorage:
    return LocalFileStorage(config=LocalFileStorageConfig(base_path=str(storage_root)))


@pytest.fixture
def service(storage: LocalFileStorage) -> ImageService:
    return ImageService(storage=storage)


@pytest.fixture
def settings(storage_root: Path) -> Settings:
    return Settings(
        _env_file=None,
        image_storage_path=str(storage_root),
        max_file_size_mb=1,
        debug=False,
    )


@pytest.fixture
def app(settings: Settings):
    app = create_app(settings)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def upload(client):
    """Faz o upload via multipart e devolve a response."""

    def _upload(path: str, data: bytes = PNG_BYTES, filename: str = "image.png", **extra):
        form = {"path": path, "file": (io.BytesIO(data), filename), **extra}
        return client.post("/api/images", data=form, content_type="multipart/form-data")

    return _upload


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_BYTES


@pytest.fixture
def jpeg_bytes() -> bytes:
    return JPEG_BYTES
