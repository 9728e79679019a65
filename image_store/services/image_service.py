# image_store/services/image_service.py
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

from image_store.infrastructure.storage.file_storage import FileStorage, StoredFile
from image_store.infrastructure.storage.mime import resolve_mime_type
from image_store.infrastructure.storage.path_validator import validate_path


@dataclass(frozen=True)
class ImageInfo:
    path: str
    filename: str
    size: int
    uploaded_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Pagination:
    total: int
    page: int
    limit: int
    total_pages: int


@dataclass(frozen=True)
class ImageList:
    images: list[ImageInfo]
    pagination: Pagination


@dataclass(frozen=True)
class ImageContent:
    data: bytes
    filename: str
    mime_type: str


def _to_info(f: StoredFile) -> ImageInfo:
    return ImageInfo(
        path=f.path,
        filename=f.filename,
        size=f.size,
        uploaded_at=f.created_at,
        updated_at=f.modified_at,
    )


def _filename_from(path: str) -> str:
    return path.rsplit("/", 1)[-1]


class ImageService:
    def __init__(self, *, storage: FileStorage) -> None:
        self._storage = storage

    def upload_image(self, *, path: str, data: bytes) -> ImageInfo:
        validate_path(path)
        stored = self._storage.save(path=path, data=data)
        # timestamps vêm do stat do arquivo gravado, iguais aos da listagem
        return _to_info(stored)

    def list_images(self, *, page: int = 1, limit: int = 20) -> ImageList:
        if page < 1 or limit < 1:
            raise ValueError("page e limit devem ser >= 1.")

        all_files = self._storage.list_all()
        total = len(all_files)
        skip = (page - 1) * limit

        return ImageList(
            images=[_to_info(f) for f in all_files[skip:skip + limit]],
            pagination=Pagination(
                total=total,
                page=page,
                limit=limit,
                total_pages=math.ceil(total / limit),
            ),
        )

    def get_image(self, *, path: str) -> ImageContent:
        normalized = validate_path(path)
        data = self._storage.read(path=normalized)
        filename = _filename_from(normalized)
        return ImageContent(
            data=data,
            filename=filename,
            mime_type=resolve_mime_type(filename),
        )

    def get_image_info(self, *, path: str) -> ImageInfo:
        validate_path(path)
        return _to_info(self._storage.stat(path=path))

    def delete_image(self, *, path: str) -> None:
        validate_path(path)
        self._storage.delete(path=path)
