# image_store/infrastructure/storage/errors.py
from __future__ import annotations


class StorageError(Exception):
    """Falha de I/O no storage, com o path envolvido e a causa original."""

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.cause = cause


class InvalidPathError(StorageError):
    pass


class FileMissingError(StorageError):
    pass
