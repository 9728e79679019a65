# image_store/infrastructure/storage/file_storage.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from image_store.infrastructure.storage.mime import resolve_mime_type


@dataclass(frozen=True)
class StoredFile:
    path: str
    size: int
    created_at: datetime
    modified_at: datetime

    @property
    def filename(self) -> str:
        return self.path.rsplit("/", 1)[-1]

    @property
    def mime_type(self) -> str:
        return resolve_mime_type(self.filename)


class FileStorage(Protocol):
    def save(self, *, path: str, data: bytes) -> StoredFile:
        """Grava (ou sobrescreve) o arquivo em `path`, criando os diretórios intermediários."""
        raise NotImplementedError

    def read(self, *, path: str) -> bytes:
        raise NotImplementedError

    def delete(self, *, path: str) -> None:
        """Remove o arquivo. Diretórios vazios que sobrarem não são removidos."""
        raise NotImplementedError

    def exists(self, *, path: str) -> bool:
        raise NotImplementedError

    def stat(self, *, path: str) -> StoredFile:
        raise NotImplementedError

    def list_all(self) -> list[StoredFile]:
        """Todos os arquivos sob a raiz, do modificado mais recentemente ao mais antigo."""
        raise NotImplementedError
