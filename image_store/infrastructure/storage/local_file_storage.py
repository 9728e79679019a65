# image_store/infrastructure/storage/local_file_storage.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from image_store.infrastructure.storage.errors import FileMissingError, StorageError
from image_store.infrastructure.storage.file_storage import FileStorage, StoredFile
from image_store.infrastructure.storage.path_validator import resolve_inside, validate_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocalFileStorageConfig:
    base_path: str


@dataclass(frozen=True)
class StorageHealth:
    base_path: str
    exists: bool
    is_dir: bool
    writable: bool

    @property
    def ok(self) -> bool:
        # raiz ainda inexistente é válida: é criada no primeiro upload
        if not self.exists:
            return True
        return self.is_dir and self.writable


def _to_datetime(ts: float) -> datetime:
    return datetime.fromtimestamp(ts, tz=timezone.utc)


def _stored_file(rel_path: str, st: os.stat_result) -> StoredFile:
    # st_birthtime só existe em algumas plataformas; no Linux cai para st_ctime
    created = getattr(st, "st_birthtime", None) or st.st_ctime
    return StoredFile(
        path=rel_path,
        size=st.st_size,
        created_at=_to_datetime(created),
        modified_at=_to_datetime(st.st_mtime),
    )


class LocalFileStorage(FileStorage):
    def __init__(self, *, config: LocalFileStorageConfig) -> None:
        raw = (config.base_path or "").strip()
        if not raw:
            raise ValueError("Storage de imagens não configurado (IMAGE_STORAGE_PATH vazio).")

        # a raiz não precisa existir ainda; é criada sob demanda no save()
        self._base = Path(raw).expanduser().resolve()

    @property
    def base_path(self) -> Path:
        return self._base

    def _abs_path(self, path: str) -> Path:
        return resolve_inside(self._base, path)

    @staticmethod
    def _rel_path(path: str) -> str:
        return validate_path(path)

    def save(self, *, path: str, data: bytes) -> StoredFile:
        abs_path = self._abs_path(path)

        try:
            abs_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(
                f"Falha ao preparar diretório '{abs_path.parent}': {e}",
                path=path,
                cause=e,
            ) from e

        # sem rollback: uma escrita que falhe no meio pode deixar arquivo truncado
        try:
            with open(abs_path, "wb") as out:
                out.write(data)
            st = abs_path.stat()
        except OSError as e:
            raise StorageError(f"Falha ao salvar arquivo: {path}", path=path, cause=e) from e

        logger.info("Arquivo salvo: %s (%d bytes)", path, st.st_size)
        return _stored_file(self._rel_path(path), st)

    def read(self, *, path: str) -> bytes:
        abs_path = self._abs_path(path)

        try:
            with open(abs_path, "rb") as f:
                return f.read()
        except FileNotFoundError as e:
            raise FileMissingError(f"Arquivo não encontrado: {path}", path=path, cause=e) from e
        except OSError as e:
            raise StorageError(f"Falha ao ler arquivo: {path}", path=path, cause=e) from e

    def delete(self, *, path: str) -> None:
        abs_path = self._abs_path(path)

        try:
            abs_path.unlink()
        except FileNotFoundError as e:
            raise FileMissingError(f"Arquivo não encontrado: {path}", path=path, cause=e) from e
        except OSError as e:
            raise StorageError(f"Falha ao remover arquivo: {path}", path=path, cause=e) from e

        logger.info("Arquivo removido: %s", path)

    def exists(self, *, path: str) -> bool:
        abs_path = self._abs_path(path)
        try:
            abs_path.stat()
        except OSError:
            return False
        return True

    def stat(self, *, path: str) -> StoredFile:
        abs_path = self._abs_path(path)

        try:
            st = abs_path.stat()
        except FileNotFoundError as e:
            raise FileMissingError(f"Arquivo não encontrado: {path}", path=path, cause=e) from e
        except OSError as e:
            raise StorageError(f"Falha ao ler metadados: {path}", path=path, cause=e) from e

        if not abs_path.is_file():
            raise FileMissingError(f"Arquivo não encontrado: {path}", path=path)

        return _stored_file(self._rel_path(path), st)

    def _walk(self, directory: str, prefix: str, out: list[StoredFile]) -> None:
        try:
            entries = list(os.scandir(directory))
        except FileNotFoundError:
            # raiz ainda não criada, ou diretório removido durante a varredura
            return

        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                self._walk(entry.path, f"{prefix}{entry.name}/", out)
            elif entry.is_file(follow_symlinks=False):
                try:
                    st = entry.stat(follow_symlinks=False)
                except FileNotFoundError:
                    continue
                out.append(_stored_file(f"{prefix}{entry.name}", st))

    def list_all(self) -> list[StoredFile]:
        files: list[StoredFile] = []
        try:
            self._walk(str(self._base), "", files)
        except OSError as e:
            raise StorageError(f"Falha ao listar arquivos: {e}", cause=e) from e

        # mais recente primeiro; empate de timestamp desempata pelo path (desc)
        files.sort(key=lambda f: (f.modified_at, f.path), reverse=True)
        return files

    def check_health(self) -> StorageHealth:
        exists = self._base.exists()
        is_dir = exists and self._base.is_dir()
        return StorageHealth(
            base_path=str(self._base),
            exists=exists,
            is_dir=is_dir,
            writable=is_dir and os.access(self._base, os.W_OK),
        )
