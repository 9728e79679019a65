# image_store/infrastructure/storage/path_validator.py
from __future__ import annotations

import os
import posixpath
from pathlib import Path

from image_store.infrastructure.storage.errors import InvalidPathError


def validate_path(relative_path: str) -> str:
    """
    Normaliza um path relativo (sem tocar no filesystem) e rejeita
    qualquer forma que possa escapar da raiz do storage.
    Retorna o path normalizado.
    """
    raw = relative_path or ""
    if not raw.strip():
        raise InvalidPathError("Path vazio.", path=relative_path)

    if "\x00" in raw:
        raise InvalidPathError("Path inválido (caractere nulo).", path=relative_path)

    # "\x" e "C:" não nomeiam um arquivo dentro da raiz em nenhuma plataforma
    if raw.startswith("\\") or (len(raw) >= 2 and raw[1] == ":"):
        raise InvalidPathError("Path absoluto não é permitido.", path=relative_path)

    if raw.startswith("/"):
        raise InvalidPathError("Path absoluto não é permitido.", path=relative_path)

    # "dir/" ou "dir/." viraria um arquivo chamado "dir" depois do normpath
    if raw.rsplit("/", 1)[-1] in ("", "."):
        raise InvalidPathError("Path deve terminar com o nome do arquivo.", path=relative_path)

    normalized = posixpath.normpath(raw)

    if normalized == ".":
        raise InvalidPathError("Path vazio.", path=relative_path)

    # normpath já colapsou "a/../b"; sobrar ".." significa sair da raiz
    if ".." in normalized.split("/") or normalized.startswith("/"):
        raise InvalidPathError("Path inválido (path traversal).", path=relative_path)

    return normalized


def _is_inside(root: Path, candidate: Path) -> bool:
    base_str = str(root)
    abs_str = str(candidate)
    return abs_str == base_str or abs_str.startswith(base_str.rstrip(os.sep) + os.sep)


def resolve_inside(root: Path, relative_path: str) -> Path:
    """
    Caminho absoluto da entrada `relative_path` sob `root` (já resolvida).
    Só o diretório pai é resolvido: o último segmento continua sendo a
    própria entrada, mesmo que seja um symlink.
    """
    normalized = validate_path(relative_path)
    candidate = root / normalized

    # anti path traversal (segunda barreira, após resolver symlinks)
    parent = candidate.parent.resolve()
    if not _is_inside(root, parent):
        raise InvalidPathError("Path inválido (path traversal).", path=relative_path)

    # um symlink final que aponte para fora da raiz também é recusado
    if not _is_inside(root, candidate.resolve()):
        raise InvalidPathError("Path inválido (path traversal).", path=relative_path)

    return parent / candidate.name
