# image_store/api/routes/image_routes.py

from __future__ import annotations

import logging
from urllib.parse import unquote

from flask import Blueprint, Response, current_app, jsonify, request
from pydantic import ValidationError
from werkzeug.datastructures import FileStorage as WzFileStorage
from werkzeug.routing import PathConverter

from image_store.api.schemas._datetime_serializer import http_date
from image_store.api.schemas.image_schema import (
    ImageListResponse,
    ImageResponse,
    ListImagesQuery,
    PaginationResponse,
    UploadImageForm,
)
from image_store.config.settings import Settings
from image_store.core.exceptions import AppError, NotFoundError, RequestValidationError
from image_store.infrastructure.storage.errors import InvalidPathError, StorageError
from image_store.infrastructure.storage.mime import resolve_mime_type
from image_store.services.image_service import ImageInfo, ImageService

logger = logging.getLogger(__name__)

bp_images = Blueprint("images", __name__)


class ImageKeyConverter(PathConverter):
    # aceita "/" inicial e "//" para que a chave chegue ao validate_path (e vire 400)
    regex = ".+"
    part_isolating = False


# -------------------------
# Helpers
# -------------------------

def _service() -> ImageService:
    return current_app.extensions["image_service"]


def _settings() -> Settings:
    return current_app.config["SETTINGS"]


def _validation_details(err: ValidationError) -> str:
    return ", ".join(
        f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in err.errors()
    )


def _image_model(info: ImageInfo) -> ImageResponse:
    return ImageResponse(
        path=info.path,
        filename=info.filename,
        size=info.size,
        uploaded_at=info.uploaded_at,
        updated_at=info.updated_at,
    )


def _image_response(info: ImageInfo) -> dict:
    return _image_model(info).model_dump(mode="json", by_alias=True)


def _decode_path(path: str) -> str:
    # o cliente manda o path URL-encoded (barras como %2F)
    return unquote(path)


# -------------------------
# Upload
# -------------------------

@bp_images.post("")
@bp_images.post("/")
def upload_image():
    upload: WzFileStorage | None = request.files.get("file")
    if upload is None:
        raise RequestValidationError(
            "Nenhum arquivo enviado.", details="file: campo obrigatório (multipart/form-data)"
        )

    data = upload.read()

    try:
        form = UploadImageForm(
            path=request.form.get("path") or "",
            size_bytes=len(data),
            description=request.form.get("description"),
            tags=request.form.get("tags"),
        )
    except ValidationError as e:
        raise RequestValidationError("Dados de upload inválidos.", details=_validation_details(e))

    settings = _settings()
    if len(data) > settings.max_file_size_bytes:
        raise RequestValidationError(
            "Dados de upload inválidos.",
            details=f"file: tamanho máximo de {settings.max_file_size_mb}MB",
        )

    try:
        info = _service().upload_image(path=form.path, data=data)
    except StorageError as e:
        # path inválido ou falha de gravação: ambos viram 400 no upload
        logger.warning("Upload rejeitado (path=%s): %s", form.path, e.cause or e)
        raise AppError(str(e), status_code=400)

    return jsonify(_image_response(info)), 201


# -------------------------
# Listagem
# -------------------------

@bp_images.get("")
@bp_images.get("/")
def list_images():
    try:
        query = ListImagesQuery.model_validate(request.args.to_dict())
    except ValidationError as e:
        raise RequestValidationError("Parâmetros page/limit inválidos.", details=_validation_details(e))

    result = _service().list_images(page=query.page, limit=query.limit)

    payload = ImageListResponse(
        images=[_image_model(i) for i in result.images],
        pagination=PaginationResponse(
            total=result.pagination.total,
            page=result.pagination.page,
            limit=result.pagination.limit,
            total_pages=result.pagination.total_pages,
        ),
    ).model_dump(mode="json", by_alias=True)

    return jsonify(payload), 200


# -------------------------
# Download / metadados / remoção
# -------------------------

@bp_images.get("/<image_key:path>")
def get_image(path: str):
    decoded = _decode_path(path)

    # HEAD responde só com os metadados, sem ler o conteúdo
    if request.method == "HEAD":
        return _head_image(decoded)

    try:
        content = _service().get_image(path=decoded)
    except InvalidPathError:
        raise
    except StorageError as e:
        # inexistente e ilegível são tratados igual: 404
        raise NotFoundError("Imagem não encontrada.") from e

    return Response(
        content.data,
        status=200,
        mimetype=content.mime_type,
        headers={
            "Content-Length": str(len(content.data)),
            "Content-Disposition": f'inline; filename="{content.filename}"',
        },
    )


def _head_image(decoded: str) -> Response:
    try:
        info = _service().get_image_info(path=decoded)
    except InvalidPathError:
        raise
    except StorageError as e:
        raise NotFoundError("Imagem não encontrada.") from e

    resp = Response(status=200, mimetype=resolve_mime_type(info.filename))
    resp.headers["Content-Length"] = str(info.size)
    resp.headers["Last-Modified"] = http_date(info.updated_at)
    return resp


@bp_images.delete("/<image_key:path>")
def delete_image(path: str):
    decoded = _decode_path(path)

    try:
        _service().delete_image(path=decoded)
    except InvalidPathError:
        raise
    except StorageError as e:
        raise NotFoundError("Imagem não encontrada.") from e

    return "", 204
