# image_store/api/openapi.py
from __future__ import annotations

from typing import Any

from pydantic.json_schema import models_json_schema

from image_store.api.schemas.image_schema import (
    ErrorResponse,
    ImageListResponse,
    ImageResponse,
)

API_TITLE = "Image Storage API"
API_VERSION = "1.0.0"

_REF = "#/components/schemas/{model}"


def _json(ref: str, description: str) -> dict[str, Any]:
    return {
        "description": description,
        "content": {"application/json": {"schema": {"$ref": ref}}},
    }


def _error(description: str) -> dict[str, Any]:
    return _json(_REF.format(model="ErrorResponse"), description)


def _path_param() -> dict[str, Any]:
    return {
        "name": "path",
        "in": "path",
        "required": True,
        "description": "Path da imagem, URL-encoded (ex.: user%2F123%2Fprofile.png)",
        "schema": {"type": "string"},
    }


def build_openapi_document() -> dict[str, Any]:
    _, top = models_json_schema(
        [
            (ImageResponse, "serialization"),
            (ImageListResponse, "serialization"),
            (ErrorResponse, "serialization"),
        ],
        ref_template=_REF,
    )
    schemas = top.get("$defs", {})

    image_ref = _REF.format(model="ImageResponse")
    list_ref = _REF.format(model="ImageListResponse")

    return {
        "openapi": "3.1.0",
        "info": {
            "title": API_TITLE,
            "version": API_VERSION,
            "description": "API para salvar e recuperar imagens no storage local",
        },
        "tags": [{"name": "Images", "description": "Gerenciamento de imagens"}],
        "paths": {
            "/api/images": {
                "post": {
                    "tags": ["Images"],
                    "summary": "Upload de imagem",
                    "requestBody": {
                        "required": True,
                        "content": {
                            "multipart/form-data": {
                                "schema": {
                                    "type": "object",
                                    "required": ["path", "file"],
                                    "properties": {
                                        "path": {
                                            "type": "string",
                                            "example": "user/123/profile.png",
                                        },
                                        "file": {"type": "string", "format": "binary"},
                                        "description": {"type": "string"},
                                        "tags": {"type": "string"},
                                    },
                                }
                            }
                        },
                    },
                    "responses": {
                        "201": _json(image_ref, "Imagem salva"),
                        "400": _error("Requisição inválida"),
                        "500": _error("Erro interno"),
                    },
                },
                "get": {
                    "tags": ["Images"],
                    "summary": "Listagem paginada de imagens",
                    "parameters": [
                        {
                            "name": "page",
                            "in": "query",
                            "schema": {"type": "integer", "minimum": 1, "default": 1},
                        },
                        {
                            "name": "limit",
                            "in": "query",
                            "schema": {
                                "type": "integer",
                                "minimum": 1,
                                "maximum": 100,
                                "default": 20,
                            },
                        },
                    ],
                    "responses": {
                        "200": _json(list_ref, "Lista de imagens"),
                        "400": _error("Parâmetros inválidos"),
                        "500": _error("Erro interno"),
                    },
                },
            },
            "/api/images/{path}": {
                "get": {
                    "tags": ["Images"],
                    "summary": "Conteúdo da imagem",
                    "parameters": [_path_param()],
                    "responses": {
                        "200": {
                            "description": "Conteúdo binário da imagem",
                            "content": {"image/*": {"schema": {"type": "string", "format": "binary"}}},
                        },
                        "400": _error("Path inválido"),
                        "404": _error("Imagem não encontrada"),
                    },
                },
                "delete": {
                    "tags": ["Images"],
                    "summary": "Remoção de imagem",
                    "parameters": [_path_param()],
                    "responses": {
                        "204": {"description": "Imagem removida"},
                        "400": _error("Path inválido"),
                        "404": _error("Imagem não encontrada"),
                    },
                },
            },
        },
        "components": {"schemas": schemas},
    }
