# image_store/api/schemas/image_schema.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UploadImageForm(BaseModel):
    # não pode começar com "." nem "/" (ex.: user/123/profile.png)
    path: str = Field(min_length=1, max_length=1024, pattern=r"^[^./]")
    size_bytes: int = Field(gt=0)
    description: Optional[str] = Field(default=None, max_length=1000)
    tags: Optional[str] = Field(default=None, max_length=1000)


class ListImagesQuery(BaseModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class ImageResponse(_CamelModel):
    path: str
    filename: str
    size: int = Field(ge=0)
    uploaded_at: datetime
    updated_at: datetime


class PaginationResponse(_CamelModel):
    total: int = Field(ge=0)
    page: int = Field(ge=1)
    limit: int = Field(ge=1)
    total_pages: int = Field(ge=0)


class ImageListResponse(_CamelModel):
    images: list[ImageResponse]
    pagination: PaginationResponse


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
