"""
Materials Router

Lists stored course materials and ingests new ones from uploaded files.
"""

import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.database import get_db
from app.core.errors import AppError, StoreError, ValidationError
from app.services.chat.models import MaterialData
from app.services.extraction import extract_text
from app.services.material_store import MaterialStore

logger = logging.getLogger(__name__)

router = APIRouter()
settings = get_settings()

DEFAULT_CONTENT_TYPE = "application/octet-stream"


# Schemas
class MaterialsResponse(BaseModel):
    materials: list[MaterialData]


class UploadResponse(BaseModel):
    message: str
    content_preview: str = Field(alias="contentPreview")

    model_config = ConfigDict(populate_by_name=True)


def make_preview(content: str, length: int) -> str:
    return content[:length] + "..."


# Endpoints
@router.get("/init-materials", response_model=MaterialsResponse)
async def init_materials(db: AsyncSession = Depends(get_db)):
    """Return every stored material. Empty when the store is unavailable."""
    materials = await MaterialStore(db).list_all()
    return MaterialsResponse(materials=materials)


@router.post("/upload", response_model=UploadResponse)
async def upload_material(
    title: str | None = Form(None),
    file: UploadFile | None = File(None),
    db: AsyncSession = Depends(get_db),
):
    """Extract text from an uploaded file and store it under a lower-cased title."""
    if not title or not title.strip() or file is None or not file.filename:
        raise ValidationError("Missing file or title", "Both a title and a file are required")

    data = await file.read()

    if len(data) > settings.max_upload_size:
        raise ValidationError(
            "File too large",
            f"Maximum size is {settings.max_upload_size} bytes",
        )

    content = await extract_text(file.filename, file.content_type, data)

    try:
        material = await MaterialStore(db).insert(
            title=title,
            content=content,
            type=file.content_type or DEFAULT_CONTENT_TYPE,
        )
    except StoreError as e:
        raise AppError("Failed to upload file", e.details) from e

    logger.info("Uploaded %r as material %s", file.filename, material.id)
    return UploadResponse(
        message="File uploaded successfully",
        content_preview=make_preview(content, settings.content_preview_length),
    )
