"""
Chat Router

POST /chat runs one turn of the select-then-answer protocol. The client
sends its whole conversation state and gets the updated used materials back.
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.errors import ExternalServiceError, ValidationError
from app.services.chat.models import ConversationTurn, MaterialData
from app.services.chat.pipeline import ChatPipeline, get_chat_pipeline
from app.services.llm.registry import is_known_model
from app.services.material_store import MaterialStore

logger = logging.getLogger(__name__)

router = APIRouter()


# Schemas
class ChatRequest(BaseModel):
    message: str
    history: list[ConversationTurn] | None = None
    # Omitted -> loaded from the material store
    materials: list[MaterialData] | None = None
    used_materials: list[MaterialData] | None = Field(default=None, alias="usedMaterials")
    model: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class ChatResponse(BaseModel):
    response: str
    used_materials: list[MaterialData] = Field(alias="usedMaterials")

    model_config = ConfigDict(populate_by_name=True)


# Endpoints
@router.post("/chat", response_model=ChatResponse)
async def chat(
    data: ChatRequest,
    pipeline: ChatPipeline = Depends(get_chat_pipeline),
    db: AsyncSession = Depends(get_db),
):
    """Answer a chat message using the relevant course materials."""
    message = data.message.strip()
    if not message:
        raise ValidationError("Missing message", "The message must not be empty")

    if data.model and not is_known_model(data.model):
        raise ValidationError("Unknown model", f"Model '{data.model}' is not available")

    materials = data.materials
    if materials is None:
        materials = await MaterialStore(db).list_all()

    try:
        result = await pipeline.run_turn(
            message=message,
            history=data.history or [],
            materials=materials,
            used_materials=data.used_materials or [],
            model_id=data.model,
        )
    except Exception as e:
        logger.exception("Chat turn failed")
        raise ExternalServiceError("Failed to process request", str(e)) from e

    return ChatResponse(response=result.response, used_materials=result.used_materials)
