"""
Pydantic models shared by the chat pipeline, the material store and the routers.

Conversation state (history and used materials) is owned by the caller and
travels in and out of every request as these values.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict


class MaterialData(BaseModel):
    """A unit of course content as exchanged with the client."""

    id: int | None = None
    title: str
    content: str
    type: str = ""
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class ConversationTurn(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class ChatTurnResult(BaseModel):
    response: str
    used_materials: list[MaterialData]
    selected_titles: list[str] = []
    new_titles: list[str] = []  # titles appended to used_materials this turn
