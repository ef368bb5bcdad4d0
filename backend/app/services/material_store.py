"""
Material Store

Flat access to the ``materials`` table: list everything, insert one row.
Reads degrade to an empty list on database failure so the chat client can
still start; writes surface a StoreError.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import StoreError
from app.models.material import Material
from app.services.chat.models import MaterialData

logger = logging.getLogger(__name__)


def normalize_title(title: str) -> str:
    """Titles are compared by exact equality, so they are stored lower-cased."""
    return title.lower()


class MaterialStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[MaterialData]:
        """Return every stored material in insertion order, or [] on failure."""
        try:
            result = await self.db.execute(select(Material).order_by(Material.id))
            rows = result.scalars().all()
        except SQLAlchemyError:
            logger.exception("Failed to list materials")
            return []

        return [MaterialData.model_validate(row) for row in rows]

    async def insert(self, title: str, content: str, type: str) -> MaterialData:
        """
        Store a new material.

        Args:
            title: Material title (lower-cased before storage)
            content: Extracted plain text
            type: MIME type or extension tag of the source file

        Returns:
            The stored material, including its id and created_at

        Raises:
            StoreError: If the row could not be written
        """
        material = Material(title=normalize_title(title), content=content, type=type)
        try:
            self.db.add(material)
            await self.db.commit()
            await self.db.refresh(material)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.exception("Failed to insert material %r", material.title)
            raise StoreError("Failed to store material", str(e)) from e

        logger.info("Stored material id=%s title=%r (%d chars)", material.id, material.title, len(content))
        return MaterialData.model_validate(material)
