"""
Repository Pattern -- abstracts DB access so domain logic stays DB-agnostic.

``SqlLocationStore`` receives an ``AsyncSession`` (unit-of-work) and
implements the ``LocationStore`` port.  Driver errors never leak past it:
they surface as ``PersistenceError``.
"""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .models import LocationModel
from nearby.domain.entities import Location
from nearby.domain.errors import NotFound, PersistenceError
from nearby.domain.ports import LocationStore

logger = logging.getLogger(__name__)


class SqlLocationStore(LocationStore):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, location: Location) -> str:
        row = LocationModel(
            id=uuid.uuid4().hex,
            name=location.name,
            address=location.address,
            latitude=location.latitude,
            longitude=location.longitude,
            category=location.category,
        )
        try:
            self.session.add(row)
            await self.session.flush()
        except SQLAlchemyError as exc:
            logger.exception("Failed to insert location %r", location.name)
            raise PersistenceError("Could not store location") from exc
        return row.id

    async def list_by_category(self, category: str) -> list[Location]:
        try:
            result = await self.session.execute(
                select(LocationModel).where(LocationModel.category == category)
            )
            rows = result.scalars().all()
        except SQLAlchemyError as exc:
            logger.exception("Failed to list locations for category %r", category)
            raise PersistenceError("Could not read locations") from exc
        return [self._to_domain(row) for row in rows]

    async def get_by_id(self, location_id: str) -> Location:
        key = self._normalize_id(location_id)
        try:
            row = await self.session.get(LocationModel, key)
        except SQLAlchemyError as exc:
            logger.exception("Failed to load location %s", key)
            raise PersistenceError("Could not read location") from exc
        if row is None:
            raise NotFound(f"Location {location_id} not found")
        return self._to_domain(row)

    async def count(self) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(LocationModel)
        )
        return result.scalar() or 0

    @staticmethod
    def _normalize_id(location_id: str) -> str:
        try:
            return uuid.UUID(location_id).hex
        except (TypeError, ValueError, AttributeError):
            raise NotFound(f"Invalid location ID {location_id!r}") from None

    @staticmethod
    def _to_domain(row: LocationModel) -> Location:
        return Location(
            id=row.id,
            name=row.name,
            address=row.address,
            latitude=row.latitude,
            longitude=row.longitude,
            category=row.category,
        )
