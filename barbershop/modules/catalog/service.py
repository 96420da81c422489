"""Service catalog operations."""

from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from barbershop.core.exceptions import ConflictError, NotFoundError
from barbershop.modules.catalog.models import Service
from barbershop.modules.catalog.schemas import ServiceCreate, ServiceUpdate
from barbershop.shared.models import not_deleted

logger = logging.getLogger(__name__)

NAME_IN_USE = "El nombre de servicio ya está en uso"
_REQUIRED_FIELDS = {"name", "price", "duration_minutes", "is_active"}


class CatalogService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, payload: ServiceCreate) -> Service:
        await self._ensure_name_free(payload.name)
        service = Service(**payload.model_dump())
        self.db.add(service)
        await self.db.commit()
        await self.db.refresh(service)
        logger.info("Created service %s (%s)", service.id, service.name)
        return service

    async def list_all(self) -> list[Service]:
        result = await self.db.execute(select(Service).where(not_deleted(Service)).order_by(Service.name))
        return list(result.scalars().all())

    async def list_by_price_range(self, min_price: Decimal, max_price: Decimal) -> list[Service]:
        stmt = (
            select(Service)
            .where(not_deleted(Service), Service.price.between(min_price, max_price))
            .order_by(Service.price)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def list_by_max_duration(self, max_minutes: int) -> list[Service]:
        stmt = (
            select(Service)
            .where(not_deleted(Service), Service.duration_minutes <= max_minutes)
            .order_by(Service.duration_minutes)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, service_id: int) -> Service:
        service = await self.find_by_id(service_id)
        if service is None:
            raise NotFoundError(f"Servicio con ID {service_id} no encontrado")
        return service

    async def find_by_id(self, service_id: int) -> Service | None:
        result = await self.db.execute(select(Service).where(Service.id == service_id, not_deleted(Service)))
        return result.scalar_one_or_none()

    async def update(self, service_id: int, payload: ServiceUpdate) -> Service:
        update_data = payload.model_dump(exclude_unset=True)
        if update_data.get("name"):
            await self._ensure_name_free(update_data["name"], exclude_id=service_id, with_deleted=True)
        service = await self.get_by_id(service_id)
        for field, value in update_data.items():
            if value is None and field in _REQUIRED_FIELDS:
                continue
            setattr(service, field, value)
        await self.db.commit()
        await self.db.refresh(service)
        return service

    async def remove(self, service_id: int) -> Service:
        service = await self.get_by_id(service_id)
        service.soft_delete()
        await self.db.commit()
        logger.info("Soft-deleted service %s", service_id)
        return service

    async def _ensure_name_free(
        self,
        name: str,
        exclude_id: int | None = None,
        with_deleted: bool = False,
    ) -> None:
        stmt = select(Service.id).where(Service.name == name)
        if not with_deleted:
            stmt = stmt.where(not_deleted(Service))
        if exclude_id is not None:
            stmt = stmt.where(Service.id != exclude_id)
        result = await self.db.execute(stmt.limit(1))
        if result.scalar_one_or_none() is not None:
            raise ConflictError(NAME_IN_USE)
