"""Staff directory service layer."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from barbershop.core.exceptions import ConflictError, NotFoundError
from barbershop.modules.staff.models import Staff
from barbershop.modules.staff.schemas import StaffCreate, StaffUpdate
from barbershop.shared.models import not_deleted

logger = logging.getLogger(__name__)

NAME_IN_USE = "El nombre de peluquero ya está en uso"


class StaffService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, payload: StaffCreate) -> Staff:
        await self._ensure_name_free(payload.name)
        staff = Staff(**payload.model_dump())
        self.db.add(staff)
        await self.db.commit()
        await self.db.refresh(staff)
        logger.info("Created staff member %s (%s)", staff.id, staff.name)
        return staff

    async def list_all(self) -> list[Staff]:
        result = await self.db.execute(select(Staff).where(not_deleted(Staff)).order_by(Staff.name))
        return list(result.scalars().all())

    async def get_by_id(self, staff_id: int) -> Staff:
        staff = await self.find_by_id(staff_id)
        if staff is None:
            raise NotFoundError(f"Peluquero con ID {staff_id} no encontrado")
        return staff

    async def find_by_id(self, staff_id: int) -> Staff | None:
        result = await self.db.execute(select(Staff).where(Staff.id == staff_id, not_deleted(Staff)))
        return result.scalar_one_or_none()

    async def update(self, staff_id: int, payload: StaffUpdate) -> Staff:
        update_data = payload.model_dump(exclude_unset=True)
        if update_data.get("name"):
            await self._ensure_name_free(update_data["name"], exclude_id=staff_id, with_deleted=True)
        staff = await self.get_by_id(staff_id)
        if "name" in update_data and update_data["name"] is None:
            update_data.pop("name")
        for field, value in update_data.items():
            setattr(staff, field, value)
        await self.db.commit()
        await self.db.refresh(staff)
        return staff

    async def remove(self, staff_id: int) -> Staff:
        staff = await self.get_by_id(staff_id)
        staff.soft_delete()
        await self.db.commit()
        logger.info("Soft-deleted staff member %s", staff_id)
        return staff

    async def _ensure_name_free(
        self,
        name: str,
        exclude_id: int | None = None,
        with_deleted: bool = False,
    ) -> None:
        stmt = select(Staff.id).where(Staff.name == name)
        if not with_deleted:
            stmt = stmt.where(not_deleted(Staff))
        if exclude_id is not None:
            stmt = stmt.where(Staff.id != exclude_id)
        result = await self.db.execute(stmt.limit(1))
        if result.scalar_one_or_none() is not None:
            raise ConflictError(NAME_IN_USE)
