"""Staff/service assignment service layer."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from barbershop.core.exceptions import ConflictError, NotFoundError
from barbershop.modules.assignments.models import StaffService
from barbershop.modules.assignments.schemas import AssignmentUpdate
from barbershop.modules.catalog.service import CatalogService
from barbershop.modules.staff.service import StaffService as StaffDirectory
from barbershop.shared.models import not_deleted

logger = logging.getLogger(__name__)

NOT_FOUND = "Asignación no encontrada"


class AssignmentService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.staff = StaffDirectory(db)
        self.catalog = CatalogService(db)

    async def assign(self, staff_id: int, service_id: int) -> StaffService:
        """Link a staff member to a service.

        An active link is returned as-is and a soft-deleted one is restored, so
        calling this repeatedly never creates duplicates.
        """
        await self.staff.get_by_id(staff_id)
        await self.catalog.get_by_id(service_id)

        existing = await self._find(staff_id, service_id, with_deleted=True)
        if existing is not None and not existing.is_deleted:
            return existing
        if existing is not None:
            existing.restore()
            logger.info("Restored assignment staff=%s service=%s", staff_id, service_id)
        else:
            self.db.add(StaffService(staff_id=staff_id, service_id=service_id))
            logger.info("Created assignment staff=%s service=%s", staff_id, service_id)
        await self.db.commit()
        return await self.get(staff_id, service_id)

    async def get(self, staff_id: int, service_id: int) -> StaffService:
        link = await self._find(staff_id, service_id)
        if link is None:
            raise NotFoundError(NOT_FOUND)
        return link

    async def list_all(self) -> list[StaffService]:
        stmt = (
            self._select()
            .where(not_deleted(StaffService))
            .order_by(StaffService.staff_id, StaffService.service_id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def list_services_for_staff(self, staff_id: int) -> list[StaffService]:
        await self.staff.get_by_id(staff_id)
        stmt = (
            self._select()
            .where(StaffService.staff_id == staff_id, not_deleted(StaffService))
            .order_by(StaffService.service_id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def list_staff_for_service(self, service_id: int) -> list[StaffService]:
        await self.catalog.get_by_id(service_id)
        stmt = (
            self._select()
            .where(StaffService.service_id == service_id, not_deleted(StaffService))
            .order_by(StaffService.staff_id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def reassign(self, staff_id: int, service_id: int, payload: AssignmentUpdate) -> StaffService:
        current = await self.get(staff_id, service_id)
        target_staff_id = payload.staff_id if payload.staff_id is not None else staff_id
        target_service_id = payload.service_id if payload.service_id is not None else service_id
        if (target_staff_id, target_service_id) == (staff_id, service_id):
            return current

        await self.staff.get_by_id(target_staff_id)
        await self.catalog.get_by_id(target_service_id)

        target = await self._find(target_staff_id, target_service_id, with_deleted=True)
        if target is not None and not target.is_deleted:
            raise ConflictError("La asignación ya existe")
        if target is not None:
            target.restore()
        else:
            self.db.add(StaffService(staff_id=target_staff_id, service_id=target_service_id))
        current.soft_delete()
        await self.db.commit()
        logger.info(
            "Moved assignment staff=%s service=%s to staff=%s service=%s",
            staff_id,
            service_id,
            target_staff_id,
            target_service_id,
        )
        return await self.get(target_staff_id, target_service_id)

    async def remove(self, staff_id: int, service_id: int) -> None:
        link = await self.get(staff_id, service_id)
        link.soft_delete()
        await self.db.commit()

    async def remove_all_for_staff(self, staff_id: int) -> int:
        links = await self.list_services_for_staff(staff_id)
        return await self._soft_delete_all(links)

    async def remove_all_for_service(self, service_id: int) -> int:
        links = await self.list_staff_for_service(service_id)
        return await self._soft_delete_all(links)

    async def _soft_delete_all(self, links: list[StaffService]) -> int:
        for link in links:
            link.soft_delete()
        await self.db.commit()
        return len(links)

    async def _find(self, staff_id: int, service_id: int, with_deleted: bool = False) -> StaffService | None:
        stmt = (
            self._select()
            .where(StaffService.staff_id == staff_id, StaffService.service_id == service_id)
            .execution_options(populate_existing=True)
        )
        if not with_deleted:
            stmt = stmt.where(not_deleted(StaffService))
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _select():
        return select(StaffService).options(
            selectinload(StaffService.staff),
            selectinload(StaffService.service),
        )
