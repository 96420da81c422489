"""Appointment service layer."""

from __future__ import annotations

import logging
from datetime import datetime
from zoneinfo import ZoneInfo

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from barbershop.core.config import Settings
from barbershop.core.exceptions import ConflictError, NotFoundError, is_unique_violation
from barbershop.modules.appointments.models import Appointment
from barbershop.modules.appointments.schemas import AppointmentCreate, AppointmentUpdate
from barbershop.modules.catalog.service import CatalogService
from barbershop.modules.staff.service import StaffService
from barbershop.shared.enums import AppointmentStatus
from barbershop.shared.models import not_deleted
from barbershop.shared.schemas import DeletedResponse
from barbershop.shared.timeutils import to_utc

logger = logging.getLogger(__name__)

SLOT_TAKEN = "Ya existe una cita para ese peluquero en ese horario"


class AppointmentService:
    def __init__(self, db: AsyncSession, settings: Settings):
        self.db = db
        self.tz = ZoneInfo(settings.default_timezone)
        self.staff = StaffService(db)
        self.catalog = CatalogService(db)

    async def create(self, payload: AppointmentCreate) -> Appointment:
        await self.staff.get_by_id(payload.staff_id)
        await self.catalog.get_by_id(payload.service_id)
        scheduled_at = self._normalize_datetime(payload.scheduled_at)
        await self._ensure_slot_free(payload.staff_id, scheduled_at)

        appointment = Appointment(
            scheduled_at=scheduled_at,
            staff_id=payload.staff_id,
            service_id=payload.service_id,
            customer_name=payload.customer_name,
            customer_email=str(payload.customer_email),
            customer_phone=payload.customer_phone,
            notes=payload.notes,
            status=AppointmentStatus.PENDING,
        )
        self.db.add(appointment)
        await self._commit_or_conflict()
        logger.info(
            "Booked appointment %s for staff %s at %s",
            appointment.id,
            appointment.staff_id,
            scheduled_at.isoformat(),
        )
        return await self._get_by_id(appointment.id)

    async def list_all(self) -> list[Appointment]:
        stmt = self._select().where(not_deleted(Appointment)).order_by(Appointment.scheduled_at, Appointment.id)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get(self, appointment_id: int) -> Appointment:
        return await self._get_by_id(appointment_id)

    async def update(self, appointment_id: int, payload: AppointmentUpdate) -> Appointment:
        appointment = await self._get_by_id(appointment_id)
        update_data = payload.model_dump(exclude_unset=True)
        # Explicit nulls on required columns are treated as "not provided".
        for field in ("scheduled_at", "staff_id", "service_id", "customer_name", "customer_email", "status"):
            if field in update_data and update_data[field] is None:
                update_data.pop(field)
        if not update_data:
            return appointment

        if "staff_id" in update_data and update_data["staff_id"] != appointment.staff_id:
            await self.staff.get_by_id(update_data["staff_id"])
        if "service_id" in update_data and update_data["service_id"] != appointment.service_id:
            await self.catalog.get_by_id(update_data["service_id"])
        if "scheduled_at" in update_data:
            update_data["scheduled_at"] = self._normalize_datetime(update_data["scheduled_at"])
        if "customer_email" in update_data:
            update_data["customer_email"] = str(update_data["customer_email"])

        staff_id = update_data.get("staff_id", appointment.staff_id)
        scheduled_at = update_data.get("scheduled_at", self._stored_utc(appointment.scheduled_at))
        new_status = update_data.get("status", appointment.status)
        slot_changed = staff_id != appointment.staff_id or scheduled_at != self._stored_utc(appointment.scheduled_at)
        reactivated = appointment.status == AppointmentStatus.CANCELLED and new_status != AppointmentStatus.CANCELLED
        if (slot_changed or reactivated) and new_status != AppointmentStatus.CANCELLED:
            await self._ensure_slot_free(staff_id, scheduled_at, exclude_id=appointment.id)

        for field, value in update_data.items():
            setattr(appointment, field, value)
        await self._commit_or_conflict()
        logger.info("Updated appointment %s (%s)", appointment_id, ", ".join(sorted(update_data)))
        return await self._get_by_id(appointment_id)

    async def remove(self, appointment_id: int) -> DeletedResponse:
        appointment = await self._get_by_id(appointment_id)
        appointment.soft_delete()
        await self.db.commit()
        logger.info("Soft-deleted appointment %s", appointment_id)
        return DeletedResponse(deleted=True)

    async def find_by_id(self, appointment_id: int) -> Appointment | None:
        result = await self.db.execute(
            self._select()
            .where(Appointment.id == appointment_id, not_deleted(Appointment))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def _get_by_id(self, appointment_id: int) -> Appointment:
        appointment = await self.find_by_id(appointment_id)
        if appointment is None:
            raise NotFoundError("Cita no encontrada")
        return appointment

    async def _ensure_slot_free(self, staff_id: int, scheduled_at: datetime, exclude_id: int | None = None) -> None:
        stmt = select(Appointment.id).where(
            Appointment.staff_id == staff_id,
            Appointment.scheduled_at == scheduled_at,
            Appointment.status != AppointmentStatus.CANCELLED,
            not_deleted(Appointment),
        )
        if exclude_id is not None:
            stmt = stmt.where(Appointment.id != exclude_id)
        result = await self.db.execute(stmt.limit(1))
        if result.scalar_one_or_none() is not None:
            logger.warning("Slot conflict for staff %s at %s", staff_id, scheduled_at.isoformat())
            raise ConflictError(SLOT_TAKEN)

    async def _commit_or_conflict(self) -> None:
        try:
            await self.db.commit()
        except IntegrityError as exc:
            await self.db.rollback()
            if is_unique_violation(exc):
                logger.warning("Slot taken concurrently: %s", exc.orig)
                raise ConflictError(SLOT_TAKEN) from exc
            raise

    def _normalize_datetime(self, value: datetime) -> datetime:
        return to_utc(value, self.tz)

    @staticmethod
    def _stored_utc(value: datetime) -> datetime:
        # SQLite hands back naive values; they were written as UTC.
        return to_utc(value, ZoneInfo("UTC"))

    @staticmethod
    def _select():
        return select(Appointment).options(
            selectinload(Appointment.staff),
            selectinload(Appointment.service),
            selectinload(Appointment.payment),
        )
