"""Payment ledger service layer."""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta
from decimal import Decimal
from zoneinfo import ZoneInfo

from sqlalchemy import String, case, cast, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from barbershop.core.config import Settings
from barbershop.core.exceptions import ConflictError, NotFoundError, is_unique_violation
from barbershop.modules.appointments.models import Appointment
from barbershop.modules.payments.models import Payment
from barbershop.modules.payments.schemas import (
    PaymentCreate,
    PaymentPage,
    PaymentPublic,
    PaymentQuery,
    PaymentStats,
    PaymentUpdate,
)
from barbershop.shared.enums import PaymentStatus, ReportPeriod
from barbershop.shared.models import not_deleted
from barbershop.shared.schemas import DeletedResponse, PaginationMeta
from barbershop.shared.timeutils import local_midnight_utc, to_utc, utcnow

logger = logging.getLogger(__name__)

TRANSACTION_IN_USE = "El ID de transacción ya está en uso"
APPOINTMENT_ALREADY_PAID = "Ya existe un pago para esta cita"
CENTS = Decimal("0.01")


class PaymentService:
    def __init__(self, db: AsyncSession, settings: Settings):
        self.db = db
        self.tz = ZoneInfo(settings.default_timezone)

    async def create(self, payload: PaymentCreate) -> Payment:
        await self._get_appointment(payload.appointment_id)
        if payload.transaction_id:
            await self._ensure_transaction_free(payload.transaction_id)
        await self._ensure_appointment_unpaid(payload.appointment_id)

        payment = Payment(
            appointment_id=payload.appointment_id,
            amount=payload.amount,
            payment_method=payload.payment_method,
            transaction_id=payload.transaction_id,
            paid_at=self._normalize_datetime(payload.paid_at),
            status=payload.status,
        )
        self.db.add(payment)
        await self._commit_or_conflict()
        logger.info("Registered payment %s for appointment %s", payment.id, payment.appointment_id)
        return await self.get(payment.id)

    async def list_paginated(self, query: PaymentQuery) -> PaymentPage:
        filters = self._filters(query)

        stats_stmt = (
            select(
                func.count(Payment.id),
                func.sum(Payment.amount),
                func.sum(case((Payment.status == PaymentStatus.COMPLETED, 1), else_=0)),
                func.sum(case((Payment.status == PaymentStatus.PENDING, 1), else_=0)),
                func.sum(case((Payment.status == PaymentStatus.FAILED, 1), else_=0)),
            )
            .select_from(Payment)
            .join(Appointment, Payment.appointment_id == Appointment.id)
            .where(*filters)
        )
        total, total_amount, completed, pending, failed = (await self.db.execute(stats_stmt)).one()
        total = total or 0
        total_amount = Decimal(total_amount or 0).quantize(CENTS)

        data_stmt = (
            self._select()
            .join(Appointment, Payment.appointment_id == Appointment.id)
            .where(*filters)
            .order_by(Payment.created_at.desc(), Payment.id.desc())
            .offset((query.page - 1) * query.limit)
            .limit(query.limit)
        )
        rows = list((await self.db.execute(data_stmt)).scalars().all())

        total_pages = math.ceil(total / query.limit)
        return PaymentPage(
            data=[PaymentPublic.model_validate(row) for row in rows],
            meta=PaginationMeta(
                total=total,
                page=query.page,
                limit=query.limit,
                total_pages=total_pages,
                has_next_page=query.page < total_pages,
                has_prev_page=query.page > 1,
            ),
            stats=PaymentStats(
                total_amount=total_amount,
                completed=completed or 0,
                pending=pending or 0,
                failed=failed or 0,
                average_ticket=(total_amount / total).quantize(CENTS) if total else Decimal("0.00"),
            ),
        )

    async def get(self, payment_id: int) -> Payment:
        result = await self.db.execute(
            self._select()
            .where(Payment.id == payment_id, not_deleted(Payment))
            .execution_options(populate_existing=True)
        )
        payment = result.scalar_one_or_none()
        if payment is None:
            raise NotFoundError("Pago no encontrado")
        return payment

    async def list_by_appointment(self, appointment_id: int) -> list[Payment]:
        stmt = (
            self._select()
            .where(Payment.appointment_id == appointment_id, not_deleted(Payment))
            .order_by(Payment.id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def list_by_method(self, payment_method: str) -> list[Payment]:
        stmt = (
            self._select()
            .where(Payment.payment_method == payment_method, not_deleted(Payment))
            .order_by(Payment.created_at.desc(), Payment.id.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def update(self, payment_id: int, payload: PaymentUpdate) -> Payment:
        payment = await self.get(payment_id)
        update_data = payload.model_dump(exclude_unset=True)
        for field in ("appointment_id", "amount", "status"):
            if field in update_data and update_data[field] is None:
                update_data.pop(field)

        new_appointment_id = update_data.get("appointment_id")
        if new_appointment_id is not None and new_appointment_id != payment.appointment_id:
            await self._get_appointment(new_appointment_id)
            await self._ensure_appointment_unpaid(new_appointment_id, exclude_id=payment.id)
        if update_data.get("transaction_id"):
            await self._ensure_transaction_free(update_data["transaction_id"], exclude_id=payment.id)
        if "paid_at" in update_data:
            update_data["paid_at"] = self._normalize_datetime(update_data["paid_at"])

        for field, value in update_data.items():
            setattr(payment, field, value)
        await self._commit_or_conflict()
        logger.info("Updated payment %s (%s)", payment_id, ", ".join(sorted(update_data)))
        return await self.get(payment_id)

    async def remove(self, payment_id: int) -> DeletedResponse:
        payment = await self.get(payment_id)
        payment.soft_delete()
        await self.db.commit()
        logger.info("Soft-deleted payment %s", payment_id)
        return DeletedResponse(deleted=True)

    async def total_by_date_range(self, start: datetime, end: datetime) -> Decimal:
        stmt = select(func.sum(Payment.amount)).where(
            not_deleted(Payment),
            Payment.paid_at.between(self._normalize_datetime(start), self._normalize_datetime(end)),
        )
        total = (await self.db.execute(stmt)).scalar_one_or_none()
        if total is None:
            return Decimal("0.00")
        return Decimal(total).quantize(CENTS)

    def _filters(self, query: PaymentQuery) -> list:
        filters = [not_deleted(Payment)]
        if query.search:
            term = f"%{query.search.lower()}%"
            filters.append(
                or_(
                    func.lower(Appointment.customer_name).like(term),
                    func.lower(Appointment.customer_email).like(term),
                    func.lower(Payment.transaction_id).like(term),
                    func.lower(Payment.payment_method).like(term),
                    cast(Payment.id, String).like(term),
                )
            )
        if query.status is not None:
            filters.append(Payment.status == query.status)
        since = self._period_start(query.period)
        if since is not None:
            filters.append(Payment.created_at >= since)
        return filters

    def _period_start(self, period: ReportPeriod) -> datetime | None:
        if period == ReportPeriod.TODAY:
            return local_midnight_utc(self.tz)
        if period == ReportPeriod.WEEK:
            return utcnow() - timedelta(days=7)
        if period == ReportPeriod.MONTH:
            return utcnow() - timedelta(days=30)
        return None

    async def _get_appointment(self, appointment_id: int) -> Appointment:
        result = await self.db.execute(
            select(Appointment).where(Appointment.id == appointment_id, not_deleted(Appointment))
        )
        appointment = result.scalar_one_or_none()
        if appointment is None:
            raise NotFoundError(f"Cita con ID {appointment_id} no encontrada")
        return appointment

    async def _ensure_transaction_free(self, transaction_id: str, exclude_id: int | None = None) -> None:
        # Soft-deleted rows keep their transaction id reserved.
        stmt = select(Payment.id).where(Payment.transaction_id == transaction_id)
        if exclude_id is not None:
            stmt = stmt.where(Payment.id != exclude_id)
        if (await self.db.execute(stmt.limit(1))).scalar_one_or_none() is not None:
            logger.warning("Rejected duplicate transaction id %s", transaction_id)
            raise ConflictError(TRANSACTION_IN_USE)

    async def _ensure_appointment_unpaid(self, appointment_id: int, exclude_id: int | None = None) -> None:
        stmt = select(Payment.id).where(Payment.appointment_id == appointment_id, not_deleted(Payment))
        if exclude_id is not None:
            stmt = stmt.where(Payment.id != exclude_id)
        if (await self.db.execute(stmt.limit(1))).scalar_one_or_none() is not None:
            logger.warning("Appointment %s already has a payment", appointment_id)
            raise ConflictError(APPOINTMENT_ALREADY_PAID)

    async def _commit_or_conflict(self) -> None:
        try:
            await self.db.commit()
        except IntegrityError as exc:
            await self.db.rollback()
            if not is_unique_violation(exc):
                raise
            if "transaction_id" in str(exc.orig).lower():
                raise ConflictError(TRANSACTION_IN_USE) from exc
            raise ConflictError(APPOINTMENT_ALREADY_PAID) from exc

    def _normalize_datetime(self, value: datetime | None) -> datetime | None:
        if value is None:
            return None
        return to_utc(value, self.tz)

    @staticmethod
    def _select():
        return select(Payment).options(
            selectinload(Payment.appointment).selectinload(Appointment.staff),
            selectinload(Payment.appointment).selectinload(Appointment.service),
        )
