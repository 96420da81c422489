"""Appointment ORM model."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum, ForeignKey, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from barbershop.core.database import Base
from barbershop.shared.enums import AppointmentStatus, enum_values
from barbershop.shared.models import SoftDeleteMixin, TimestampMixin

if TYPE_CHECKING:  # pragma: no cover
    from barbershop.modules.catalog.models import Service
    from barbershop.modules.payments.models import Payment
    from barbershop.modules.staff.models import Staff

# Rows that still hold their slot: neither soft-deleted nor cancelled.
ACTIVE_SLOT_PREDICATE = text("deleted_at IS NULL AND status <> 'Cancelada'")


class Appointment(Base, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "appointments"
    __table_args__ = (
        Index(
            "uq_appointments_staff_scheduled_at",
            "staff_id",
            "scheduled_at",
            unique=True,
            postgresql_where=ACTIVE_SLOT_PREDICATE,
            sqlite_where=ACTIVE_SLOT_PREDICATE,
        ),
        Index("ix_appointments_scheduled_at", "scheduled_at"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    scheduled_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    staff_id: Mapped[int] = mapped_column(ForeignKey("staff.id", ondelete="RESTRICT"), nullable=False)
    service_id: Mapped[int] = mapped_column(ForeignKey("services.id", ondelete="RESTRICT"), nullable=False)
    customer_name: Mapped[str] = mapped_column(String(100), nullable=False)
    customer_email: Mapped[str] = mapped_column(String(255), nullable=False)
    customer_phone: Mapped[str | None] = mapped_column(String(20))
    notes: Mapped[str | None] = mapped_column(Text)
    status: Mapped[AppointmentStatus] = mapped_column(
        Enum(
            AppointmentStatus,
            values_callable=enum_values,
            validate_strings=True,
            native_enum=False,
            length=20,
            name="appointmentstatus",
        ),
        default=AppointmentStatus.PENDING,
        nullable=False,
    )

    staff: Mapped[Staff] = relationship(back_populates="appointments")
    service: Mapped[Service] = relationship(back_populates="appointments")
    payment: Mapped[Payment | None] = relationship(
        primaryjoin="and_(Payment.appointment_id == Appointment.id, Payment.deleted_at.is_(None))",
        viewonly=True,
        uselist=False,
    )
