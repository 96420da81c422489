"""Catalog ORM models."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, CheckConstraint, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from barbershop.core.database import Base
from barbershop.shared.models import SoftDeleteMixin, TimestampMixin

if TYPE_CHECKING:  # pragma: no cover
    from barbershop.modules.appointments.models import Appointment
    from barbershop.modules.assignments.models import StaffService


class Service(Base, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "services"
    __table_args__ = (
        CheckConstraint("price > 0", name="ck_services_price_positive"),
        CheckConstraint("duration_minutes > 0", name="ck_services_duration_positive"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    duration_minutes: Mapped[int] = mapped_column(nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    appointments: Mapped[list[Appointment]] = relationship(back_populates="service")
    staff_links: Mapped[list[StaffService]] = relationship(back_populates="service")
