"""Staff ORM model."""

from __future__ import annotations

from datetime import time
from typing import TYPE_CHECKING

from sqlalchemy import String, Time
from sqlalchemy.orm import Mapped, mapped_column, relationship

from barbershop.core.database import Base
from barbershop.shared.models import SoftDeleteMixin, TimestampMixin

if TYPE_CHECKING:  # pragma: no cover
    from barbershop.modules.appointments.models import Appointment
    from barbershop.modules.assignments.models import StaffService


class Staff(Base, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "staff"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    photo_url: Mapped[str | None] = mapped_column(String(255))
    specialty: Mapped[str | None] = mapped_column(String(255))
    shift_start: Mapped[time | None] = mapped_column(Time)
    shift_end: Mapped[time | None] = mapped_column(Time)
    days_off: Mapped[str | None] = mapped_column(String(50))

    appointments: Mapped[list[Appointment]] = relationship(back_populates="staff")
    service_links: Mapped[list[StaffService]] = relationship(back_populates="staff")
