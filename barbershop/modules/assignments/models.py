"""Staff/service association model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from barbershop.core.database import Base
from barbershop.shared.models import SoftDeleteMixin, TimestampMixin

if TYPE_CHECKING:  # pragma: no cover
    from barbershop.modules.catalog.models import Service
    from barbershop.modules.staff.models import Staff


class StaffService(Base, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "staff_services"

    staff_id: Mapped[int] = mapped_column(ForeignKey("staff.id", ondelete="CASCADE"), primary_key=True)
    service_id: Mapped[int] = mapped_column(ForeignKey("services.id", ondelete="CASCADE"), primary_key=True)

    staff: Mapped[Staff] = relationship(back_populates="service_links")
    service: Mapped[Service] = relationship(back_populates="staff_links")
