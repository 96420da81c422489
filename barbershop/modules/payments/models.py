"""Payment ORM model."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, DateTime, Enum, ForeignKey, Index, Numeric, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from barbershop.core.database import Base
from barbershop.shared.enums import PaymentStatus, enum_values
from barbershop.shared.models import SoftDeleteMixin, TimestampMixin

if TYPE_CHECKING:  # pragma: no cover
    from barbershop.modules.appointments.models import Appointment

NOT_DELETED_PREDICATE = text("deleted_at IS NULL")


class Payment(Base, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "payments"
    __table_args__ = (
        Index(
            "uq_payments_appointment_id",
            "appointment_id",
            unique=True,
            postgresql_where=NOT_DELETED_PREDICATE,
            sqlite_where=NOT_DELETED_PREDICATE,
        ),
        Index("ix_payments_created_at", "created_at"),
        CheckConstraint("amount > 0", name="ck_payments_amount_positive"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    appointment_id: Mapped[int] = mapped_column(ForeignKey("appointments.id", ondelete="RESTRICT"), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    payment_method: Mapped[str | None] = mapped_column(String(50))
    status: Mapped[PaymentStatus] = mapped_column(
        Enum(
            PaymentStatus,
            values_callable=enum_values,
            validate_strings=True,
            native_enum=False,
            length=20,
            name="paymentstatus",
        ),
        default=PaymentStatus.PENDING,
        nullable=False,
    )
    transaction_id: Mapped[str | None] = mapped_column(String(255), unique=True)
    paid_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    appointment: Mapped[Appointment] = relationship()
