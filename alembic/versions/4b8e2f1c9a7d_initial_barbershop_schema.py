"""Initial schema for the barbershop booking API.

Revision ID: 4b8e2f1c9a7d
Revises:
Create Date: 2025-10-20 10:12:31.902114

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "4b8e2f1c9a7d"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

appointment_status = sa.Enum(
    "Pendiente", "Pagada", "Completada", "Cancelada", name="appointmentstatus", native_enum=False, length=20
)
payment_status = sa.Enum("Pendiente", "Completado", "Fallido", name="paymentstatus", native_enum=False, length=20)

ACTIVE_SLOT = sa.text("deleted_at IS NULL AND status <> 'Cancelada'")
NOT_DELETED = sa.text("deleted_at IS NULL")


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "admins",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        *_audit_columns(),
    )
    op.create_index("ix_admins_email", "admins", ["email"], unique=True)

    op.create_table(
        "staff",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("photo_url", sa.String(length=255)),
        sa.Column("specialty", sa.String(length=255)),
        sa.Column("shift_start", sa.Time()),
        sa.Column("shift_end", sa.Time()),
        sa.Column("days_off", sa.String(length=50)),
        *_audit_columns(),
    )

    op.create_table(
        "services",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("duration_minutes", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_audit_columns(),
        sa.CheckConstraint("price > 0", name="ck_services_price_positive"),
        sa.CheckConstraint("duration_minutes > 0", name="ck_services_duration_positive"),
    )

    op.create_table(
        "staff_services",
        sa.Column("staff_id", sa.Integer(), sa.ForeignKey("staff.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("service_id", sa.Integer(), sa.ForeignKey("services.id", ondelete="CASCADE"), primary_key=True),
        *_audit_columns(),
    )

    op.create_table(
        "appointments",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("scheduled_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("staff_id", sa.Integer(), sa.ForeignKey("staff.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("service_id", sa.Integer(), sa.ForeignKey("services.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("customer_name", sa.String(length=100), nullable=False),
        sa.Column("customer_email", sa.String(length=255), nullable=False),
        sa.Column("customer_phone", sa.String(length=20)),
        sa.Column("notes", sa.Text()),
        sa.Column("status", appointment_status, nullable=False, server_default="Pendiente"),
        *_audit_columns(),
    )
    op.create_index(
        "uq_appointments_staff_scheduled_at",
        "appointments",
        ["staff_id", "scheduled_at"],
        unique=True,
        postgresql_where=ACTIVE_SLOT,
        sqlite_where=ACTIVE_SLOT,
    )
    op.create_index("ix_appointments_scheduled_at", "appointments", ["scheduled_at"])

    op.create_table(
        "payments",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "appointment_id",
            sa.Integer(),
            sa.ForeignKey("appointments.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("payment_method", sa.String(length=50)),
        sa.Column("status", payment_status, nullable=False, server_default="Pendiente"),
        sa.Column("transaction_id", sa.String(length=255), unique=True),
        sa.Column("paid_at", sa.DateTime(timezone=True)),
        *_audit_columns(),
        sa.CheckConstraint("amount > 0", name="ck_payments_amount_positive"),
    )
    op.create_index(
        "uq_payments_appointment_id",
        "payments",
        ["appointment_id"],
        unique=True,
        postgresql_where=NOT_DELETED,
        sqlite_where=NOT_DELETED,
    )
    op.create_index("ix_payments_created_at", "payments", ["created_at"])

    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("stock", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("description", sa.Text()),
        sa.Column("image_url", sa.String(length=255)),
        sa.Column("category", sa.String(length=50)),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_audit_columns(),
        sa.CheckConstraint("stock >= 0", name="ck_products_stock_non_negative"),
        sa.CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
    )


def downgrade() -> None:
    op.drop_table("products")
    op.drop_index("ix_payments_created_at", table_name="payments")
    op.drop_index("uq_payments_appointment_id", table_name="payments")
    op.drop_table("payments")
    op.drop_index("ix_appointments_scheduled_at", table_name="appointments")
    op.drop_index("uq_appointments_staff_scheduled_at", table_name="appointments")
    op.drop_table("appointments")
    op.drop_table("staff_services")
    op.drop_table("services")
    op.drop_table("staff")
    op.drop_index("ix_admins_email", table_name="admins")
    op.drop_table("admins")
