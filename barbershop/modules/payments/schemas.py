"""Payment ledger schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from barbershop.modules.catalog.schemas import ServiceSummary
from barbershop.modules.staff.schemas import StaffSummary
from barbershop.shared.enums import AppointmentStatus, PaymentStatus, ReportPeriod
from barbershop.shared.schemas import OptionalTrimmedStr, PaginationMeta, PositiveId


class PaymentAppointmentSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    scheduled_at: datetime = Field(serialization_alias="fechaHora")
    customer_name: str = Field(serialization_alias="clienteNombre")
    customer_email: str = Field(serialization_alias="clienteEmail")
    status: AppointmentStatus = Field(serialization_alias="estado")
    staff: StaffSummary | None = Field(default=None, serialization_alias="peluquero")
    service: ServiceSummary | None = Field(default=None, serialization_alias="servicio")


class PaymentPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    appointment_id: int = Field(serialization_alias="citaId")
    amount: Decimal = Field(serialization_alias="monto")
    payment_method: str | None = Field(default=None, serialization_alias="metodoPago")
    status: PaymentStatus = Field(serialization_alias="estado")
    transaction_id: str | None = Field(default=None, serialization_alias="transaccionId")
    paid_at: datetime | None = Field(default=None, serialization_alias="fechaPago")
    appointment: PaymentAppointmentSummary | None = Field(default=None, serialization_alias="cita")
    created_at: datetime = Field(serialization_alias="fechaCreacion")
    updated_at: datetime = Field(serialization_alias="fechaModificacion")


class PaymentCreate(BaseModel):
    appointment_id: PositiveId = Field(validation_alias=AliasChoices("citaId", "appointment_id"))
    amount: Decimal = Field(gt=0, max_digits=10, decimal_places=2, validation_alias=AliasChoices("monto", "amount"))
    payment_method: OptionalTrimmedStr = Field(
        default=None, max_length=50, validation_alias=AliasChoices("metodoPago", "payment_method")
    )
    transaction_id: OptionalTrimmedStr = Field(
        default=None, max_length=255, validation_alias=AliasChoices("transaccionId", "transaction_id")
    )
    paid_at: datetime | None = Field(default=None, validation_alias=AliasChoices("fechaPago", "paid_at"))
    status: PaymentStatus = Field(default=PaymentStatus.PENDING, validation_alias=AliasChoices("estado", "status"))


class PaymentUpdate(BaseModel):
    appointment_id: PositiveId | None = Field(default=None, validation_alias=AliasChoices("citaId", "appointment_id"))
    amount: Decimal | None = Field(
        default=None, gt=0, max_digits=10, decimal_places=2, validation_alias=AliasChoices("monto", "amount")
    )
    payment_method: OptionalTrimmedStr = Field(
        default=None, max_length=50, validation_alias=AliasChoices("metodoPago", "payment_method")
    )
    transaction_id: OptionalTrimmedStr = Field(
        default=None, max_length=255, validation_alias=AliasChoices("transaccionId", "transaction_id")
    )
    paid_at: datetime | None = Field(default=None, validation_alias=AliasChoices("fechaPago", "paid_at"))
    status: PaymentStatus | None = Field(default=None, validation_alias=AliasChoices("estado", "status"))


class PaymentQuery(BaseModel):
    """Query string of the paginated ledger listing."""

    model_config = ConfigDict(populate_by_name=True)

    page: int = Field(1, ge=1)
    limit: int = Field(20, ge=1, le=100)
    search: OptionalTrimmedStr = None
    status: PaymentStatus | None = Field(None, alias="estado")
    period: ReportPeriod = Field(ReportPeriod.ALL, alias="periodo")

    @field_validator("period", mode="before")
    @classmethod
    def resolve_period(cls, value):
        if isinstance(value, str):
            return ReportPeriod(value.strip().lower())
        return value

    @field_validator("status", mode="before")
    @classmethod
    def empty_status(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class PaymentStats(BaseModel):
    total_amount: Decimal = Field(serialization_alias="totalMonto")
    completed: int = Field(serialization_alias="completados")
    pending: int = Field(serialization_alias="pendientes")
    failed: int = Field(serialization_alias="fallidos")
    average_ticket: Decimal = Field(serialization_alias="ticketPromedio")


class PaymentPage(BaseModel):
    data: list[PaymentPublic]
    meta: PaginationMeta
    stats: PaymentStats


class PaymentTotal(BaseModel):
    start: datetime = Field(serialization_alias="inicio")
    end: datetime = Field(serialization_alias="fin")
    total: Decimal
