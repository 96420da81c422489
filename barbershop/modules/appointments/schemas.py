"""Appointments schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field

from barbershop.modules.catalog.schemas import ServiceSummary
from barbershop.modules.staff.schemas import StaffSummary
from barbershop.shared.enums import AppointmentStatus, PaymentStatus
from barbershop.shared.schemas import OptionalTrimmedStr, PositiveId, TrimmedStr


class AppointmentPaymentSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    amount: Decimal = Field(serialization_alias="monto")
    status: PaymentStatus = Field(serialization_alias="estado")


class AppointmentPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    scheduled_at: datetime = Field(serialization_alias="fechaHora")
    staff_id: int = Field(serialization_alias="peluqueroId")
    service_id: int = Field(serialization_alias="servicioId")
    customer_name: str = Field(serialization_alias="clienteNombre")
    customer_email: str = Field(serialization_alias="clienteEmail")
    customer_phone: str | None = Field(default=None, serialization_alias="clienteTelefono")
    notes: str | None = Field(default=None, serialization_alias="notas")
    status: AppointmentStatus = Field(serialization_alias="estado")
    staff: StaffSummary | None = Field(default=None, serialization_alias="peluquero")
    service: ServiceSummary | None = Field(default=None, serialization_alias="servicio")
    payment: AppointmentPaymentSummary | None = Field(default=None, serialization_alias="pago")
    created_at: datetime = Field(serialization_alias="fechaCreacion")
    updated_at: datetime = Field(serialization_alias="fechaModificacion")


class AppointmentCreate(BaseModel):
    scheduled_at: datetime = Field(validation_alias=AliasChoices("fechaHora", "scheduled_at"))
    staff_id: PositiveId = Field(validation_alias=AliasChoices("peluqueroId", "staff_id"))
    service_id: PositiveId = Field(validation_alias=AliasChoices("servicioId", "service_id"))
    customer_name: TrimmedStr = Field(
        min_length=1, max_length=100, validation_alias=AliasChoices("clienteNombre", "customer_name")
    )
    customer_email: EmailStr = Field(validation_alias=AliasChoices("clienteEmail", "customer_email"))
    customer_phone: OptionalTrimmedStr = Field(
        default=None, max_length=20, validation_alias=AliasChoices("clienteTelefono", "customer_phone")
    )
    notes: OptionalTrimmedStr = Field(default=None, validation_alias=AliasChoices("notas", "notes"))


class AppointmentUpdate(BaseModel):
    scheduled_at: datetime | None = Field(default=None, validation_alias=AliasChoices("fechaHora", "scheduled_at"))
    staff_id: PositiveId | None = Field(default=None, validation_alias=AliasChoices("peluqueroId", "staff_id"))
    service_id: PositiveId | None = Field(default=None, validation_alias=AliasChoices("servicioId", "service_id"))
    customer_name: TrimmedStr | None = Field(
        default=None, min_length=1, max_length=100, validation_alias=AliasChoices("clienteNombre", "customer_name")
    )
    customer_email: EmailStr | None = Field(
        default=None, validation_alias=AliasChoices("clienteEmail", "customer_email")
    )
    customer_phone: OptionalTrimmedStr = Field(
        default=None, max_length=20, validation_alias=AliasChoices("clienteTelefono", "customer_phone")
    )
    notes: OptionalTrimmedStr = Field(default=None, validation_alias=AliasChoices("notas", "notes"))
    status: AppointmentStatus | None = Field(default=None, validation_alias=AliasChoices("estado", "status"))
