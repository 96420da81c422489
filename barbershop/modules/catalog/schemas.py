"""Catalog schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from barbershop.shared.schemas import OptionalTrimmedStr, TrimmedStr


class ServiceSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str = Field(serialization_alias="nombre")
    price: Decimal = Field(serialization_alias="precio")
    duration_minutes: int = Field(serialization_alias="duracion")


class ServicePublic(ServiceSummary):
    description: str | None = Field(default=None, serialization_alias="descripcion")
    is_active: bool = Field(serialization_alias="activo")
    created_at: datetime = Field(serialization_alias="fechaCreacion")
    updated_at: datetime = Field(serialization_alias="fechaModificacion")


class ServiceCreate(BaseModel):
    name: TrimmedStr = Field(min_length=1, max_length=100, validation_alias=AliasChoices("nombre", "name"))
    price: Decimal = Field(gt=0, max_digits=10, decimal_places=2, validation_alias=AliasChoices("precio", "price"))
    duration_minutes: int = Field(gt=0, validation_alias=AliasChoices("duracion", "duration_minutes"))
    description: OptionalTrimmedStr = Field(default=None, validation_alias=AliasChoices("descripcion", "description"))
    is_active: bool = Field(default=True, validation_alias=AliasChoices("activo", "is_active"))


class ServiceUpdate(BaseModel):
    name: TrimmedStr | None = Field(
        default=None, min_length=1, max_length=100, validation_alias=AliasChoices("nombre", "name")
    )
    price: Decimal | None = Field(
        default=None, gt=0, max_digits=10, decimal_places=2, validation_alias=AliasChoices("precio", "price")
    )
    duration_minutes: int | None = Field(
        default=None, gt=0, validation_alias=AliasChoices("duracion", "duration_minutes")
    )
    description: OptionalTrimmedStr = Field(default=None, validation_alias=AliasChoices("descripcion", "description"))
    is_active: bool | None = Field(default=None, validation_alias=AliasChoices("activo", "is_active"))
