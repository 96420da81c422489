"""Staff schemas."""

from datetime import datetime, time

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from barbershop.shared.schemas import OptionalTrimmedStr, TrimmedStr


class StaffSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str = Field(serialization_alias="nombre")


class StaffPublic(StaffSummary):
    photo_url: str | None = Field(default=None, serialization_alias="fotoUrl")
    specialty: str | None = Field(default=None, serialization_alias="especialidad")
    shift_start: time | None = Field(default=None, serialization_alias="horarioInicio")
    shift_end: time | None = Field(default=None, serialization_alias="horarioFin")
    days_off: str | None = Field(default=None, serialization_alias="diasLibres")
    created_at: datetime = Field(serialization_alias="fechaCreacion")
    updated_at: datetime = Field(serialization_alias="fechaModificacion")


class _StaffFields(BaseModel):
    photo_url: OptionalTrimmedStr = Field(
        default=None, max_length=255, validation_alias=AliasChoices("fotoUrl", "photo_url")
    )
    specialty: OptionalTrimmedStr = Field(
        default=None, max_length=200, validation_alias=AliasChoices("especialidad", "specialty")
    )
    shift_start: time | None = Field(default=None, validation_alias=AliasChoices("horarioInicio", "shift_start"))
    shift_end: time | None = Field(default=None, validation_alias=AliasChoices("horarioFin", "shift_end"))
    days_off: OptionalTrimmedStr = Field(
        default=None, max_length=50, validation_alias=AliasChoices("diasLibres", "days_off")
    )

    @model_validator(mode="after")
    def validate_shift(self) -> "_StaffFields":
        if self.shift_start and self.shift_end and self.shift_start >= self.shift_end:
            raise ValueError("horarioInicio debe ser menor que horarioFin")
        return self


class StaffCreate(_StaffFields):
    name: TrimmedStr = Field(min_length=1, max_length=100, validation_alias=AliasChoices("nombre", "name"))


class StaffUpdate(_StaffFields):
    name: TrimmedStr | None = Field(
        default=None, min_length=1, max_length=100, validation_alias=AliasChoices("nombre", "name")
    )
