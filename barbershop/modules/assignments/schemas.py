"""Staff/service assignment schemas."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from barbershop.modules.catalog.schemas import ServiceSummary
from barbershop.modules.staff.schemas import StaffSummary
from barbershop.shared.schemas import PositiveId


class AssignmentCreate(BaseModel):
    staff_id: PositiveId = Field(validation_alias=AliasChoices("peluqueroId", "staff_id"))
    service_id: PositiveId = Field(validation_alias=AliasChoices("servicioId", "service_id"))


class AssignmentUpdate(BaseModel):
    staff_id: PositiveId | None = Field(default=None, validation_alias=AliasChoices("peluqueroId", "staff_id"))
    service_id: PositiveId | None = Field(default=None, validation_alias=AliasChoices("servicioId", "service_id"))

    @model_validator(mode="after")
    def validate_target(self) -> "AssignmentUpdate":
        if self.staff_id is None and self.service_id is None:
            raise ValueError("Debe indicar peluqueroId o servicioId")
        return self


class AssignmentPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    staff_id: int = Field(serialization_alias="peluqueroId")
    service_id: int = Field(serialization_alias="servicioId")
    staff: StaffSummary | None = Field(default=None, serialization_alias="peluquero")
    service: ServiceSummary | None = Field(default=None, serialization_alias="servicio")
    created_at: datetime = Field(serialization_alias="fechaCreacion")
