"""Admin schemas."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field

from barbershop.shared.schemas import LowerTrimmedStr, TrimmedStr


class AdminPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str = Field(serialization_alias="nombre")
    email: str
    created_at: datetime = Field(serialization_alias="fechaCreacion")


class AdminCreate(BaseModel):
    name: TrimmedStr = Field(min_length=1, max_length=100, validation_alias=AliasChoices("nombre", "name"))
    email: EmailStr
    password: str = Field(min_length=8, max_length=72)


class AdminLogin(BaseModel):
    email: LowerTrimmedStr = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1, max_length=72)
