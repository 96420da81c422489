"""Auth module schemas."""

from pydantic import BaseModel

from barbershop.modules.admins.schemas import AdminPublic


class LoginResponse(BaseModel):
    success: bool = True
    admin: AdminPublic
