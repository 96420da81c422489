"""Authentication routes."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from barbershop.core.config import Settings
from barbershop.core.database import get_db
from barbershop.core.deps import get_app_settings, get_current_admin
from barbershop.core.security import create_access_token
from barbershop.modules.admins.models import Admin
from barbershop.modules.admins.schemas import AdminLogin, AdminPublic
from barbershop.modules.admins.service import AdminService
from barbershop.modules.auth.schemas import LoginResponse

router = APIRouter(prefix="/auth", tags=["auth"])


def _set_access_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        key=settings.access_cookie_name,
        value=token,
        max_age=settings.jwt_expires_in_minutes * 60,
        httponly=True,
        secure=settings.cookie_secure or settings.cookie_prefix_host,
        samesite=settings.cookie_samesite,
        path="/",
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    payload: AdminLogin,
    response: Response,
    settings: Settings = Depends(get_app_settings),
    db: AsyncSession = Depends(get_db),
) -> LoginResponse:
    """Validate admin credentials and set the access token cookie."""
    admin = await AdminService(db).authenticate(payload.email, payload.password)
    if admin is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Email o contraseña incorrectos")

    token = create_access_token(str(admin.id), settings)
    _set_access_cookie(response, token, settings)
    return LoginResponse(admin=AdminPublic.model_validate(admin))


@router.post("/logout")
async def logout(response: Response, settings: Settings = Depends(get_app_settings)) -> dict[str, bool]:
    response.delete_cookie(
        key=settings.access_cookie_name,
        path="/",
        httponly=True,
        secure=settings.cookie_secure or settings.cookie_prefix_host,
        samesite=settings.cookie_samesite,
    )
    return {"success": True}


@router.get("/me", response_model=AdminPublic)
async def me(admin: Admin = Depends(get_current_admin)) -> AdminPublic:
    return admin
