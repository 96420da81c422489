"""FastAPI dependencies for settings and authentication."""

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from barbershop.core.config import Settings
from barbershop.core.database import get_db
from barbershop.core.security import TokenDecodeError, decode_access_token
from barbershop.modules.admins.models import Admin
from barbershop.shared.models import not_deleted


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_current_admin(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    db: AsyncSession = Depends(get_db),
) -> Admin:
    token = request.cookies.get(settings.access_cookie_name) or request.cookies.get("access_token")
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing authentication")
    try:
        payload = decode_access_token(token, settings)
    except TokenDecodeError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token") from exc

    subject = payload.get("sub")
    if not subject or not str(subject).isdigit():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token payload")

    result = await db.execute(select(Admin).where(Admin.id == int(subject), not_deleted(Admin)))
    admin = result.scalar_one_or_none()
    if admin is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Usuario no encontrado")
    return admin
