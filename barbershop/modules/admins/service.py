"""Admin accounts."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from barbershop.core.exceptions import ConflictError
from barbershop.core.security import hash_password, verify_password
from barbershop.modules.admins.models import Admin
from barbershop.modules.admins.schemas import AdminCreate
from barbershop.shared.models import not_deleted

logger = logging.getLogger(__name__)


class AdminService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, payload: AdminCreate) -> Admin:
        email = str(payload.email).strip().lower()
        existing = await self.db.execute(select(Admin.id).where(func.lower(Admin.email) == email).limit(1))
        if existing.scalar_one_or_none() is not None:
            raise ConflictError("El correo electrónico ya está en uso")

        admin = Admin(name=payload.name, email=email, password_hash=hash_password(payload.password))
        self.db.add(admin)
        await self.db.commit()
        await self.db.refresh(admin)
        logger.info("Created admin %s (%s)", admin.id, admin.email)
        return admin

    async def authenticate(self, email: str, password: str) -> Admin | None:
        result = await self.db.execute(
            select(Admin).where(func.lower(Admin.email) == email.strip().lower(), not_deleted(Admin))
        )
        admin = result.scalar_one_or_none()
        if admin is None or not verify_password(password, admin.password_hash):
            logger.warning("Failed login for %s", email)
            return None
        return admin
