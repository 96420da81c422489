"""Admin account model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from barbershop.core.database import Base
from barbershop.shared.models import SoftDeleteMixin, TimestampMixin


class Admin(Base, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "admins"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
