"""Shared enumerations used across modules."""

from __future__ import annotations

from enum import StrEnum
from typing import Iterable, TypeVar

EnumType = TypeVar("EnumType", bound=StrEnum)


def enum_values(enum_cls: Iterable[EnumType]) -> list[str]:
    """Return the .value for each enum member (used by SQLAlchemy)."""
    return [member.value for member in enum_cls]


class AppointmentStatus(StrEnum):
    PENDING = "Pendiente"
    PAID = "Pagada"
    COMPLETED = "Completada"
    CANCELLED = "Cancelada"


class PaymentStatus(StrEnum):
    PENDING = "Pendiente"
    COMPLETED = "Completado"
    FAILED = "Fallido"


class ReportPeriod(StrEnum):
    TODAY = "hoy"
    WEEK = "semana"
    MONTH = "mes"
    ALL = "todo"

    @classmethod
    def _missing_(cls, value: object) -> ReportPeriod | None:
        aliases = {"today": cls.TODAY, "week": cls.WEEK, "month": cls.MONTH, "all": cls.ALL}
        if isinstance(value, str):
            return aliases.get(value.strip().lower())
        return None
