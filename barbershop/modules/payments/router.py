"""Payment ledger routes."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from barbershop.core.config import Settings
from barbershop.core.database import get_db
from barbershop.core.deps import get_app_settings, get_current_admin
from barbershop.modules.admins.models import Admin
from barbershop.modules.payments.schemas import (
    PaymentCreate,
    PaymentPage,
    PaymentPublic,
    PaymentQuery,
    PaymentTotal,
    PaymentUpdate,
)
from barbershop.modules.payments.service import PaymentService
from barbershop.shared.schemas import DeletedResponse

router = APIRouter(prefix="/pagos", tags=["payments"])


def get_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> PaymentService:
    return PaymentService(db, settings)


@router.post("", response_model=PaymentPublic, status_code=status.HTTP_201_CREATED)
async def create_payment(
    payload: PaymentCreate,
    service: PaymentService = Depends(get_service),
) -> PaymentPublic:
    return await service.create(payload)


@router.get("", response_model=PaymentPage)
async def list_payments(
    query: Annotated[PaymentQuery, Query()],
    _: Admin = Depends(get_current_admin),
    service: PaymentService = Depends(get_service),
) -> PaymentPage:
    return await service.list_paginated(query)


@router.get("/total", response_model=PaymentTotal)
async def total_by_date_range(
    start: datetime = Query(alias="inicio"),
    end: datetime = Query(alias="fin"),
    _: Admin = Depends(get_current_admin),
    service: PaymentService = Depends(get_service),
) -> PaymentTotal:
    total = await service.total_by_date_range(start, end)
    return PaymentTotal(start=start, end=end, total=total)


@router.get("/cita/{appointment_id}", response_model=list[PaymentPublic])
async def list_payments_for_appointment(
    appointment_id: int,
    _: Admin = Depends(get_current_admin),
    service: PaymentService = Depends(get_service),
) -> list[PaymentPublic]:
    return await service.list_by_appointment(appointment_id)


@router.get("/metodo/{payment_method}", response_model=list[PaymentPublic])
async def list_payments_by_method(
    payment_method: str,
    _: Admin = Depends(get_current_admin),
    service: PaymentService = Depends(get_service),
) -> list[PaymentPublic]:
    return await service.list_by_method(payment_method)


@router.get("/{payment_id}", response_model=PaymentPublic)
async def get_payment(
    payment_id: int,
    _: Admin = Depends(get_current_admin),
    service: PaymentService = Depends(get_service),
) -> PaymentPublic:
    return await service.get(payment_id)


@router.patch("/{payment_id}", response_model=PaymentPublic)
async def update_payment(
    payment_id: int,
    payload: PaymentUpdate,
    _: Admin = Depends(get_current_admin),
    service: PaymentService = Depends(get_service),
) -> PaymentPublic:
    return await service.update(payment_id, payload)


@router.delete("/{payment_id}", response_model=DeletedResponse)
async def delete_payment(
    payment_id: int,
    _: Admin = Depends(get_current_admin),
    service: PaymentService = Depends(get_service),
) -> DeletedResponse:
    return await service.remove(payment_id)
