"""Appointments API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from barbershop.core.config import Settings
from barbershop.core.database import get_db
from barbershop.core.deps import get_app_settings, get_current_admin
from barbershop.modules.admins.models import Admin
from barbershop.modules.appointments.schemas import AppointmentCreate, AppointmentPublic, AppointmentUpdate
from barbershop.modules.appointments.service import AppointmentService
from barbershop.shared.schemas import DeletedResponse

router = APIRouter(prefix="/citas", tags=["appointments"])


def get_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> AppointmentService:
    return AppointmentService(db, settings)


@router.post("", response_model=AppointmentPublic, status_code=status.HTTP_201_CREATED)
async def create_appointment(
    payload: AppointmentCreate,
    service: AppointmentService = Depends(get_service),
) -> AppointmentPublic:
    return await service.create(payload)


@router.get("", response_model=list[AppointmentPublic])
async def list_appointments(service: AppointmentService = Depends(get_service)) -> list[AppointmentPublic]:
    return await service.list_all()


@router.get("/{appointment_id}", response_model=AppointmentPublic)
async def get_appointment(
    appointment_id: int,
    service: AppointmentService = Depends(get_service),
) -> AppointmentPublic:
    return await service.get(appointment_id)


@router.patch("/{appointment_id}", response_model=AppointmentPublic)
async def update_appointment(
    appointment_id: int,
    payload: AppointmentUpdate,
    service: AppointmentService = Depends(get_service),
) -> AppointmentPublic:
    return await service.update(appointment_id, payload)


@router.delete("/{appointment_id}", response_model=DeletedResponse)
async def delete_appointment(
    appointment_id: int,
    _: Admin = Depends(get_current_admin),
    service: AppointmentService = Depends(get_service),
) -> DeletedResponse:
    return await service.remove(appointment_id)
