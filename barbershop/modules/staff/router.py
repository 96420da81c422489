"""Staff directory routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from barbershop.core.database import get_db
from barbershop.core.deps import get_current_admin
from barbershop.modules.admins.models import Admin
from barbershop.modules.staff.schemas import StaffCreate, StaffPublic, StaffUpdate
from barbershop.modules.staff.service import StaffService

router = APIRouter(prefix="/peluqueros", tags=["staff"])


def get_service(db: AsyncSession = Depends(get_db)) -> StaffService:
    return StaffService(db)


@router.get("", response_model=list[StaffPublic])
async def list_staff(service: StaffService = Depends(get_service)) -> list[StaffPublic]:
    return await service.list_all()


@router.get("/{staff_id}", response_model=StaffPublic)
async def get_staff(staff_id: int, service: StaffService = Depends(get_service)) -> StaffPublic:
    return await service.get_by_id(staff_id)


@router.post("", response_model=StaffPublic, status_code=status.HTTP_201_CREATED)
async def create_staff(
    payload: StaffCreate,
    _: Admin = Depends(get_current_admin),
    service: StaffService = Depends(get_service),
) -> StaffPublic:
    return await service.create(payload)


@router.patch("/{staff_id}", response_model=StaffPublic)
async def update_staff(
    staff_id: int,
    payload: StaffUpdate,
    _: Admin = Depends(get_current_admin),
    service: StaffService = Depends(get_service),
) -> StaffPublic:
    return await service.update(staff_id, payload)


@router.delete("/{staff_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_staff(
    staff_id: int,
    _: Admin = Depends(get_current_admin),
    service: StaffService = Depends(get_service),
) -> None:
    await service.remove(staff_id)
