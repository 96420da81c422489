"""Staff/service assignment routes (admin only)."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from barbershop.core.database import get_db
from barbershop.core.deps import get_current_admin
from barbershop.modules.assignments.schemas import AssignmentCreate, AssignmentPublic, AssignmentUpdate
from barbershop.modules.assignments.service import AssignmentService

router = APIRouter(
    prefix="/peluqueros-servicios",
    tags=["assignments"],
    dependencies=[Depends(get_current_admin)],
)


def get_service(db: AsyncSession = Depends(get_db)) -> AssignmentService:
    return AssignmentService(db)


@router.post("", response_model=AssignmentPublic, status_code=status.HTTP_201_CREATED)
async def assign(payload: AssignmentCreate, service: AssignmentService = Depends(get_service)) -> AssignmentPublic:
    return await service.assign(payload.staff_id, payload.service_id)


@router.get("", response_model=list[AssignmentPublic])
async def list_assignments(service: AssignmentService = Depends(get_service)) -> list[AssignmentPublic]:
    return await service.list_all()


@router.get("/peluquero/{staff_id}", response_model=list[AssignmentPublic])
async def list_services_for_staff(
    staff_id: int, service: AssignmentService = Depends(get_service)
) -> list[AssignmentPublic]:
    return await service.list_services_for_staff(staff_id)


@router.get("/servicio/{service_id}", response_model=list[AssignmentPublic])
async def list_staff_for_service(
    service_id: int, service: AssignmentService = Depends(get_service)
) -> list[AssignmentPublic]:
    return await service.list_staff_for_service(service_id)


@router.delete("/peluquero/{staff_id}")
async def remove_all_for_staff(staff_id: int, service: AssignmentService = Depends(get_service)) -> dict:
    removed = await service.remove_all_for_staff(staff_id)
    return {"deleted": removed}


@router.delete("/servicio/{service_id}")
async def remove_all_for_service(service_id: int, service: AssignmentService = Depends(get_service)) -> dict:
    removed = await service.remove_all_for_service(service_id)
    return {"deleted": removed}


@router.get("/{staff_id}/{service_id}", response_model=AssignmentPublic)
async def get_assignment(
    staff_id: int, service_id: int, service: AssignmentService = Depends(get_service)
) -> AssignmentPublic:
    return await service.get(staff_id, service_id)


@router.patch("/{staff_id}/{service_id}", response_model=AssignmentPublic)
async def reassign(
    staff_id: int,
    service_id: int,
    payload: AssignmentUpdate,
    service: AssignmentService = Depends(get_service),
) -> AssignmentPublic:
    return await service.reassign(staff_id, service_id, payload)


@router.delete("/{staff_id}/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_assignment(
    staff_id: int, service_id: int, service: AssignmentService = Depends(get_service)
) -> None:
    await service.remove(staff_id, service_id)
