"""Service catalog routes."""

from decimal import Decimal

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from barbershop.core.database import get_db
from barbershop.core.deps import get_current_admin
from barbershop.modules.admins.models import Admin
from barbershop.modules.catalog.schemas import ServiceCreate, ServicePublic, ServiceUpdate
from barbershop.modules.catalog.service import CatalogService

router = APIRouter(prefix="/servicios", tags=["catalog"])


def get_service(db: AsyncSession = Depends(get_db)) -> CatalogService:
    return CatalogService(db)


@router.get("", response_model=list[ServicePublic])
async def list_services(service: CatalogService = Depends(get_service)) -> list[ServicePublic]:
    return await service.list_all()


@router.get("/precio", response_model=list[ServicePublic])
async def list_services_by_price(
    min_price: Decimal = Query(ge=0, alias="min"),
    max_price: Decimal = Query(ge=0, alias="max"),
    service: CatalogService = Depends(get_service),
) -> list[ServicePublic]:
    return await service.list_by_price_range(min_price, max_price)


@router.get("/duracion", response_model=list[ServicePublic])
async def list_services_by_duration(
    max_minutes: int = Query(gt=0, alias="max"),
    service: CatalogService = Depends(get_service),
) -> list[ServicePublic]:
    return await service.list_by_max_duration(max_minutes)


@router.get("/{service_id}", response_model=ServicePublic)
async def get_service_by_id(service_id: int, service: CatalogService = Depends(get_service)) -> ServicePublic:
    return await service.get_by_id(service_id)


@router.post("", response_model=ServicePublic, status_code=status.HTTP_201_CREATED)
async def create_service(
    payload: ServiceCreate,
    _: Admin = Depends(get_current_admin),
    service: CatalogService = Depends(get_service),
) -> ServicePublic:
    return await service.create(payload)


@router.patch("/{service_id}", response_model=ServicePublic)
async def update_service(
    service_id: int,
    payload: ServiceUpdate,
    _: Admin = Depends(get_current_admin),
    service: CatalogService = Depends(get_service),
) -> ServicePublic:
    return await service.update(service_id, payload)


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service(
    service_id: int,
    _: Admin = Depends(get_current_admin),
    service: CatalogService = Depends(get_service),
) -> None:
    await service.remove(service_id)
