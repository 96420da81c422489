"""Product inventory routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from barbershop.core.database import get_db
from barbershop.core.deps import get_current_admin
from barbershop.modules.products.schemas import ProductPublic, StockAdjustment
from barbershop.modules.products.service import InventoryService

router = APIRouter(prefix="/productos", tags=["products"], dependencies=[Depends(get_current_admin)])


def get_service(db: AsyncSession = Depends(get_db)) -> InventoryService:
    return InventoryService(db)


@router.get("/{product_id}", response_model=ProductPublic)
async def get_product(product_id: int, service: InventoryService = Depends(get_service)) -> ProductPublic:
    return await service.get(product_id)


@router.patch("/{product_id}/stock", response_model=ProductPublic)
async def update_stock(
    product_id: int,
    payload: StockAdjustment,
    service: InventoryService = Depends(get_service),
) -> ProductPublic:
    return await service.update_stock(product_id, payload.quantity)
