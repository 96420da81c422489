"""Inventory adjustments."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from barbershop.core.exceptions import ConflictError, NotFoundError
from barbershop.modules.products.models import Product
from barbershop.shared.models import not_deleted

logger = logging.getLogger(__name__)


class InventoryService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, product_id: int) -> Product:
        result = await self.db.execute(select(Product).where(Product.id == product_id, not_deleted(Product)))
        product = result.scalar_one_or_none()
        if product is None:
            raise NotFoundError(f"Producto con ID {product_id} no encontrado")
        return product

    async def update_stock(self, product_id: int, delta: int | float | bool) -> Product:
        """Apply a signed stock delta under an exclusive row lock.

        The row stays locked from the read until commit, so two concurrent
        adjustments are serialized instead of both working from the same stock.
        """
        delta = self._as_integer(delta)
        try:
            result = await self.db.execute(
                select(Product)
                .where(Product.id == product_id, not_deleted(Product))
                .with_for_update()
                .execution_options(populate_existing=True)
            )
            product = result.scalar_one_or_none()
            if product is None:
                raise NotFoundError(f"Producto con ID {product_id} no encontrado")

            new_stock = product.stock + delta
            if new_stock < 0:
                logger.warning(
                    "Rejected stock change %+d for product %s (stock %s)", delta, product_id, product.stock
                )
                raise ConflictError("Stock insuficiente")

            product.stock = new_stock
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        await self.db.refresh(product)
        logger.info("Product %s stock adjusted by %+d to %s", product_id, delta, product.stock)
        return product

    @staticmethod
    def _as_integer(delta) -> int:
        if isinstance(delta, bool):
            raise ConflictError("El ajuste de stock debe ser un número entero")
        if isinstance(delta, float) and delta.is_integer():
            return int(delta)
        if not isinstance(delta, int):
            raise ConflictError("El ajuste de stock debe ser un número entero")
        return delta
