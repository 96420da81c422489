import pytest

from barbershop.core.exceptions import ConflictError, NotFoundError
from barbershop.modules.products.service import InventoryService


@pytest.mark.asyncio
async def test_insufficient_stock_leaves_stock_unchanged(db_session, product):
    service = InventoryService(db_session)
    product_id = product.id

    with pytest.raises(ConflictError) as exc_info:
        await service.update_stock(product_id, -5)
    assert exc_info.value.detail == "Stock insuficiente"

    # The rollback expires every instance held by the session.
    reloaded = await service.get(product_id)
    assert reloaded.stock == 3


@pytest.mark.asyncio
async def test_sale_and_restock(db_session, product):
    service = InventoryService(db_session)

    sold = await service.update_stock(product.id, -3)
    assert sold.stock == 0

    restocked = await service.update_stock(product.id, 10)
    assert restocked.stock == 10


@pytest.mark.asyncio
@pytest.mark.parametrize("delta", [1.5, True, "2"])
async def test_non_integer_delta_is_rejected(db_session, product, delta):
    service = InventoryService(db_session)

    with pytest.raises(ConflictError) as exc_info:
        await service.update_stock(product.id, delta)
    assert exc_info.value.detail == "El ajuste de stock debe ser un número entero"


@pytest.mark.asyncio
async def test_integral_float_is_accepted(db_session, product):
    service = InventoryService(db_session)

    updated = await service.update_stock(product.id, 2.0)

    assert updated.stock == 5


@pytest.mark.asyncio
async def test_unknown_or_deleted_product(db_session, product):
    service = InventoryService(db_session)
    product_id = product.id

    with pytest.raises(NotFoundError) as exc_info:
        await service.update_stock(7, -1)
    assert exc_info.value.detail == "Producto con ID 7 no encontrado"

    await db_session.refresh(product)
    product.soft_delete()
    await db_session.commit()
    with pytest.raises(NotFoundError):
        await service.update_stock(product_id, 1)
