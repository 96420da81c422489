"""Product schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt


class ProductPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str = Field(serialization_alias="nombre")
    price: Decimal = Field(serialization_alias="precio")
    stock: int
    description: str | None = Field(default=None, serialization_alias="descripcion")
    image_url: str | None = Field(default=None, serialization_alias="imagenUrl")
    category: str | None = Field(default=None, serialization_alias="categoria")
    is_active: bool = Field(serialization_alias="activo")
    updated_at: datetime = Field(serialization_alias="fechaModificacion")


class StockAdjustment(BaseModel):
    # Non-integer deltas are rejected by InventoryService with a 409.
    quantity: StrictInt | StrictBool | StrictFloat = Field(validation_alias=AliasChoices("quantity", "cantidad"))
