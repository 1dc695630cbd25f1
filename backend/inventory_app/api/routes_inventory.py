from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from inventory_app.api.deps import get_price_formatter, get_store, storage_failure, to_out
from inventory_app.services.inventory_service import InventoryService
from inventory_app.services.inventory_store import (
    InventoryStore,
    StorageError,
    ValidationError,
)
from inventory_app.utils.formatting import PriceFormatter

router = APIRouter(prefix="/api/inventory", tags=["inventory"])


class QuantityIn(BaseModel):
    quantity: int


def _result(product, formatter):
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return to_out(product, formatter)


@router.post("/{product_id}/sale")
def sale(
    product_id: int,
    store: InventoryStore = Depends(get_store),
    formatter: PriceFormatter = Depends(get_price_formatter),
):
    """Sell one unit; stock never drops below zero."""
    try:
        p = InventoryService(store).record_sale(product_id)
    except StorageError as e:
        raise storage_failure(e)
    return _result(p, formatter)


@router.post("/{product_id}/receive")
def receive(
    product_id: int,
    store: InventoryStore = Depends(get_store),
    formatter: PriceFormatter = Depends(get_price_formatter),
):
    try:
        p = InventoryService(store).receive(product_id)
    except StorageError as e:
        raise storage_failure(e)
    return _result(p, formatter)


@router.put("/{product_id}/quantity")
def set_quantity(
    product_id: int,
    payload: QuantityIn,
    store: InventoryStore = Depends(get_store),
    formatter: PriceFormatter = Depends(get_price_formatter),
):
    """
    payload: { "quantity": 7 }
    """
    try:
        p = InventoryService(store).set_quantity(product_id, payload.quantity)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except StorageError as e:
        raise storage_failure(e)
    return _result(p, formatter)
