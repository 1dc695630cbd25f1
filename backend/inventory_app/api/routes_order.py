from fastapi import APIRouter, Depends, HTTPException

from inventory_app.api.deps import get_order_service, get_store, storage_failure
from inventory_app.services.inventory_store import InventoryStore, StorageError
from inventory_app.services.order_service import OrderService

router = APIRouter(tags=["orders"])


@router.get("/{product_id}", summary="Supplier order email for a product")
def order_product(
    product_id: int,
    store: InventoryStore = Depends(get_store),
    orders: OrderService = Depends(get_order_service),
):
    try:
        p = store.get(product_id)
    except StorageError as e:
        raise storage_failure(e)
    if p is None:
        raise HTTPException(status_code=404, detail="Product not found")
    order = orders.compose(p)
    return {"to": order.to, "subject": order.subject, "mailto": order.mailto}
