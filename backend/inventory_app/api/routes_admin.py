import logging

from fastapi import APIRouter, Depends

from inventory_app.api.deps import get_store, storage_failure
from inventory_app.services.inventory_store import InventoryStore, StorageError

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.delete("/products", summary="Delete every product")
def delete_all_products(store: InventoryStore = Depends(get_store)):
    try:
        rows = store.delete_all()
    except StorageError as e:
        raise storage_failure(e)
    log.info("%s rows deleted from product database", rows)
    return {"deleted": rows}
