from fastapi import APIRouter, Depends, HTTPException, Response, status

from inventory_app.api.deps import get_price_formatter, get_store, storage_failure, to_out
from inventory_app.schemas.product_schema import ProductIn, ProductPatch
from inventory_app.services.inventory_store import (
    InventoryStore,
    StorageError,
    ValidationError,
)
from inventory_app.utils.formatting import PriceFormatter

router = APIRouter(tags=["catalogue"])


@router.get("", summary="List products")
def list_products(
    store: InventoryStore = Depends(get_store),
    formatter: PriceFormatter = Depends(get_price_formatter),
):
    try:
        items = [to_out(p, formatter) for p in store.list()]
    except StorageError as e:
        raise storage_failure(e)
    return {"items": items, "total": len(items)}


@router.post("", summary="Create product", status_code=status.HTTP_201_CREATED)
def create_product(payload: ProductIn, store: InventoryStore = Depends(get_store)):
    try:
        product_id = store.create(
            payload.name, payload.quantity, payload.price, payload.picture
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except StorageError as e:
        raise storage_failure(e)
    return {"id": product_id}


@router.get("/{product_id}", summary="Get product by id")
def get_product(
    product_id: int,
    store: InventoryStore = Depends(get_store),
    formatter: PriceFormatter = Depends(get_price_formatter),
):
    try:
        p = store.get(product_id)
    except StorageError as e:
        raise storage_failure(e)
    if p is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return to_out(p, formatter)


@router.patch("/{product_id}", summary="Update some fields of a product")
def update_product(
    product_id: int,
    payload: ProductPatch,
    store: InventoryStore = Depends(get_store),
):
    changes = payload.model_dump(exclude_unset=True)
    try:
        rows = store.update(product_id, changes)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except StorageError as e:
        raise storage_failure(e)
    if rows == 0 and changes:
        raise HTTPException(status_code=404, detail="Product not found")
    return {"updated": rows}


@router.delete("/{product_id}", summary="Delete product")
def delete_product(product_id: int, store: InventoryStore = Depends(get_store)):
    try:
        rows = store.delete(product_id)
    except StorageError as e:
        raise storage_failure(e)
    if rows == 0:
        raise HTTPException(status_code=404, detail="Product not found")
    return {"deleted": rows}


@router.get("/{product_id}/picture", summary="Product picture (JPEG)")
def get_picture(product_id: int, store: InventoryStore = Depends(get_store)):
    try:
        p = store.get(product_id)
    except StorageError as e:
        raise storage_failure(e)
    if p is None or p.picture is None:
        raise HTTPException(status_code=404, detail="Picture not found")
    return Response(content=p.picture, media_type="image/jpeg")
