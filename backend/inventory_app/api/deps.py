import logging
from functools import lru_cache

from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from inventory_app.config import settings
from inventory_app.db import get_db
from inventory_app.schemas.product_schema import ProductOut, ProductRecord
from inventory_app.services.inventory_store import InventoryStore, StorageError
from inventory_app.services.order_service import OrderService
from inventory_app.utils.formatting import PriceFormatter

log = logging.getLogger(__name__)


def get_store(db: Session = Depends(get_db)) -> InventoryStore:
    return InventoryStore(db)


@lru_cache
def get_price_formatter() -> PriceFormatter:
    return PriceFormatter(settings.PRICE_TEMPLATE)


@lru_cache
def get_order_service() -> OrderService:
    return OrderService(settings.SUPPLIER_EMAIL)


def storage_failure(e: StorageError) -> HTTPException:
    log.error("storage error: %s", e, exc_info=e)
    return HTTPException(status_code=500, detail="Storage failure")


def to_out(p: ProductRecord, formatter: PriceFormatter) -> ProductOut:
    return ProductOut(
        id=p.id,
        name=p.name,
        quantity=p.quantity,
        price=p.price,
        price_display=formatter.format(p.price),
        has_picture=p.picture is not None,
    )
