import logging
from typing import Optional

from inventory_app.schemas.product_schema import ProductRecord
from inventory_app.services.inventory_store import InventoryStore

log = logging.getLogger(__name__)


def decrement_quantity(quantity: int) -> int:
    """One unit out; never goes below zero."""
    return quantity - 1 if quantity > 0 else 0


def increment_quantity(quantity: int) -> int:
    return quantity + 1


class InventoryService:
    """
    Stock adjustments on top of the store. The new quantity is computed here
    and persisted with a quantity-only update, so name, price and picture
    are never touched.
    """

    def __init__(self, store: InventoryStore):
        self.store = store

    def _persist_quantity(self, product: ProductRecord, quantity: int) -> Optional[ProductRecord]:
        if quantity == product.quantity:
            return product
        rows = self.store.update(product.id, {"quantity": quantity})
        if rows == 0:
            # deleted between read and write
            return None
        return product.model_copy(update={"quantity": quantity})

    def record_sale(self, product_id: int) -> Optional[ProductRecord]:
        """
        Sell one unit. At zero stock nothing is written and the product is
        returned unchanged. Returns None for an unknown id.
        """
        product = self.store.get(product_id)
        if product is None:
            return None
        updated = self._persist_quantity(product, decrement_quantity(product.quantity))
        if updated is not None and updated.quantity == product.quantity:
            log.info("sale ignored for product id=%s: out of stock", product_id)
        return updated

    def receive(self, product_id: int) -> Optional[ProductRecord]:
        product = self.store.get(product_id)
        if product is None:
            return None
        return self._persist_quantity(product, increment_quantity(product.quantity))

    def set_quantity(self, product_id: int, quantity: int) -> Optional[ProductRecord]:
        product = self.store.get(product_id)
        if product is None:
            return None
        # the store validates the new value (negatives raise ValidationError)
        return self._persist_quantity(product, quantity)
