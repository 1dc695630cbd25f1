from typing import NamedTuple
from urllib.parse import quote

from inventory_app.schemas.product_schema import ProductRecord


class OrderServiceException(Exception):
    pass


class SupplierOrder(NamedTuple):
    to: str
    subject: str
    mailto: str


class OrderService:
    """Builds the "order more from the supplier" email for a product."""

    def __init__(self, supplier_email: str):
        if not supplier_email or "@" not in supplier_email:
            raise OrderServiceException(f"Invalid supplier email: {supplier_email!r}")
        self.supplier_email = supplier_email

    def compose(self, product: ProductRecord) -> SupplierOrder:
        subject = product.name
        mailto = f"mailto:{quote(self.supplier_email, safe='@')}?subject={quote(subject, safe='')}"
        return SupplierOrder(to=self.supplier_email, subject=subject, mailto=mailto)
