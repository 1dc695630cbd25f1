from typing import List, Optional

from inventory_app.models.product import Product
from sqlalchemy import delete, func, select, update
from sqlalchemy.orm import Session


class ProductRepository:
    """Plain SQL access to the products table; callers own the transaction."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, product_id: int) -> Optional[Product]:
        return self.db.get(Product, product_id)

    def page_after(self, last_id: int, size: int) -> List[Product]:
        """Keyset page: up to `size` rows with id > last_id, in id order."""
        stmt = (
            select(Product)
            .where(Product.id > last_id)
            .order_by(Product.id)
            .limit(size)
        )
        return list(self.db.scalars(stmt))

    def count(self) -> int:
        return self.db.scalar(select(func.count(Product.id))) or 0

    def insert(self, name: str, quantity: int, price: int, picture: bytes = None) -> Product:
        p = Product(name=name, quantity=quantity, price=price, picture=picture)
        self.db.add(p)
        self.db.flush()  # ensure id assigned
        return p

    def update_fields(self, product_id: int, fields: dict) -> int:
        result = self.db.execute(
            update(Product)
            .where(Product.id == product_id)
            .values(**fields)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0

    def delete(self, product_id: int) -> int:
        result = self.db.execute(
            delete(Product)
            .where(Product.id == product_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0

    def delete_all(self) -> int:
        result = self.db.execute(
            delete(Product).execution_options(synchronize_session=False)
        )
        return result.rowcount or 0
