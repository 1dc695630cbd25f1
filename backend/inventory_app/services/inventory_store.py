import logging
from typing import Iterator, List, Mapping, Optional, Union

import pydantic
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inventory_app.config import settings
from inventory_app.repositories.product_repo import ProductRepository
from inventory_app.schemas.product_schema import (
    ProductCreate,
    ProductRecord,
    ProductUpdate,
)
from inventory_app.utils.transactions import smart_transaction

log = logging.getLogger(__name__)


class InventoryException(Exception):
    pass


class ValidationError(InventoryException):
    """A product is missing a required field or carries an invalid value."""

    def __init__(self, message: str, fields: List[str] = None):
        super().__init__(message)
        self.fields = fields or []

    @classmethod
    def from_pydantic(cls, err: pydantic.ValidationError) -> "ValidationError":
        fields = []
        parts = []
        for e in err.errors():
            name = ".".join(str(p) for p in e["loc"]) or "product"
            if name not in fields:
                fields.append(name)
            parts.append(f"{name}: {e['msg']}")
        return cls("; ".join(parts), fields)


class StorageError(InventoryException):
    """The database engine failed to read or write."""

    @classmethod
    def from_db_error(cls, err: SQLAlchemyError) -> "StorageError":
        return cls(f"storage failure: {type(err).__name__}")


class ProductListing:
    """
    Lazy, restartable scan over all products in id order.

    Every iteration starts a fresh scan and pulls rows in keyset pages of
    `batch_size`, each page in its own short transaction.
    """

    def __init__(self, store: "InventoryStore", batch_size: int):
        self._store = store
        self._batch_size = batch_size

    def __iter__(self) -> Iterator[ProductRecord]:
        last_id = 0
        while True:
            page = self._store._page_after(last_id, self._batch_size)
            yield from page
            if len(page) < self._batch_size:
                return
            last_id = page[-1].id


class InventoryStore:
    def __init__(self, db: Session, batch_size: Optional[int] = None):
        self.db = db
        self.repo = ProductRepository(db)
        self.batch_size = settings.LIST_BATCH_SIZE if batch_size is None else batch_size
        if self.batch_size < 1:
            raise ValueError("batch_size must be positive")

    def _tx(self):
        return smart_transaction(self.db, StorageError.from_db_error)

    def create(
        self, name: str, quantity: int, price: int, picture: Optional[bytes] = None
    ) -> int:
        """
        Insert a product and return its new id.
        Raises ValidationError before touching the database if any required
        field is missing or invalid.
        """
        try:
            data = ProductCreate(name=name, quantity=quantity, price=price, picture=picture)
        except pydantic.ValidationError as e:
            raise ValidationError.from_pydantic(e) from e

        with self._tx():
            p = self.repo.insert(data.name, data.quantity, data.price, data.picture)
            product_id = p.id
        log.debug("created product id=%s name=%r", product_id, data.name)
        return product_id

    def get(self, product_id: int) -> Optional[ProductRecord]:
        with self._tx():
            p = self.repo.get(product_id)
            return ProductRecord.model_validate(p) if p is not None else None

    def list(self) -> ProductListing:
        return ProductListing(self, self.batch_size)

    def _page_after(self, last_id: int, size: int) -> List[ProductRecord]:
        with self._tx():
            return [ProductRecord.model_validate(p) for p in self.repo.page_after(last_id, size)]

    def count(self) -> int:
        with self._tx():
            return self.repo.count()

    def update(
        self, product_id: int, changes: Union[ProductUpdate, Mapping[str, object]]
    ) -> int:
        """
        Write only the supplied fields. Returns rows modified (0 when there is
        no such id, or when `changes` is empty).
        """
        if not isinstance(changes, ProductUpdate):
            try:
                changes = ProductUpdate.model_validate(dict(changes))
            except pydantic.ValidationError as e:
                raise ValidationError.from_pydantic(e) from e

        fields = changes.changes()
        if not fields:
            return 0

        with self._tx():
            rows = self.repo.update_fields(product_id, fields)
        log.debug("updated product id=%s fields=%s rows=%s", product_id, sorted(fields), rows)
        return rows

    def delete(self, product_id: int) -> int:
        with self._tx():
            rows = self.repo.delete(product_id)
        log.debug("deleted product id=%s rows=%s", product_id, rows)
        return rows

    def delete_all(self) -> int:
        with self._tx():
            rows = self.repo.delete_all()
        log.info("deleted all products (%s rows)", rows)
        return rows
