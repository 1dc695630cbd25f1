import os
import tempfile

import pytest

# Point the app at a throwaway sqlite file before inventory_app.config is imported.
_DB_DIR = tempfile.mkdtemp(prefix="inventory_tests_")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_DB_DIR, "test.db")
os.environ["SUPPLIER_EMAIL"] = "supplier@example.com"
os.environ["PRICE_TEMPLATE"] = "{price} EUR"
os.environ.pop("RESET_DB", None)

from inventory_app.db import SessionLocal, init_db  # noqa: E402
from inventory_app.services.inventory_store import InventoryStore  # noqa: E402


@pytest.fixture
def store():
    # fresh table per test so ids start at 1
    init_db(reset=True)
    db = SessionLocal()
    try:
        yield InventoryStore(db)
    finally:
        db.close()
