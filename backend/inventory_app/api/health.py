from fastapi import APIRouter
from sqlalchemy import text

from inventory_app.db import SessionLocal, engine
from inventory_app.services.inventory_store import InventoryStore, StorageError

router = APIRouter()


@router.get("/health", tags=["health"])
def health():
    db_ok = False
    products = None
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            db_ok = True
    except Exception:
        db_ok = False
    db = SessionLocal()
    try:
        products = InventoryStore(db).count()
    except StorageError:
        products = None
    finally:
        db.close()

    return {
        "status": "ok" if db_ok and products is not None else "degraded",
        "db": db_ok,
        "products": products,
    }
