import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inventory_app.api.health import router as health_router
from inventory_app.api.routes_admin import router as admin_router
from inventory_app.api.routes_catalogue import router as catalogue_router
from inventory_app.api.routes_inventory import router as inventory_router
from inventory_app.api.routes_order import router as order_router
from inventory_app.config import settings
from inventory_app.db import init_db

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup; RESET_DB=1 drops and recreates the tables
    init_db()
    yield


app = FastAPI(title="Inventory App - Backend", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router, prefix="/api", tags=["health"])

app.include_router(catalogue_router, prefix="/api/products", tags=["catalogue"])

app.include_router(inventory_router, tags=["inventory"])

app.include_router(order_router, prefix="/api/orders", tags=["orders"])

app.include_router(admin_router, tags=["admin"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("inventory_app.main:app", host=settings.APP_HOST, port=settings.APP_PORT)
