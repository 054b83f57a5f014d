"""Pulse checkout service entrypoint."""

from fastapi import FastAPI

from services.checkout.app.db.init_db import init_db
from services.checkout.app.routers.cart import router as cart_router
from services.checkout.app.routers.catalog import router as catalog_router
from services.checkout.app.routers.checkout import router as checkout_router
from services.checkout.app.utils.logging import configure_logging

app = FastAPI(title="Pulse Checkout API")

app.include_router(checkout_router)
app.include_router(catalog_router)
app.include_router(cart_router)


@app.on_event("startup")
def _startup() -> None:
    configure_logging()
    init_db()


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
