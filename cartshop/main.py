# cartshop/main.py
import logging
import os
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import cart, checkout, shop
from .catalog import DEMO_PRODUCTS
from .database import async_session_maker, create_tables
from .errors import CartError, CartResetError
from .sql_store import SqlCartStore
from .store import CartStore, InMemoryCartStore

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
CART_STORE = os.getenv("CART_STORE", "sql")

logger = logging.getLogger(__name__)


def build_store(kind: str = CART_STORE) -> CartStore:
    if kind == "memory":
        return InMemoryCartStore(DEMO_PRODUCTS)
    if kind == "sql":
        return SqlCartStore(async_session_maker)
    raise ValueError(f"unknown CART_STORE {kind!r}, expected 'sql' or 'memory'")


def create_app(store: Optional[CartStore] = None) -> FastAPI:
    app = FastAPI(
        title="Cartshop",
        description="🛒 Product catalog, cart and checkout API",
        version="1.0.0",
    )
    app.state.store = store if store is not None else build_store()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(shop.router)
    app.include_router(cart.router)
    app.include_router(checkout.router)

    @app.exception_handler(CartError)
    async def cart_error_handler(request: Request, exc: CartError):
        body = {"detail": exc.detail}
        if isinstance(exc, CartResetError):
            body["payment"] = exc.payment.model_dump()
        return JSONResponse(status_code=exc.status_code, content=body)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.on_event("startup")
    async def on_startup():
        if isinstance(app.state.store, SqlCartStore):
            await create_tables()
        logger.info("cartshop started with %s", type(app.state.store).__name__)

    return app


logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
app = create_app()

if __name__ == "__main__":
    uvicorn.run("cartshop.main:app", host="0.0.0.0", port=int(os.getenv("PORT", "8000")), reload=True)
