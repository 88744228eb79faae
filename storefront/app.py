"""
Storefront - FastAPI application factory

Each app owns its catalog and its cart session registry; nothing is kept
in module-level state.
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.cart import CartSessions
from storefront.catalog import Catalog, load_catalog
from storefront.config import Settings, get_settings
from storefront.logging import configure_logging, get_logger
from storefront.routers import cart_router, products_router

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None, catalog: Optional[Catalog] = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Defaults to the environment settings
        catalog: Defaults to the catalog at settings.catalog_path
    """
    settings = settings or get_settings()
    configure_logging(settings)
    if catalog is None:
        catalog = load_catalog(settings.catalog_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Storefront starting ({settings.app_env}), {len(catalog)} products")
        yield
        # Carts live only as long as the process
        logger.info(f"Storefront stopping, discarding {len(app.state.sessions)} cart sessions")

    app = FastAPI(title="Storefront", lifespan=lifespan)
    app.state.settings = settings
    app.state.catalog = catalog
    app.state.sessions = CartSessions(
        ttl_seconds=settings.cart_session_ttl_seconds,
        max_sessions=settings.max_cart_sessions,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/health")
    async def health_check():
        return {"status": "ok"}

    app.include_router(products_router, prefix="/api")
    app.include_router(cart_router, prefix="/api")

    return app
