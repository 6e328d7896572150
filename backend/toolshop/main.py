"""
Toolshop - Backend API
Storefront and admin console for an online tool shop
"""
import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from toolshop.api import cart, categories, menus, orders, products, session, site_settings
from toolshop.core.config import settings
from toolshop.core.store import ShopStore

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(store: ShopStore = None) -> FastAPI:
    """Build the API around a store (a fresh seeded one by default)"""
    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        description=settings.API_DESCRIPTION,
    )
    app.state.store = store if store is not None else ShopStore.from_seed(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["*"],
    )

    # Include API routers
    app.include_router(products.router, prefix="/api/v1/products", tags=["Products"])
    app.include_router(cart.router, prefix="/api/v1/cart", tags=["Cart"])
    app.include_router(session.router, prefix="/api/v1/session", tags=["Session"])
    app.include_router(categories.router, prefix="/api/v1/categories", tags=["Categories"])
    app.include_router(menus.router, prefix="/api/v1/menus", tags=["Menus"])
    app.include_router(orders.router, prefix="/api/v1/orders", tags=["Orders"])
    app.include_router(site_settings.router, prefix="/api/v1/settings", tags=["Settings"])

    @app.get("/")
    async def root():
        """Root endpoint - API status"""
        return {
            "message": settings.API_TITLE,
            "status": "online",
            "version": settings.API_VERSION,
            "description": settings.API_DESCRIPTION,
        }

    @app.get("/health")
    async def health():
        """Health check endpoint for monitoring"""
        current = app.state.store
        return {
            "status": "healthy",
            "service": "toolshop-api",
            "version": settings.API_VERSION,
            "store": {
                "products": len(current.products),
                "categories": len(current.categories),
                "orders": len(current.orders),
            },
        }

    logger.info(f"{settings.API_TITLE} {settings.API_VERSION} ready")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "toolshop.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_DEBUG,
    )
