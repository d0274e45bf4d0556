"""
Storefront Application

Checkout wizard and order history over the remote order API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from .routes import checkout_router, orders_router, pages_router
from .routes.dependencies import close_clients
from .core.config import settings

# Load environment variables
load_dotenv("config/.env")

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Storefront starting up...")
    logger.info(f"Order API: {settings.order_api_base_url}")

    yield

    logger.info("Storefront shutting down...")
    await close_clients()


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Checkout flow and order history for the storefront",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict this
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(checkout_router)
app.include_router(orders_router)
app.include_router(pages_router)


@app.get("/")
async def home():
    """Service index"""
    return {
        "message": "Storefront API",
        "docs": "/docs",
        "endpoints": {
            "checkout": "/api/checkout",
            "orders": "/api/orders",
            "admin_orders": "/api/admin/orders",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "storefront",
        "order_api": settings.order_api_base_url,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
