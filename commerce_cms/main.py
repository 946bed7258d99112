from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
import logging

from commerce_cms.config import ENV, LOG_LEVEL, CORS_ORIGINS
from commerce_cms.database import engine, Base
from commerce_cms.errors import register_error_handlers
from commerce_cms.routes import (
    stores, billboards, categories, sizes, colors, products, checkout, webhook, orders, dashboard
)

# Import all models to ensure they are registered with SQLAlchemy
from commerce_cms.db.models import Store, Billboard, Category, Size, Color, Product, Image, Order, OrderItem

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="E-Commerce CMS Backend",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

# Configure logging to show API requests
logging.getLogger("uvicorn.access").setLevel(logging.INFO)

# Storefronts call the public API and checkout from their own origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

register_error_handlers(app)

# /api/stores and /api/webhook go first so they never match as a store id
app.include_router(stores.router)
app.include_router(webhook.router)
app.include_router(billboards.router)
app.include_router(categories.router)
app.include_router(sizes.router)
app.include_router(colors.router)
app.include_router(products.router)
app.include_router(checkout.router)
app.include_router(orders.router)
app.include_router(dashboard.router)

@app.get("/health")
def health():
    """Health check endpoint for Docker health checks"""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "connected"}
    except Exception as e:
        return {"status": "unhealthy", "database": "disconnected", "error": str(e)}

@app.on_event("startup")
def startup_event():
    # Only create tables automatically in dev, not production
    if ENV != "production":
        logger.info("Development mode: creating tables if they don't exist...")
        Base.metadata.create_all(bind=engine)

        from commerce_cms.init_db import seed
        seed()
        logger.info("Database seeded")
