"""
Walkie Talkie Rentals Storefront

Catalog, date-ranged rental cart, simulated checkout and the
inventory admin API for a walkie-talkie rental and retail shop.
"""

import os
import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv(os.path.join(os.path.dirname(__file__), "..", "config", ".env"))

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .routes import catalog_router, cart_router, checkout_router, auth_router, admin_router
from .security.session_middleware import SessionMiddleware, session_verifier
from .database.users import user_db, seed_staff_account

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(f"{settings.app_name} starting up ({settings.environment})...")
    seed_staff_account(user_db)
    logger.info(f"Cart storage: {settings.cart_storage_dir or 'in-memory'}")
    yield
    logger.info(f"{settings.app_name} shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Walkie talkie rental and retail storefront",
    version="1.0.0",
    docs_url=None if settings.is_production else "/docs",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Session verification middleware
app.add_middleware(SessionMiddleware, verifier=session_verifier)

# Static files and templates
static_dir = os.path.join(os.path.dirname(__file__), "static")
templates_dir = os.path.join(os.path.dirname(__file__), "templates")

if os.path.exists(static_dir):
    app.mount("/static", StaticFiles(directory=static_dir), name="static")

templates = Jinja2Templates(directory=templates_dir) if os.path.exists(templates_dir) else None

# Include API routers
app.include_router(catalog_router)
app.include_router(cart_router)
app.include_router(checkout_router)
app.include_router(auth_router)
app.include_router(admin_router)


@app.get("/")
async def home(request: Request):
    """Storefront home page"""
    if templates and "text/html" in request.headers.get("accept", ""):
        return templates.TemplateResponse(
            request,
            "index.html",
            {"title": settings.app_name},
        )
    return {
        "message": f"{settings.app_name} API",
        "docs": "/docs",
        "endpoints": {
            "rentals": "/api/rentals",
            "store": "/api/store",
            "packages": "/api/packages",
            "cart": "/api/cart",
            "checkout": "/api/checkout",
            "auth": "/api/auth",
            "admin": "/api/admin",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "walkie-storefront"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
