"""
Namma City - Backend API
B2B seller platform on ONDC: seller accounts, product catalog,
logistics partner lookup and the public marketplace
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables before settings are read
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from namma_city.api import auth, logistics, marketplace, pricing, products
from namma_city.core.config import Settings, settings
from namma_city.core.exceptions import NammaCityError
from namma_city.core.state import PlatformState

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

BACKEND_DIR = Path(__file__).parent.parent


def register_exception_handlers(app: FastAPI):
    """Translate errors into {"error": message} JSON bodies"""

    @app.exception_handler(NammaCityError)
    async def platform_error_handler(request: Request, exc: NammaCityError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.debug(f"Rejected payload on {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": "Invalid JSON payload"})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        message = "Not Found" if exc.status_code == 404 else str(exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"error": message}, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application with fresh in-memory stores"""
    config = config or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Construct the stores on startup, discard them on shutdown"""
        app.state.platform = PlatformState(config)
        logger.info(f"{config.API_TITLE} {config.API_VERSION} started")
        yield
        app.state.platform.close()
        logger.info(f"{config.API_TITLE} stopped")

    app = FastAPI(
        title=config.API_TITLE,
        version=config.API_VERSION,
        description=config.API_DESCRIPTION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.get_allowed_origins(),
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "x-auth-token", "Authorization"],
    )

    register_exception_handlers(app)

    # Include API routers
    app.include_router(auth.router, prefix="/api", tags=["Authentication"])
    app.include_router(products.router, prefix="/api/products", tags=["Products"])
    app.include_router(logistics.router, prefix="/api", tags=["Logistics"])
    app.include_router(pricing.router, prefix="/api", tags=["Pricing"])
    app.include_router(marketplace.router, prefix="/api", tags=["Marketplace"])

    @app.get("/")
    async def root():
        """Root endpoint - API status"""
        return {"message": "Welcome to Namma City B2B Seller Platform on ONDC"}

    @app.get("/health")
    async def health(request: Request):
        """Health check endpoint for monitoring"""
        state: PlatformState = request.app.state.platform
        return {
            "status": "healthy",
            "service": "namma-city-api",
            "version": config.API_VERSION,
            "sellers": state.sellers.count(),
            "products": state.products.get_stats(),
            "logistics_providers": len(state.logistics),
        }

    # Front-end pages; must be mounted last so API routes take precedence
    static_dir = Path(config.STATIC_DIR)
    if not static_dir.is_absolute():
        static_dir = BACKEND_DIR / static_dir
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        logger.info(f"Serving static files from {static_dir}")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "namma_city.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_DEBUG,
    )
