"""FastAPI application factory"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from .api.routes import breweries, geocode, health
from .config import HOST, LOG_LEVEL, PORT
from .services.http_client import reset_http_session


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Close the shared HTTP session on shutdown"""
    yield
    reset_http_session()


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI application
    """
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    app = FastAPI(
        title="BrewRoute Brewery Crawl API",
        description="API para buscar cervecerías cercanas y ordenar una ruta de visitas",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    # Include routers
    app.include_router(health.router)
    app.include_router(breweries.router)
    app.include_router(geocode.router)

    @app.get("/", include_in_schema=False)
    async def root():
        """Redirect to Swagger documentation"""
        return RedirectResponse(url="/docs")

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT)
