import logging

from fastapi import FastAPI
from .config.settings import settings
from .errors import CompletionConnectionError
from .routes import autocomplete_routes, health_routes
from .services.container import container

logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title=settings.api_title,
    description=settings.api_description,
    version=settings.api_version
)

# Include routers with API prefix
app.include_router(autocomplete_routes.router, prefix="/api", tags=["autocomplete"])
app.include_router(health_routes.router, prefix="/api", tags=["health"])


@app.get("/")
def root():
    """Root endpoint with API information"""
    return {
        "message": settings.api_title,
        "version": settings.api_version,
        "description": settings.api_description,
        "docs": "/docs",
        "redoc": "/redoc",
        "endpoints": {
            "autocomplete": "/api/auto_complete",
            "suggest": "/api/suggest",
            "health": "/api/health"
        },
        "elasticsearch": settings.elasticsearch_url,
        "index": settings.completion_index,
        "field": settings.completion_field
    }


@app.on_event("startup")
def startup_event():
    """Open the shared Elasticsearch connection"""
    logger.info("Starting %s v%s", settings.api_title, settings.api_version)
    try:
        container.start()
    except CompletionConnectionError as e:
        # Health reports DISCONNECTED; suggestion routes answer 503
        logger.error("Elasticsearch unavailable at startup: %s", e)


@app.on_event("shutdown")
def shutdown_event():
    """Release the Elasticsearch connection"""
    logger.info("Shutting down %s", settings.api_title)
    container.shutdown()
