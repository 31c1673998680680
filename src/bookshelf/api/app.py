"""
Main FastAPI application for the Bookshelf catalog API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..catalog.auth import AuthStub
from ..catalog.resolver import QueryResolver
from ..config import get_data_dir, settings
from ..datasource.base import DataSource
from ..datasource.loader import load_data_source
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..validation import audit_data_source

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting Bookshelf API...",
        environment=settings.environment,
        graphql_path=settings.graphql_path,
    )
    audit_data_source(app.state.catalog.data_source)

    yield

    logger.info("Shutting down Bookshelf API...")


def create_app(data_source: DataSource | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        data_source: Catalog collections to serve. Loaded from the configured
            data directory when omitted.

    Raises:
        DataSourceUnavailable: If the collections cannot be loaded
    """
    if data_source is None:
        data_source = load_data_source(get_data_dir())

    app = FastAPI(
        title="Bookshelf API",
        description="GraphQL catalog of authors, books and comments",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.catalog = QueryResolver(data_source)
    app.state.auth = AuthStub()

    app.add_middleware(LoggingContextMiddleware)

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_origin_regex=settings.cors_origin_regex,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": __version__,
            "authors": len(data_source.authors),
            "books": len(data_source.books),
            "comments": len(data_source.comments),
        }

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint=settings.graphql_path)
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookshelf.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
