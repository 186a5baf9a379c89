import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from string_analyzer.config import Settings, get_settings
from string_analyzer.exceptions import Conflicting, StringAnalyzerError
from string_analyzer.routes import router
from string_analyzer.storage import InMemoryStore

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(store: Optional[InMemoryStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Analyze, store and query string properties",
        version=settings.app_version,
    )
    # The store is owned by the app instance, one per process
    app.state.store = store if store is not None else InMemoryStore()

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def root():
        """Root endpoint"""
        return {
            "message": settings.app_name,
            "version": settings.app_version,
            "endpoints": {
                "POST /strings": "Analyze and store a string",
                "GET /strings/{string_value}": "Get specific string analysis",
                "GET /strings": "Get all strings with optional filters",
                "GET /strings/filter-by-natural-language": "Filter using natural language",
                "DELETE /strings/{string_value}": "Delete a string",
            },
        }

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "strings": app.state.store.count()}

    app.include_router(router, tags=["strings"])

    @app.exception_handler(StringAnalyzerError)
    async def string_analyzer_exception_handler(request: Request, exc: StringAnalyzerError):
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
        content = {"error": exc.message}
        if isinstance(exc, Conflicting):
            content["interpreted_query"] = {
                "original": request.query_params.get("query"),
                "parsed_filters": exc.parsed_filters,
            }
        return JSONResponse(status_code=exc.status_code, content=content)

    # Unknown routes and methods
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    # Generic error handler
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )

    return app


configure_logging(get_settings())
app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run("string_analyzer.main:app", host=settings.host, port=settings.port, reload=settings.reload)


if __name__ == "__main__":
    run()
