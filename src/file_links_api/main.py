import logging

import pydantic
from fastapi import FastAPI

from file_links_api.errors import (
    FilesApiError,
    handle_broad_exceptions,
    handle_files_api_errors,
    handle_pydantic_validation_errors,
)
from file_links_api.logging_config import configure_logging
from file_links_api.routers.fallback import router as fallback_router
from file_links_api.routers.files import router as files_router
from file_links_api.settings import Settings

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create a FastAPI application."""
    settings = settings or Settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="File Links API",
        # every unrouted path answers with the fallback message
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings

    app.include_router(files_router)
    # must stay last: it matches every path
    app.include_router(fallback_router)

    app.add_exception_handler(
        exc_class_or_status_code=FilesApiError,
        handler=handle_files_api_errors,
    )
    app.add_exception_handler(
        exc_class_or_status_code=pydantic.ValidationError,
        handler=handle_pydantic_validation_errors,
    )
    app.middleware("http")(handle_broad_exceptions)

    logger.info(f"File Links API ready (bucket={settings.bucket_name}, collection={settings.files_collection})")
    return app


if __name__ == "__main__":
    import uvicorn

    app = create_app()
    uvicorn.run(app, host="0.0.0.0", port=8000)
