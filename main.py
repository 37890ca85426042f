from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
import uvicorn

from core.container import create_container
from core.environment.config import Settings
from core.exception_handler import (
    http_exception_handler,
    custom_exception_handler
)
from core.exceptions import BaseCustomException
from core.logging.providers import configure_logging
from exporter.router import router as metrics_router

VERSION = "1.0.0"


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """
    Build the exporter application.

    Parameters
    ----------
    container : AsyncContainer | None
        Dependency container, built from the environment when omitted

    Returns
    -------
    FastAPI
        Configured application
    """
    app = FastAPI(
        title="Etherscan Exporter",
        version=VERSION,
        description="Exposes Etherscan balances and block numbers as metrics",
        docs_url=None,
        redoc_url=None,
        openapi_url=None
    )

    setup_dishka(container or create_container(), app)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(BaseCustomException, custom_exception_handler)
    app.add_exception_handler(Exception, custom_exception_handler)

    app.include_router(metrics_router)

    return app


def run() -> None:
    """Read settings once and start the HTTP listener."""
    settings = Settings()
    logger = configure_logging()

    if settings.test_mode:
        logger.info("Test mode is enabled")
    logger.info(f"Monitoring account id's: {settings.accounts}")
    logger.info(f"Etherscan exporter listening on {settings.listen_host}:{settings.listen_port}")

    app = create_app(create_container(settings))
    uvicorn.run(app, host=settings.listen_host, port=settings.listen_port)


app = create_app()


if __name__ == "__main__":
    run()
