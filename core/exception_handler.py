import logging

from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.exceptions import BaseCustomException
from core.logging.providers import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Handler for HTTP exceptions (unknown paths, wrong methods).

    Parameters
    ----------
    request : Request
        FastAPI request
    exc : StarletteHTTPException
        HTTP exception

    Returns
    -------
    PlainTextResponse
        Error response
    """
    return PlainTextResponse(
        f"{exc.status_code} {exc.detail}\n",
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None)
    )


async def custom_exception_handler(request: Request, exc: Exception):
    """
    Handler for custom and unexpected exceptions.

    Parameters
    ----------
    request : Request
        FastAPI request
    exc : Exception
        Exception

    Returns
    -------
    PlainTextResponse
        Error response
    """
    if isinstance(exc, BaseCustomException):
        logger.error(f"{request.url.path}: {exc.message}")
        return PlainTextResponse(
            f"{exc.message}\n",
            status_code=exc.get_status_code()
        )

    logger.error(f"{request.url.path}: unhandled error", exc_info=exc)
    return PlainTextResponse(
        "Internal server error\n",
        status_code=500
    )
