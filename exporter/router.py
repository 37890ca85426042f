import logging
from collections.abc import AsyncIterator
from fastapi import APIRouter
from fastapi.responses import HTMLResponse, StreamingResponse
from dishka.integrations.fastapi import inject
from dishka import FromComponent
from typing import Annotated
from exporter.usecases import CollectMetricsUseCase

EXPOSITION_MEDIA_TYPE = "text/plain; version=0.0.4; charset=utf-8"

INDEX_HTML = """<!doctype html>
<html>
    <head>
        <meta charset="utf-8">
        <title>Etherscan Exporter</title>
    </head>
    <body>
        <h1>Etherscan Exporter</h1>
        <p><a href="/metrics">Metrics</a></p>
    </body>
</html>
"""

router = APIRouter(
    tags=["Exporter"]
)


async def _stream(lines: list[str]) -> AsyncIterator[str]:
    for line in lines:
        yield line


@router.get("/metrics", response_class=StreamingResponse)
@inject
async def get_metrics(
    use_case: Annotated[
        CollectMetricsUseCase, FromComponent("exporter")
    ],
    logger: Annotated[logging.Logger, FromComponent("logger")]
) -> StreamingResponse:
    """
    Scrape the explorer and render exposition lines.

    Always answers 200; degraded scrapes are reported through
    ``etherscan_up``.

    Parameters
    ----------
    use_case : CollectMetricsUseCase
        Use case for one scrape
    logger : logging.Logger
        Logger instance

    Returns
    -------
    StreamingResponse
        Exposition-format body
    """
    logger.info("Serving /metrics")
    lines = await use_case()
    return StreamingResponse(_stream(lines), media_type=EXPOSITION_MEDIA_TYPE)


@router.get("/", response_class=HTMLResponse)
@inject
async def index(
    logger: Annotated[logging.Logger, FromComponent("logger")]
) -> HTMLResponse:
    """
    Static landing page linking to the metrics endpoint.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance

    Returns
    -------
    HTMLResponse
        Index page
    """
    logger.info("Serving /index")
    return HTMLResponse(INDEX_HTML)
