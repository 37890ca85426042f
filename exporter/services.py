import asyncio
import logging
from pathlib import Path
from typing import Protocol
from urllib.parse import urlencode

import aiohttp

from core.exceptions import (
    FixtureNotFoundException,
    UpstreamConnectionException,
    UpstreamStatusException
)

BALANCE_MULTI_ACTION = "balancemulti"
BLOCK_NUMBER_ACTION = "eth_blockNumber"


def balance_multi_query(accounts: str, api_key: str) -> str:
    """
    Build the query path for a multi-address balance lookup.

    Parameters
    ----------
    accounts : str
        Comma separated account addresses
    api_key : str
        Explorer API key

    Returns
    -------
    str
        Query path starting with ``?``
    """
    params = {
        "module": "account",
        "action": BALANCE_MULTI_ACTION,
        "address": accounts,
        "tag": "latest",
        "apikey": api_key
    }
    return "?" + urlencode(params, safe=",")


def block_number_query(api_key: str) -> str:
    """
    Build the query path for the current block number.

    Parameters
    ----------
    api_key : str
        Explorer API key

    Returns
    -------
    str
        Query path starting with ``?``
    """
    params = {
        "module": "proxy",
        "action": BLOCK_NUMBER_ACTION,
        "apikey": api_key
    }
    return "?" + urlencode(params)


class UpstreamSource(Protocol):
    """Anything able to answer explorer queries with a raw body."""

    async def fetch(self, base_url: str, query_path: str) -> str:
        ...


class EtherscanClient:
    """
    HTTP client for the explorer API.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance
    timeout : float
        Total timeout in seconds for a single request
    """

    def __init__(self, logger: logging.Logger, timeout: float):
        self.logger = logger
        self.timeout = aiohttp.ClientTimeout(total=timeout)

    async def fetch(self, base_url: str, query_path: str) -> str:
        """
        Perform a single GET against ``base_url + query_path``.

        Parameters
        ----------
        base_url : str
            API root URL
        query_path : str
            Query string appended to the root

        Returns
        -------
        str
            Fully buffered response body

        Raises
        ------
        UpstreamConnectionException
            If the request could not be completed
        UpstreamStatusException
            If the response status is not 200
        """
        url = base_url + query_path
        self.logger.debug(f"Querying {base_url}")
        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.get(url) as response:
                    if response.status != 200:
                        raise UpstreamStatusException(response.status)
                    return await response.text()
        except asyncio.TimeoutError as e:
            raise UpstreamConnectionException(
                f"Request to {base_url} timed out"
            ) from e
        except aiohttp.ClientError as e:
            raise UpstreamConnectionException(
                f"Request to {base_url} failed: {e}"
            ) from e


class FixtureSource:
    """
    Test mode source serving canned bodies from local files.

    The URL is ignored; the query action selects the fixture file.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance
    fixtures_dir : str
        Directory holding the fixture files
    """

    FIXTURES = {
        BALANCE_MULTI_ACTION: "test.json",
        BLOCK_NUMBER_ACTION: "test-blocknumber.json"
    }

    def __init__(self, logger: logging.Logger, fixtures_dir: str):
        self.logger = logger
        self.fixtures_dir = Path(fixtures_dir)

    def _fixture_for(self, query_path: str) -> Path:
        for action, file_name in self.FIXTURES.items():
            if f"action={action}" in query_path:
                return self.fixtures_dir / file_name
        raise FixtureNotFoundException(f"No fixture for query '{query_path}'")

    async def fetch(self, base_url: str, query_path: str) -> str:
        """
        Read the fixture body matching the query.

        Parameters
        ----------
        base_url : str
            Ignored
        query_path : str
            Query string, used to pick the fixture

        Returns
        -------
        str
            Fixture file contents

        Raises
        ------
        FixtureNotFoundException
            If the query has no fixture or the file cannot be read
        """
        path = self._fixture_for(query_path)
        self.logger.debug(f"Reading fixture {path}")
        try:
            return await asyncio.to_thread(path.read_text, encoding="utf-8")
        except OSError as e:
            raise FixtureNotFoundException(
                f"Cannot read fixture {path}: {e}"
            ) from e
