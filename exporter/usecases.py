import asyncio
import logging

from core.environment.config import Settings
from core.exceptions import BaseCustomException, DecodeException
from exporter.decoders import ResponseDecoder, parse_block_number
from exporter.entities import AccountBalanceEntity, BlockHeightEntity
from exporter.renderer import format_value
from exporter.schemas import BalanceMultiResponse
from exporter.services import UpstreamSource, balance_multi_query, block_number_query
from exporter.units import base_units_to_decimal

MAINNET = "mainnet"
SUCCESS_STATUS = "1"


class CollectMetricsUseCase:
    """
    Use case for one scrape of the explorer.

    Every failure is logged and turns ``etherscan_up`` to 0; collection
    of the remaining sources always continues.

    Parameters
    ----------
    settings : Settings
        Exporter settings
    source : UpstreamSource
        Explorer client or fixture source
    decoder : ResponseDecoder
        Response body decoder
    logger : logging.Logger
        Logger instance
    """

    def __init__(
        self,
        settings: Settings,
        source: UpstreamSource,
        decoder: ResponseDecoder,
        logger: logging.Logger
    ):
        self.settings = settings
        self.source = source
        self.decoder = decoder
        self.logger = logger
        self.up = True

    async def __call__(self) -> list[str]:
        """
        Execute use case.

        Returns
        -------
        list[str]
            Exposition lines in output order
        """
        self.up = True
        balance_body, mainnet_body, testnet_body = await self._fetch_all()

        balances = self._balances(balance_body)
        heights = [self._block_height(MAINNET, mainnet_body)]
        if testnet_body is not None:
            heights.append(self._block_height(self.settings.testnet, testnet_body))

        lines = [format_value("etherscan_up", None, "1" if self.up else "0")]
        lines.extend(
            format_value("etherscan_balance", {"account": item.account}, item.balance)
            for item in balances
        )
        lines.extend(
            format_value("etherscan_block_number", {"network": height.network}, str(height.block_number))
            for height in heights
            if height is not None
        )
        return lines

    async def _fetch_all(self) -> tuple[str | None, str | None, str | None]:
        """
        Issue the balance and block number queries concurrently.

        Returns
        -------
        tuple[str | None, str | None, str | None]
            Balance, mainnet block and secondary block bodies;
            None where the query failed or was not issued
        """
        root = self.settings.mainnet_api_url
        api_key = self.settings.api_key
        queries = [
            (root, balance_multi_query(self.settings.accounts, api_key)),
            (root, block_number_query(api_key))
        ]

        # Fixture mode has no secondary network
        testnet_url = None if self.settings.test_mode else self.settings.get_testnet_url()
        if testnet_url:
            queries.append((testnet_url, block_number_query(api_key)))

        results = await asyncio.gather(
            *(self.source.fetch(url, query) for url, query in queries),
            return_exceptions=True
        )

        bodies: list[str | None] = []
        for result in results:
            if isinstance(result, BaseCustomException):
                self.logger.error(result.message)
                self.up = False
                bodies.append(None)
            elif isinstance(result, Exception):
                self.logger.exception("Unexpected upstream failure", exc_info=result)
                self.up = False
                bodies.append(None)
            elif isinstance(result, BaseException):
                raise result
            else:
                bodies.append(result)

        if len(bodies) < 3:
            bodies.append(None)
        return bodies[0], bodies[1], bodies[2]

    def _balances(self, body: str | None) -> list[AccountBalanceEntity]:
        """
        Decode balances and convert them for display.

        Parameters
        ----------
        body : str | None
            Raw balance-multi body, None if the query failed

        Returns
        -------
        list[AccountBalanceEntity]
            Balances in upstream order, malformed entries skipped
        """
        response = (
            self.decoder.decode_balance_multi(body)
            if body is not None else BalanceMultiResponse()
        )

        if response.status != SUCCESS_STATUS:
            self.logger.warning(f"Received negative status in JSON response '{response.status}'")
            if body:
                self.logger.warning(body)
            self.up = False

        balances = []
        for record in response.result:
            try:
                balance = base_units_to_decimal(record.balance, self.settings.balance_precision)
            except DecodeException as e:
                self.logger.error(f"Skipping account {record.account}: {e.message}")
                self.up = False
                continue
            balances.append(AccountBalanceEntity(account=record.account, balance=balance))
        return balances

    def _block_height(self, network: str, body: str | None) -> BlockHeightEntity | None:
        """
        Decode a block number body.

        Parameters
        ----------
        network : str
            Network label for the metric
        body : str | None
            Raw ``eth_blockNumber`` body, None if the query failed

        Returns
        -------
        BlockHeightEntity | None
            Decoded height, None when it is unavailable
        """
        if body is None:
            return None

        response = self.decoder.decode_block_number(body)
        try:
            block_number = parse_block_number(response.result)
        except DecodeException as e:
            self.logger.error(f"{network}: {e.message}")
            self.up = False
            return None

        return BlockHeightEntity(
            network=network,
            hex_value=response.result,
            block_number=block_number
        )
