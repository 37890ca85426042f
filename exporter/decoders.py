import logging
import re
from pydantic import ValidationError

from core.exceptions import BlockNumberParseException
from exporter.schemas import BalanceMultiResponse, BlockNumberResponse

_HEX_DIGITS = re.compile(r"[+-]?[0-9a-fA-F]+")

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def parse_block_number(hex_value: str) -> int:
    """
    Decode a ``0x`` prefixed hex block number into a signed 64-bit integer.

    Parameters
    ----------
    hex_value : str
        Hex string as returned by ``eth_blockNumber``

    Returns
    -------
    int
        Decoded block number

    Raises
    ------
    BlockNumberParseException
        If the string has no valid hex body or does not fit 64 bits
    """
    digits = hex_value.replace("0x", "")
    if not _HEX_DIGITS.fullmatch(digits):
        raise BlockNumberParseException(
            f"Invalid block number '{hex_value}'"
        )

    number = int(digits, 16)
    if not INT64_MIN <= number <= INT64_MAX:
        raise BlockNumberParseException(
            f"Block number '{hex_value}' is out of range"
        )
    return number


class ResponseDecoder:
    """
    Best effort decoder for explorer response bodies.

    Malformed payloads never raise: they decode into empty models and
    the problem is logged, so the caller's status and hex checks decide
    whether the scrape is degraded.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def decode_balance_multi(self, body: str) -> BalanceMultiResponse:
        """
        Decode a balance-multi body.

        Parameters
        ----------
        body : str
            Raw response body

        Returns
        -------
        BalanceMultiResponse
            Decoded response, empty if the body is not a JSON object
        """
        try:
            return BalanceMultiResponse.model_validate_json(body)
        except ValidationError as e:
            self.logger.warning(f"Failed to decode balance response: {e.errors()[0]['msg']}")
            return BalanceMultiResponse()

    def decode_block_number(self, body: str) -> BlockNumberResponse:
        """
        Decode an ``eth_blockNumber`` body.

        Parameters
        ----------
        body : str
            Raw response body

        Returns
        -------
        BlockNumberResponse
            Decoded response, empty if the body is not a JSON object
        """
        try:
            return BlockNumberResponse.model_validate_json(body)
        except ValidationError as e:
            self.logger.warning(f"Failed to decode block number response: {e.errors()[0]['msg']}")
            return BlockNumberResponse()
