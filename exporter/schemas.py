from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


def _lenient_str(v: Any) -> Any:
    # Mistyped fields decode as empty instead of failing the whole payload
    if not isinstance(v, str):
        return ""
    return v


def _lenient_id(v: Any) -> Any:
    if isinstance(v, bool) or not isinstance(v, (int, str)):
        return None
    return v


class BalanceRecord(BaseModel):
    """
    Single entry of a balance-multi result.

    Attributes
    ----------
    account : str
        Account address
    balance : str
        Balance in base units as a decimal digit string
    """
    account: str = ""
    balance: str = ""

    model_config = ConfigDict(frozen=True)

    @field_validator("account", "balance", mode="before")
    @classmethod
    def coerce_str(cls, v: Any) -> Any:
        return _lenient_str(v)


class BalanceMultiResponse(BaseModel):
    """
    Explorer response for ``module=account&action=balancemulti``.

    Attributes
    ----------
    status : str
        ``"1"`` on success
    message : str
        Human readable status message
    result : list[BalanceRecord]
        Balances in the order returned by the explorer
    """
    status: str = ""
    message: str = ""
    result: list[BalanceRecord] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @field_validator("status", "message", mode="before")
    @classmethod
    def coerce_str(cls, v: Any) -> Any:
        return _lenient_str(v)

    @field_validator("result", mode="before")
    @classmethod
    def keep_records_only(cls, v: Any) -> Any:
        # On errors the explorer puts a message string here
        if not isinstance(v, list):
            return []
        return [item for item in v if isinstance(item, dict)]


class BlockNumberResponse(BaseModel):
    """
    JSON-RPC shaped response for ``module=proxy&action=eth_blockNumber``.

    Attributes
    ----------
    jsonrpc : str
        JSON-RPC version
    id : int | str | None
        Request id
    result : str
        Current block number, hex encoded with a ``0x`` prefix
    """
    jsonrpc: str = ""
    id: int | str | None = None
    result: str = ""

    model_config = ConfigDict(frozen=True)

    @field_validator("jsonrpc", "result", mode="before")
    @classmethod
    def coerce_str(cls, v: Any) -> Any:
        return _lenient_str(v)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        return _lenient_id(v)
