from pydantic import BaseModel, ConfigDict


class BlockHeightEntity(BaseModel):
    """
    Entity representing the chain head of one network.

    Attributes
    ----------
    network : str
        Network label (``mainnet`` or the secondary network identifier)
    hex_value : str
        Block number as returned by the explorer
    block_number : int
        Decoded block number
    """
    network: str
    hex_value: str
    block_number: int

    model_config = ConfigDict(frozen=True)


class AccountBalanceEntity(BaseModel):
    """
    Entity representing one account balance ready for display.

    Attributes
    ----------
    account : str
        Account address
    balance : str
        Balance converted to a decimal string
    """
    account: str
    balance: str

    model_config = ConfigDict(frozen=True)
