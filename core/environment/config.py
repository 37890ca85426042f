import os
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

TEST_MODE_ON = {"1", "true"}


class Settings(BaseSettings):
    """
    Exporter settings using Pydantic Settings.

    Values are read once at startup (from the environment, with an optional
    ``.env`` file preloaded) and never change afterwards.

    Attributes
    ----------
    test_mode : bool
        Serve canned fixture bodies instead of querying the explorer
    accounts : str
        Comma separated list of account addresses to monitor
    api_key : str
        Explorer API key
    testnet : str
        Secondary network identifier (empty disables secondary queries)
    mainnet_api_url : str
        Explorer API root for mainnet
    testnet_api_url : str
        Explorer API root template for the secondary network
    balance_precision : int
        Number of digits used to place the decimal point in balances
    request_timeout : float
        Total timeout in seconds for a single upstream call
    fixtures_dir : str
        Directory holding the test mode fixture files
    listen_host : str
        Address the HTTP listener binds to
    listen_port : int
        Port the HTTP listener binds to
    """

    test_mode: bool = False
    accounts: str = ""
    api_key: str = ""
    testnet: str = ""

    mainnet_api_url: str = "https://api.etherscan.io/api"
    testnet_api_url: str = "https://api-{testnet}.etherscan.io/api"
    balance_precision: int = 19
    request_timeout: float = 10.0
    fixtures_dir: str = "."

    listen_host: str = "0.0.0.0"
    listen_port: int = 9205

    model_config = SettingsConfigDict(
        env_file=os.getenv("ENV_FILE", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("test_mode", mode="before")
    @classmethod
    def parse_test_mode(cls, v):
        # Unrecognised values mean off
        if isinstance(v, str):
            return v.strip().lower() in TEST_MODE_ON
        return v

    def get_testnet_url(self) -> str | None:
        """
        Get explorer API root for the secondary network.

        Returns
        -------
        str | None
            Root URL with the network identifier substituted in,
            or None when no secondary network is configured
        """
        if not self.testnet:
            return None
        return self.testnet_api_url.replace("{testnet}", self.testnet)
