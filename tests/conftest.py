import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
import os


# Keep a developer's local .env out of the tests
os.environ['ENV_FILE'] = os.path.join(os.path.dirname(__file__), 'missing.env')

from core.container import create_container  # noqa: E402
from core.environment.config import Settings  # noqa: E402
from exporter.services import BALANCE_MULTI_ACTION, EtherscanClient  # noqa: E402


MAINNET_URL = "https://api.etherscan.io/api"

BALANCE_BODY = (
    '{"status":"1","message":"OK","result":['
    '{"account":"0xabc","balance":"1230000000000000000"},'
    '{"account":"0xdef","balance":"5"}]}'
)
MAINNET_BODY = '{"jsonrpc":"2.0","id":83,"result":"0x2a"}'
TESTNET_BODY = '{"jsonrpc":"2.0","id":83,"result":"0x10"}'


class FakeUpstream:
    """
    Stand-in for the explorer API.

    Each body may be a string or an exception to raise.
    """

    def __init__(self, balance=BALANCE_BODY, mainnet=MAINNET_BODY, testnet=TESTNET_BODY):
        self.bodies = {
            "balance": balance,
            "mainnet": mainnet,
            "testnet": testnet
        }
        self.calls = []

    async def fetch(self, base_url: str, query_path: str) -> str:
        self.calls.append((base_url, query_path))
        if f"action={BALANCE_MULTI_ACTION}" in query_path:
            key = "balance"
        elif base_url == MAINNET_URL:
            key = "mainnet"
        else:
            key = "testnet"

        body = self.bodies[key]
        if isinstance(body, Exception):
            raise body
        return body


def make_settings(**overrides) -> Settings:
    """Build settings without reading a .env file."""
    values = {
        "test_mode": False,
        "accounts": "0xabc,0xdef",
        "api_key": "secret",
        "testnet": ""
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def fake_upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest_asyncio.fixture
async def make_client(monkeypatch):
    """
    Factory fixture for async test clients.

    Parameters
    ----------
    monkeypatch : pytest.MonkeyPatch
        Used to route explorer calls to a fake upstream

    Yields
    ------
    Callable
        ``make(settings, upstream=None)`` returning an AsyncClient
    """
    from main import create_app

    opened = []

    async def _make(settings: Settings | None, upstream: FakeUpstream | None = None) -> AsyncClient:
        if upstream is not None:
            monkeypatch.setattr(EtherscanClient, "fetch", upstream.fetch)
        container = create_container(settings)
        app = create_app(container)
        client = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        opened.append((client, container))
        return client

    yield _make

    for client, container in opened:
        await client.aclose()
        await container.close()
