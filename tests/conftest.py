import sys
from pathlib import Path
from typing import Any, AsyncGenerator, Iterable, Union

import pytest
import pytest_asyncio

from jira_rest import DefaultConfig, JiraClient
from jira_rest._transports import TransportRequest, TransportResponse
from jira_rest.models.errors import TransportError

# Ensure local source package (src/jira_rest) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))


class StubTransport:
    """Transport double that replays canned responses and records requests.

    Responses are returned in order; the last one is repeated once the list is
    exhausted. An exception in the list is raised instead of returned.
    """

    def __init__(
        self,
        responses: Iterable[Union[TransportResponse, Exception]],
        default_headers: dict[str, str] | None = None,
    ) -> None:
        self._responses = list(responses)
        self._default_headers = default_headers or {"Authorization": "Basic c3R1Yg=="}
        self.requests: list[TransportRequest] = []
        self.closed = False

    @property
    def default_headers(self) -> dict[str, str]:
        return dict(self._default_headers)

    async def send(self, request: TransportRequest) -> TransportResponse:
        self.requests.append(request)
        index = min(len(self.requests), len(self._responses)) - 1
        response = self._responses[index]
        if isinstance(response, Exception):
            raise response
        return response

    async def aclose(self) -> None:
        self.closed = True


def json_response(status_code: int, body: bytes, **headers: str) -> TransportResponse:
    return TransportResponse(
        status_code=status_code,
        headers={"Content-Type": "application/json", **headers},
        content=body,
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "JIRA_BASE_URL",
        "JIRA_EMAIL",
        "JIRA_API_TOKEN",
        "JIRA_ACCESS_TOKEN",
        "JIRA_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://test.atlassian.net"


@pytest.fixture
def email() -> str:
    return "dev@example.com"


@pytest.fixture
def api_token() -> str:
    return "secret-token"


@pytest.fixture
def config(base_url: str, email: str, api_token: str) -> DefaultConfig:
    return DefaultConfig(base_url=base_url, email=email, api_token=api_token)


@pytest_asyncio.fixture
async def client(config: DefaultConfig) -> AsyncGenerator[JiraClient, None]:
    async with JiraClient(config) as jira:
        yield jira


@pytest.fixture
def stub_transport() -> Any:
    """Return the StubTransport class so tests can build their own doubles."""
    return StubTransport


@pytest.fixture
def make_json_response() -> Any:
    return json_response


@pytest.fixture
def transport_error() -> Any:
    return TransportError
