"""Shared fixtures: a client wired to an in-memory transport."""

from collections.abc import Callable
from dataclasses import dataclass, field

import httpx
import pytest

from tasty_client import Session, TastyClient, TastyConfig, TokenStore

Handler = Callable[[httpx.Request], httpx.Response]


@dataclass
class Recorder:
    """Records every request and answers with a swappable handler."""

    handler: Handler = field(default=lambda request: httpx.Response(200, json={}))
    requests: list[httpx.Request] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def config() -> TastyConfig:
    """Certification config."""
    return TastyConfig(sandbox=True)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def make_client(config: TastyConfig, recorder: Recorder, tmp_path):
    """Build a client whose requests go to ``recorder``."""

    def _make(session_token: str | None = "test-token") -> TastyClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
        return TastyClient(
            config,
            session=Session(session_token=session_token),
            token_store=TokenStore(path=tmp_path / "session.json"),
            http_client=http_client,
        )

    return _make
