"""Shared test fixtures."""

import pytest

from pocket_client.client import PocketClient
from pocket_client.models import AddInput


@pytest.fixture(autouse=True)
def _no_env_credentials(monkeypatch):
    monkeypatch.delenv("POCKET_CONSUMER_KEY", raising=False)
    monkeypatch.delenv("POCKET_ACCESS_TOKEN", raising=False)


@pytest.fixture
def client():
    with PocketClient("key") as c:
        yield c


@pytest.fixture
def add_input() -> AddInput:
    return AddInput(
        url="http://example.link",
        title="example",
        tags=["qwe", "rty", "123"],
        access_token="token",
    )
