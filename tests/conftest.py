import pytest

from restify import RestClient


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def base_url():
    return "https://api.example.com"


@pytest.fixture
def client(base_url):
    return RestClient(base_url)
