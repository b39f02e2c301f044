import io

import httpx
import pytest
from rich.console import Console

from app.database import reset_products
from app.main import app
from sdk.techlab import ProductsClient


@pytest.fixture(autouse=True)
def fresh_store():
    reset_products()
    yield
    reset_products()


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


@pytest.fixture
def fake_api_client():
    """Client wired to the in-memory FastAPI app instead of the network."""
    return ProductsClient(base_url="http://testserver", transport=httpx.ASGITransport(app=app))


class Recorder:
    """httpx handler that records requests and answers with a canned response."""

    def __init__(self, status_code=200, json=None):
        self.requests = []
        self.status_code = status_code
        self.json = json if json is not None else {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.json)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def recorded_client(recorder):
    return ProductsClient(transport=httpx.MockTransport(recorder))
