import pytest
import pytest_httpserver

from hreq import Environments, RequestFactory


@pytest.fixture(name="environments")
def environments_fixture() -> Environments:
    return Environments(prod="https://api.example.com", dev="https://dev.example.com")


@pytest.fixture(name="request_factory")
def request_factory_fixture(environments: Environments) -> RequestFactory:
    return RequestFactory(environments=environments)


@pytest.fixture
def httpserver_url(httpserver: pytest_httpserver.HTTPServer) -> str:
    return httpserver.url_for("").rstrip("/")
