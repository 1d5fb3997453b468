import pytest

from driver_did_web.plugins import DidWebDriver
from tests.fixtures import TEST_BASE_URL


@pytest.fixture()
def base_path(tmp_path):
    """Create an empty document root."""
    path = tmp_path / "dids"
    path.mkdir()
    return path


@pytest.fixture()
def properties(base_path):
    """Driver properties pointing at the document root."""
    return {"baseUrl": TEST_BASE_URL, "basePath": str(base_path)}


@pytest.fixture(scope="function")
def driver(properties):
    """Create a driver."""
    return DidWebDriver(properties)
