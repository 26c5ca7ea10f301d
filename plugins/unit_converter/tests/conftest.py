import pytest

from app import create_app
from plugins.unit_converter.core import Dispatcher, TransformRegistry


@pytest.fixture
def registry() -> TransformRegistry:
    return TransformRegistry()


@pytest.fixture
def dispatcher(registry: TransformRegistry) -> Dispatcher:
    return Dispatcher(registry)


@pytest.fixture
def client():
    app = create_app("TestingConfig")
    return app.test_client()
