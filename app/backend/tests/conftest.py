import pytest
from fastapi.testclient import TestClient

from api import deps
from core.ai.providers import DemoProvider, WritingProvider
from core.ai.service_manager import WritingServiceManager
from core.exceptions import ProviderNotConfiguredError
from main import app


class FailingProvider(WritingProvider):
    name = "openai"
    display_name = "OpenAI"

    async def process(self, text, operation, options=None):
        raise ProviderNotConfiguredError("OpenAI API key not configured", provider=self.name)

    async def health_check(self):
        return False


@pytest.fixture
def demo_manager():
    return WritingServiceManager(DemoProvider())


@pytest.fixture
def failing_manager():
    return WritingServiceManager(FailingProvider())


def _client_for(manager):
    app.dependency_overrides[deps.get_service_manager] = lambda: manager
    return TestClient(app)


@pytest.fixture
def client(demo_manager):
    yield _client_for(demo_manager)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client(failing_manager):
    yield _client_for(failing_manager)
    app.dependency_overrides.clear()
