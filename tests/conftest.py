import os
import sys
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient


def setup_test_environment():
    test_env_path = os.path.join(os.path.dirname(__file__), ".env.test")

    if os.path.exists(test_env_path):
        with open(test_env_path, "r", encoding="utf-8") as f:
            for line_num, line in enumerate(f, 1):
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if "=" not in line:
                    print(f"⚠️  Formato inválido na linha {line_num} em .env.test: {line}")
                    continue

                key, value = line.split("=", 1)
                os.environ[key.strip()] = value.strip().strip('"').strip("'")
    else:
        default_test_vars = {
            "ENVIRONMENT": "test",
            "LOG_LEVEL": "DEBUG",
            "AWS_REGION": "us-east-1",
            "AWS_ACCESS_KEY_ID": "testing",
            "AWS_SECRET_ACCESS_KEY": "testing",
            "DYNAMODB_DEVICES_TABLE": "device-gateway-test-devices",
        }

        for key, value in default_test_vars.items():
            os.environ.setdefault(key, value)


setup_test_environment()

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from src.app.main import app  # noqa: E402
from src.modules.devices.controller.dependencies import get_dynamo_client  # noqa: E402
from src.shared.domain.entities.device import Device  # noqa: E402
from src.shared.domain.exception.gateway_exceptions import ConditionalWriteError, DatastoreError  # noqa: E402


class InMemoryDynamoClient:
    """Tabela de dispositivos em memória com a mesma interface assíncrona do DynamoClient."""

    def __init__(self):
        self.items: Dict[str, Dict[str, Any]] = {}
        self.unavailable = False

    def _check_available(self):
        if self.unavailable:
            raise DatastoreError("DynamoDB indisponível", code="ServiceUnavailable")

    async def get_item(self, key: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self._check_available()
        item = self.items.get(key["device_id"])
        return dict(item) if item else None

    async def put_item(self, item: Dict[str, Any], condition_expression: Optional[str] = None) -> Dict[str, Any]:
        self._check_available()
        if condition_expression == "attribute_not_exists(device_id)" and item["device_id"] in self.items:
            raise ConditionalWriteError("Condição de escrita não satisfeita", code="ConditionalCheckFailedException")
        self.items[item["device_id"]] = dict(item)
        return item

    async def scan(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        self._check_available()
        return [dict(item) for item in self.items.values()]


@pytest.fixture(scope="session")
def client():
    """Fixture para o cliente de teste da API FastAPI."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def device_table():
    return InMemoryDynamoClient()


@pytest.fixture
def gateway_client(client, device_table):
    """Cliente de teste com o DynamoClient substituído pela tabela em memória."""
    app.dependency_overrides[get_dynamo_client] = lambda: device_table
    yield client
    app.dependency_overrides.pop(get_dynamo_client, None)


@pytest.fixture
def registered_device(device_table):
    device = Device(device_id="sensor-1", token="0123456789abcdef0123456789abcdef")
    device_table.items[device.device_id] = device.to_dict()
    return device


@pytest.fixture
def mock_dynamo_client():
    """Mock para o DynamoClient de baixo nível, usado nos testes unitários do DeviceRepository."""
    with patch("src.shared.infra.external.dynamo.dynamo_client.DynamoClient") as mock:
        dynamo_client_instance = mock.return_value
        dynamo_client_instance.put_item = AsyncMock(side_effect=lambda item, **kwargs: item)
        dynamo_client_instance.get_item = AsyncMock(return_value=None)
        dynamo_client_instance.scan = AsyncMock(return_value=[])
        yield dynamo_client_instance


@pytest.fixture
def mock_device_repository():
    """Mock para o DeviceRepository, usado em testes de use cases."""
    with patch("src.modules.devices.repo.device_repository.DeviceRepository") as mock:
        repo_instance = mock.return_value
        repo_instance.get_device = AsyncMock(return_value=None)
        repo_instance.find_device = AsyncMock(return_value=None)
        repo_instance.create_device = AsyncMock(side_effect=lambda device: device)
        repo_instance.list_devices = AsyncMock(return_value=[])
        yield repo_instance


@pytest.fixture
def mock_boto3_table():
    with patch("boto3.resource") as mock_resource:
        mock_table = MagicMock()
        mock_resource.return_value.Table.return_value = mock_table
        yield mock_table
