import re

import pytest

from src.modules.devices.usecase.device_registration_usecase import DeviceRegistrationUseCase, generate_device_token
from src.shared.domain.entities.device import Device
from src.shared.domain.exception.gateway_exceptions import (
    ConditionalWriteError,
    ConflictError,
    DatastoreError,
    DependencyError,
    ValidationError,
)

HEX_TOKEN = re.compile(r"^[0-9a-f]{32}$")


def test_generate_device_token_format():
    token = generate_device_token()
    assert HEX_TOKEN.match(token)


def test_generate_device_token_is_random():
    assert len({generate_device_token() for _ in range(50)}) == 50


class TestDeviceRegistrationUseCase:
    @pytest.mark.asyncio
    async def test_register_new_device(self, mock_device_repository):
        usecase = DeviceRegistrationUseCase(device_repository=mock_device_repository)

        device = await usecase.register_device("sensor-1")

        assert device.device_id == "sensor-1"
        assert HEX_TOKEN.match(device.token)
        mock_device_repository.get_device.assert_called_once_with("sensor-1")
        mock_device_repository.create_device.assert_called_once()
        created = mock_device_repository.create_device.call_args[0][0]
        assert created.to_dict() == device.to_dict()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("device_id", [None, ""])
    async def test_register_requires_device_id(self, mock_device_repository, device_id):
        usecase = DeviceRegistrationUseCase(device_repository=mock_device_repository)

        with pytest.raises(ValidationError) as exc_info:
            await usecase.register_device(device_id)

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Device ID is required."
        mock_device_repository.get_device.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_whitespace_device_id_is_kept(self, mock_device_repository):
        usecase = DeviceRegistrationUseCase(device_repository=mock_device_repository)

        device = await usecase.register_device("   ")

        assert device.device_id == "   "
        mock_device_repository.get_device.assert_called_once_with("   ")
        mock_device_repository.create_device.assert_called_once()

    @pytest.mark.asyncio
    async def test_register_existing_device(self, mock_device_repository):
        mock_device_repository.get_device.return_value = Device(device_id="sensor-1", token="a" * 32)
        usecase = DeviceRegistrationUseCase(device_repository=mock_device_repository)

        with pytest.raises(ConflictError) as exc_info:
            await usecase.register_device("sensor-1")

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Device ID is already registered."
        mock_device_repository.create_device.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_lookup_failure(self, mock_device_repository):
        mock_device_repository.get_device.side_effect = DatastoreError("timeout")
        usecase = DeviceRegistrationUseCase(device_repository=mock_device_repository)

        with pytest.raises(DependencyError) as exc_info:
            await usecase.register_device("sensor-1")

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Error checking device existence."
        mock_device_repository.create_device.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_concurrent_duplicate(self, mock_device_repository):
        mock_device_repository.create_device.side_effect = ConditionalWriteError(
            "exists", code="ConditionalCheckFailedException"
        )
        usecase = DeviceRegistrationUseCase(device_repository=mock_device_repository)

        with pytest.raises(ConflictError):
            await usecase.register_device("sensor-1")

    @pytest.mark.asyncio
    async def test_register_insert_failure(self, mock_device_repository):
        mock_device_repository.create_device.side_effect = DatastoreError("throttled")
        usecase = DeviceRegistrationUseCase(device_repository=mock_device_repository)

        with pytest.raises(DependencyError) as exc_info:
            await usecase.register_device("sensor-1")

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Error registering device."
