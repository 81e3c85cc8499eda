from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header

from src.app.config import settings
from src.modules.devices.repo.device_repository import DeviceRepository
from src.modules.devices.usecase.device_authentication_usecase import DeviceAuthenticationUseCase
from src.modules.devices.usecase.device_query_usecase import DeviceQueryUseCase
from src.modules.devices.usecase.device_registration_usecase import DeviceRegistrationUseCase
from src.shared.domain.entities.device import Device
from src.shared.infra.external.dynamo.dynamo_client import DynamoClient


@lru_cache()
def get_dynamo_client() -> DynamoClient:
    return DynamoClient(**settings.get_datastore_config())


def get_device_repository(dynamo_client: DynamoClient = Depends(get_dynamo_client)) -> DeviceRepository:
    return DeviceRepository(dynamo_client=dynamo_client)


def get_registration_usecase(
    device_repository: DeviceRepository = Depends(get_device_repository),
) -> DeviceRegistrationUseCase:
    return DeviceRegistrationUseCase(device_repository=device_repository)


def get_authentication_usecase(
    device_repository: DeviceRepository = Depends(get_device_repository),
) -> DeviceAuthenticationUseCase:
    return DeviceAuthenticationUseCase(device_repository=device_repository)


def get_query_usecase(
    device_repository: DeviceRepository = Depends(get_device_repository),
) -> DeviceQueryUseCase:
    return DeviceQueryUseCase(device_repository=device_repository)


async def require_device_auth(
    device: Optional[str] = Header(None, description="Identificador do dispositivo"),
    token: Optional[str] = Header(None, description="Token emitido no registro"),
    authentication_usecase: DeviceAuthenticationUseCase = Depends(get_authentication_usecase),
) -> Device:
    return await authentication_usecase.authenticate(device, token)
