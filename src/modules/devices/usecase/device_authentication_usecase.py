import logging
from typing import Optional

from src.modules.devices.repo.device_repository import DeviceRepository
from src.shared.domain.entities.device import Device
from src.shared.domain.exception.gateway_exceptions import (
    AuthInvalidError,
    AuthRequiredError,
    DatastoreError,
    DependencyUnavailableError,
)

logger = logging.getLogger(__name__)


class DeviceAuthenticationUseCase:
    def __init__(self, device_repository: Optional[DeviceRepository] = None):
        self.device_repository = device_repository or DeviceRepository()

    async def authenticate(self, device_id: Optional[str], token: Optional[str]) -> Device:
        """
        Valida as credenciais enviadas pelo dispositivo.

        Raises:
            AuthRequiredError: device_id ou token ausentes
            AuthInvalidError: dispositivo inexistente ou token divergente
            DependencyUnavailableError: falha do datastore durante a consulta
        """
        if not device_id or not token:
            raise AuthRequiredError("Device ID and token are required.")

        try:
            device = await self.device_repository.find_device(device_id, token)
        except DatastoreError as e:
            logger.error(f"Erro ao validar credenciais do dispositivo {device_id}: {e}")
            raise DependencyUnavailableError("Unable to verify device credentials.") from e

        if device is None:
            logger.warning(f"Credenciais inválidas para o dispositivo {device_id}")
            raise AuthInvalidError("Invalid token or unauthorized device.")

        return device
