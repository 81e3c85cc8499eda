import logging
import secrets
from typing import Optional

from src.modules.devices.repo.device_repository import DeviceRepository
from src.shared.domain.entities.device import Device
from src.shared.domain.exception.gateway_exceptions import (
    ConditionalWriteError,
    ConflictError,
    DatastoreError,
    DependencyError,
    ValidationError,
)

logger = logging.getLogger(__name__)

TOKEN_BYTES = 16


def generate_device_token() -> str:
    """Gera o token do dispositivo: 16 bytes aleatórios em hexadecimal (32 caracteres)."""
    return secrets.token_hex(TOKEN_BYTES)


class DeviceRegistrationUseCase:
    def __init__(self, device_repository: Optional[DeviceRepository] = None):
        self.device_repository = device_repository or DeviceRepository()

    async def register_device(self, device_id: Optional[str]) -> Device:
        if not device_id:
            raise ValidationError("Device ID is required.")

        try:
            existing_device = await self.device_repository.get_device(device_id)
        except DatastoreError as e:
            logger.error(f"Erro ao verificar existência do dispositivo {device_id}: {e}")
            raise DependencyError("Error checking device existence.") from e

        if existing_device:
            logger.warning(f"Tentativa de registrar dispositivo já existente: {device_id}")
            raise ConflictError("Device ID is already registered.")

        device = Device(device_id=device_id, token=generate_device_token())

        try:
            await self.device_repository.create_device(device)
        except ConditionalWriteError as e:
            # outro registro concorrente gravou o mesmo device_id após a leitura
            logger.warning(f"Registro concorrente detectado para o dispositivo {device_id}")
            raise ConflictError("Device ID is already registered.") from e
        except DatastoreError as e:
            logger.error(f"Erro ao registrar dispositivo {device_id}: {e}")
            raise DependencyError("Error registering device.") from e

        logger.info(f"Novo dispositivo registrado: {device_id}")
        return device
