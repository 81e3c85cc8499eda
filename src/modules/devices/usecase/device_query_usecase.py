import logging
from typing import List, Optional

from src.modules.devices.repo.device_repository import DeviceRepository
from src.shared.domain.entities.device import Device
from src.shared.domain.exception.gateway_exceptions import DatastoreError, DependencyError

logger = logging.getLogger(__name__)


class DeviceQueryUseCase:
    def __init__(self, device_repository: Optional[DeviceRepository] = None):
        self.device_repository = device_repository or DeviceRepository()

    async def list_devices(self) -> List[Device]:
        try:
            devices = await self.device_repository.list_devices()
        except DatastoreError as e:
            logger.error(f"Erro ao buscar lista de dispositivos: {e}")
            raise DependencyError("Error fetching device list.") from e

        logger.debug(f"Dispositivos retornados: {[device.device_id for device in devices]}")
        return devices
