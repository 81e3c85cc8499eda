import logging
from typing import Any

from src.shared.domain.entities.device import Device
from src.shared.domain.exception.gateway_exceptions import ValidationError

logger = logging.getLogger(__name__)


class DataUploadUseCase:
    """Recebe dados enviados por um dispositivo autenticado. Os dados são apenas registrados em log."""

    async def upload(self, device: Device, data: Any) -> None:
        if not data:
            raise ValidationError("Data is required for upload.")

        logger.info(f"Dados recebidos do dispositivo {device.device_id}: {data}")
