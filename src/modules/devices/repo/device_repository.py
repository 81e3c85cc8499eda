import logging
from typing import List, Optional

from src.app.config import settings
from src.shared.domain.entities.device import Device
from src.shared.infra.external.dynamo.dynamo_client import DynamoClient

logger = logging.getLogger(__name__)


class DeviceRepository:
    """Repositório de dispositivos no DynamoDB, chaveado por device_id."""

    def __init__(self, dynamo_client: Optional[DynamoClient] = None):
        self.devices_table = settings.DYNAMODB_DEVICES_TABLE
        self.devices_client = dynamo_client or DynamoClient(table_name=self.devices_table)

    async def get_device(self, device_id: str) -> Optional[Device]:
        item = await self.devices_client.get_item({"device_id": device_id})
        if not item:
            logger.info(f"Dispositivo não encontrado: {device_id}")
            return None

        return Device.from_dict(item)

    async def find_device(self, device_id: str, token: str) -> Optional[Device]:
        """Busca o dispositivo cujo device_id e token coincidem com os informados."""
        device = await self.get_device(device_id)
        if device is None or not device.matches_token(token):
            return None
        return device

    async def create_device(self, device: Device) -> Device:
        """Insere o dispositivo; falha com ConditionalWriteError se o device_id já existir."""
        logger.info(f"Salvando dispositivo {device.device_id} na tabela {self.devices_table}")
        await self.devices_client.put_item(device.to_dict(), condition_expression="attribute_not_exists(device_id)")
        return device

    async def list_devices(self) -> List[Device]:
        items = await self.devices_client.scan(limit=settings.DYNAMODB_SCAN_PAGE_SIZE)

        devices = []
        for item in items:
            try:
                devices.append(Device.from_dict(item))
            except KeyError as e:
                logger.warning(f"Item inválido na tabela {self.devices_table}, atributo ausente: {e}")

        logger.info(f"Recuperados {len(devices)} dispositivos da tabela {self.devices_table}")
        return devices
