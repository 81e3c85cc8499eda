import logging
from typing import Any, Dict, List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from starlette.concurrency import run_in_threadpool

from src.app.config import settings
from src.shared.domain.exception.gateway_exceptions import ConditionalWriteError, DatastoreError

logger = logging.getLogger(__name__)


def _error_code(error: Exception) -> Optional[str]:
    if isinstance(error, ClientError):
        return error.response.get("Error", {}).get("Code")
    return None


class DynamoClient:
    def __init__(
        self,
        table_name: Optional[str] = None,
        region: Optional[str] = None,
        endpoint_url: Optional[str] = None,
    ):
        self.table_name = table_name or settings.DYNAMODB_DEVICES_TABLE
        self.region = region or settings.AWS_REGION
        self.endpoint_url = endpoint_url or settings.DYNAMODB_ENDPOINT_URL

        resource_kwargs: Dict[str, Any] = {"region_name": self.region}
        if self.endpoint_url:
            resource_kwargs["endpoint_url"] = self.endpoint_url

        self.client = boto3.resource("dynamodb", **resource_kwargs)
        self.table = self.client.Table(self.table_name)
        logger.info(f"Inicializando cliente DynamoDB para tabela {self.table_name}")

    async def put_item(self, item: Dict[str, Any], condition_expression: Optional[str] = None) -> Dict[str, Any]:
        """Insere um item; com condition_expression a escrita só ocorre se a condição for satisfeita."""
        put_kwargs: Dict[str, Any] = {"Item": item}
        if condition_expression:
            put_kwargs["ConditionExpression"] = condition_expression

        try:
            await run_in_threadpool(self.table.put_item, **put_kwargs)
        except (ClientError, BotoCoreError) as e:
            code = _error_code(e)
            if code == "ConditionalCheckFailedException":
                logger.warning(f"Condição de escrita rejeitada na tabela {self.table_name}: {condition_expression}")
                raise ConditionalWriteError("Condição de escrita não satisfeita", code=code) from e
            logger.error(f"Erro ao inserir item no DynamoDB: {e}")
            raise DatastoreError(f"Erro ao inserir item: {e}", code=code) from e

        logger.info(f"Item inserido com sucesso na tabela {self.table_name}")
        return item

    async def get_item(self, key: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Recupera um item pela chave; None quando o item não existe."""
        try:
            response = await run_in_threadpool(self.table.get_item, Key=key)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Erro ao recuperar item do DynamoDB: {e}")
            raise DatastoreError(f"Erro ao recuperar item: {e}", code=_error_code(e)) from e

        return response.get("Item")

    async def scan(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """
        Realiza scan completo da tabela, seguindo a paginação até o fim.

        Args:
            limit: Tamanho de página repassado ao DynamoDB

        Returns:
            Lista com todos os itens da tabela
        """
        scan_kwargs: Dict[str, Any] = {}
        if limit:
            scan_kwargs["Limit"] = limit

        items: List[Dict[str, Any]] = []
        try:
            while True:
                response = await run_in_threadpool(self.table.scan, **scan_kwargs)
                items.extend(response.get("Items", []))

                last_evaluated_key = response.get("LastEvaluatedKey")
                if not last_evaluated_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_evaluated_key
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Erro ao realizar scan no DynamoDB: {e}")
            raise DatastoreError(f"Erro ao realizar scan: {e}", code=_error_code(e)) from e

        logger.info(f"Scan retornou {len(items)} itens da tabela {self.table_name}")
        return items
