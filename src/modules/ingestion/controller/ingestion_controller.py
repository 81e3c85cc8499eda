import json
import logging
from typing import Optional

import pydantic
from fastapi import APIRouter, Depends, Request

from src.modules.devices.controller.dependencies import require_device_auth
from src.modules.ingestion.usecase.data_upload_usecase import DataUploadUseCase
from src.shared.domain.entities.device import Device
from src.shared.domain.exception.gateway_exceptions import ValidationError
from src.shared.domain.models.device_models import DataUploadRequest, ErrorResponse, MessageResponse

logger = logging.getLogger(__name__)

ingestion_router = APIRouter(tags=["Data Ingestion"])


def get_data_upload_usecase():
    return DataUploadUseCase()


async def read_upload_request(request: Request) -> Optional[DataUploadRequest]:
    """
    Lê o corpo da requisição de upload.

    O corpo é lido só depois da autenticação, para que uma requisição sem
    credenciais receba 401 mesmo com JSON malformado. Corpo vazio retorna None.
    """
    body = await request.body()
    if not body:
        return None

    try:
        return DataUploadRequest.model_validate(json.loads(body))
    except (ValueError, pydantic.ValidationError) as e:
        logger.warning(f"Corpo inválido em {request.method} {request.url.path}: {e}")
        raise ValidationError("Invalid request body.") from e


@ingestion_router.post(
    "/upload-data",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
    summary="Enviar dados do dispositivo",
    openapi_extra={
        "requestBody": {
            "required": False,
            "content": {"application/json": {"schema": DataUploadRequest.model_json_schema()}},
        }
    },
)
async def upload_data(
    request: Request,
    device: Device = Depends(require_device_auth),
    data_upload_usecase: DataUploadUseCase = Depends(get_data_upload_usecase),
):
    upload_request = await read_upload_request(request)
    await data_upload_usecase.upload(device, upload_request.data if upload_request else None)
    return MessageResponse(message="Data uploaded successfully.")
