import logging
from typing import Optional

from fastapi import APIRouter, Depends, status

from src.modules.devices.controller.dependencies import get_query_usecase, get_registration_usecase
from src.modules.devices.usecase.device_query_usecase import DeviceQueryUseCase
from src.modules.devices.usecase.device_registration_usecase import DeviceRegistrationUseCase
from src.shared.domain.models.device_models import (
    DeviceListResponse,
    DeviceRecord,
    DeviceRegistrationRequest,
    DeviceRegistrationResponse,
    ErrorResponse,
)

logger = logging.getLogger(__name__)

device_router = APIRouter(tags=["Devices"])


@device_router.post(
    "/register-device",
    response_model=DeviceRegistrationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Registrar novo dispositivo",
)
async def register_device(
    request: Optional[DeviceRegistrationRequest] = None,
    registration_usecase: DeviceRegistrationUseCase = Depends(get_registration_usecase),
):
    """Registra o dispositivo e devolve o token, que só é exibido nesta resposta."""
    device_id = request.device_id if request else None
    device = await registration_usecase.register_device(device_id)

    return DeviceRegistrationResponse(
        message="Device registered successfully.",
        device_id=device.device_id,
        token=device.token,
    )


@device_router.get(
    "/list-devices",
    response_model=DeviceListResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Listar todos os dispositivos",
)
async def list_devices(query_usecase: DeviceQueryUseCase = Depends(get_query_usecase)):
    devices = await query_usecase.list_devices()
    logger.info(f"Listando {len(devices)} dispositivos")

    return DeviceListResponse(devices=[DeviceRecord(**device.to_dict()) for device in devices])
