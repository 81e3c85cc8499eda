from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class DeviceRegistrationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    device_id: Optional[str] = Field(None, alias="deviceId")


class DeviceRegistrationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    device_id: str = Field(..., alias="deviceId")
    token: str = Field(..., min_length=32, max_length=32)


class DeviceRecord(BaseModel):
    device_id: str
    token: str


class DeviceListResponse(BaseModel):
    devices: List[DeviceRecord] = []


class DataUploadRequest(BaseModel):
    data: Any = None


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
