from typing import Dict

from pydantic import BaseModel


class HealthCheckResponse(BaseModel):
    message: str


class ServiceInfoResponse(BaseModel):
    service: str
    version: str
    environment: str
    status: str
    endpoints: Dict[str, str]
