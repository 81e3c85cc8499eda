from fastapi import APIRouter

from src.shared.domain.models.status_models import HealthCheckResponse

status_router = APIRouter(tags=["System Status"])


@status_router.get("/health", response_model=HealthCheckResponse)
async def health_check():
    # não consulta o datastore: responde mesmo com o DynamoDB indisponível
    return HealthCheckResponse(message="Server is up and running.")
