import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.app.config import settings
from src.app.logging_config import configure_logging
from src.modules.devices.controller.device_controller import device_router
from src.modules.ingestion.controller.ingestion_controller import ingestion_router
from src.modules.status.controller.status_controller import status_router
from src.shared.domain.exception.gateway_exceptions import GatewayError
from src.shared.domain.models.status_models import ServiceInfoResponse

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Inicializando Device Gateway API")
    logger.info(f"Ambiente: {settings.ENVIRONMENT}")
    logger.info(f"Tabela DynamoDB: {settings.DYNAMODB_DEVICES_TABLE} ({settings.AWS_REGION})")
    if settings.DYNAMODB_ENDPOINT_URL:
        logger.info(f"Endpoint do DynamoDB: {settings.DYNAMODB_ENDPOINT_URL}")
    if not settings.AWS_ACCESS_KEY_ID:
        logger.warning("AWS_ACCESS_KEY_ID não definido, usando a cadeia de credenciais padrão do boto3")
    yield
    logger.info("Encerrando Device Gateway API")


app = FastAPI(
    title="Device Gateway API",
    description="API para registro de dispositivos IoT e ingestão de dados",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs" if not settings.is_production() else None,
    redoc_url="/redoc" if not settings.is_production() else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=settings.CORS_METHODS,
    allow_headers=settings.CORS_HEADERS,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    logger.info(f"Requisição: {request.method} {request.url.path}")

    response = await call_next(request)

    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    logger.info(
        f"Resposta: {request.method} {request.url.path} "
        f"- Status: {response.status_code} "
        f"- Tempo: {process_time:.3f}s"
    )
    return response


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    logger.warning(f"{request.method} {request.url.path} falhou com {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Corpo inválido em {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body."})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Exceção não tratada: {exc}")
    return JSONResponse(status_code=500, content={"error": "Internal server error."})


app.include_router(device_router)
app.include_router(ingestion_router)
app.include_router(status_router)


@app.get("/", response_model=ServiceInfoResponse, tags=["Root"])
async def root():
    return ServiceInfoResponse(
        service="Device Gateway API",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        status="operational",
        endpoints={
            "register_device": "/register-device",
            "upload_data": "/upload-data",
            "list_devices": "/list-devices",
            "health": "/health",
        },
    )


def run():
    import uvicorn

    uvicorn.run(
        "src.app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.DEBUG and settings.is_development(),
    )


if __name__ == "__main__":
    run()
