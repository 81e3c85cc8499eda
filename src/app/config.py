import logging
import os
from typing import Any, Dict, Optional


class Settings:
    """Configurações do gateway de dispositivos, lidas de variáveis de ambiente."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self.ENVIRONMENT = os.getenv("ENVIRONMENT", "dev")
        self.DEBUG = os.getenv("DEBUG", "False").lower() == "true"
        self.APP_NAME = "device-gateway"
        self.APP_VERSION = "1.0.0"

        # Servidor HTTP
        self.HOST = os.getenv("HOST", "0.0.0.0")
        self.PORT = int(os.getenv("PORT", "3000"))

        # Datastore (DynamoDB)
        self.AWS_REGION = os.getenv("AWS_REGION", "us-east-1")
        self.DYNAMODB_ENDPOINT_URL: Optional[str] = os.getenv("DYNAMODB_ENDPOINT_URL") or None
        self.AWS_ACCESS_KEY_ID: Optional[str] = os.getenv("AWS_ACCESS_KEY_ID") or None

        self.resource_prefix = f"{self.APP_NAME}-{self.ENVIRONMENT}"
        self.DYNAMODB_DEVICES_TABLE = os.getenv("DYNAMODB_DEVICES_TABLE", f"{self.resource_prefix}-devices")
        self.DYNAMODB_SCAN_PAGE_SIZE = int(os.getenv("DYNAMODB_SCAN_PAGE_SIZE", "100"))

        # CORS
        self.CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")
        self.CORS_METHODS = ["GET", "POST", "OPTIONS"]
        self.CORS_HEADERS = ["*"]

        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    def load_dotenv(self, env_file: str = ".env") -> None:
        """
        Carrega variáveis de ambiente de um arquivo .env se disponível.

        Variáveis já definidas no ambiente não são sobrescritas.

        Args:
            env_file: Caminho para o arquivo .env
        """
        if not os.path.exists(env_file):
            return

        try:
            with open(env_file, "r", encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if not line or line.startswith("#"):
                        continue
                    if "=" in line:
                        key, value = line.split("=", 1)
                        key = key.strip()
                        value = value.strip().strip('"').strip("'")
                        if key and not os.getenv(key):
                            os.environ[key] = value
        except OSError as e:
            self.logger.error(f"Erro ao carregar arquivo .env: {e}")
            return

        self.__init__()
        self.logger.info(f"Variáveis de ambiente carregadas de {env_file}")

    def get_datastore_config(self) -> Dict[str, Any]:
        return {
            "table_name": self.DYNAMODB_DEVICES_TABLE,
            "region": self.AWS_REGION,
            "endpoint_url": self.DYNAMODB_ENDPOINT_URL,
        }

    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() in ["prod", "production"]

    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() in ["dev", "development", "local"]


settings = Settings()
settings.load_dotenv()
