import logging

from mangum import Mangum

from .main import app

logger = logging.getLogger(__name__)

handler = Mangum(app, lifespan="off")


def lambda_handler(event, context):
    request_context = event.get("requestContext", {})
    logger.info(
        f"Evento recebido: {event.get('httpMethod') or request_context.get('http', {}).get('method')} "
        f"{event.get('rawPath') or event.get('path')}"
    )
    return handler(event, context)
