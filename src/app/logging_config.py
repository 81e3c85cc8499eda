import logging
import sys

_logging_configured = False


def configure_logging(log_level: str = "INFO"):
    global _logging_configured

    if _logging_configured:
        return

    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # uvicorn e o runtime do Lambda já instalam handlers próprios
    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        formatter = logging.Formatter(
            "[%(levelname)s] %(asctime)s %(name)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    # botocore é muito verboso em DEBUG
    logging.getLogger("botocore").setLevel(max(level, logging.INFO))

    _logging_configured = True
