import logging
import sys
from typing import Optional
from app.core.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

# Decision-engine loggers that follow the service log level
ENGINE_LOGGERS = ("verification", "sampler", "graduation")

def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure console logging for the verifier service.
    
    Args:
        level: Log level override (defaults to settings.log_level)
    """
    level = (level or settings.log_level).upper()
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    
    # Replace handlers so repeated calls do not duplicate output
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)
    
    for name in ENGINE_LOGGERS:
        logging.getLogger(name).setLevel(level)
    
    # Silence noise
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
