import logging
import sys
from pythonjsonlogger import jsonlogger

from core.environment import get_log_level, is_json_logging


def setup_logging():
    """
    Configures centralized logging on stdout.
    JSON lines by default so container log collectors can extract fields;
    plain text when LOG_JSON is disabled.
    """
    # 1. Get the root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(get_log_level())

    # 2. Prevent duplicate logs by removing existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # 3. Create StreamHandler for stdout
    log_handler = logging.StreamHandler(sys.stdout)

    # 4. Define format
    if is_json_logging():
        formatter = jsonlogger.JsonFormatter(
            fmt='%(asctime)s %(levelname)s %(name)s %(message)s',
            datefmt='%Y-%m-%dT%H:%M:%SZ'
        )
    else:
        formatter = logging.Formatter('%(asctime)s | %(levelname)s | %(name)s | %(message)s')
    log_handler.setFormatter(formatter)
    root_logger.addHandler(log_handler)

    # 5. Noise reduction (WARNING) for transport layers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    root_logger.info("Logging infrastructure initialized successfully.")
