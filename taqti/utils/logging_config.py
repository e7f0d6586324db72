import logging
from typing import Optional


def configure_logging(level=logging.INFO, suppress_http=True,
                      log_format: Optional[str] = None, log_file: Optional[str] = None):
    """
    Configure logging for the Taqti analyzer.

    Args:
        level: Logging level name or number (default: INFO)
        suppress_http: Whether to suppress HTTP request logs (default: True)
        log_format: Record format (default: time, level, message)
        log_file: Also write records to this file
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    # Basic logging configuration
    logging.basicConfig(
        level=level,
        format=log_format or '%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=handlers
    )

    if suppress_http:
        # Suppress HTTP request logs from the enrichment client
        for logger_name in ("requests", "urllib3", "urllib3.connectionpool"):
            logging.getLogger(logger_name).setLevel(logging.WARNING)

    # Set root logger level
    logging.getLogger().setLevel(level)

    return logging.getLogger(__name__)
