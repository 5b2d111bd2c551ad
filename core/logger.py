#!/usr/bin/env python3
"""
Service logger setup

    from core.logger import setup_service_logger
    logger = setup_service_logger("inventory_service", level="INFO")
"""
import logging
from pathlib import Path
from typing import Optional

from .config import LoggingConfig

_root_configured = False


def setup_service_logger(service_name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Configure logging for a microservice and return its named logger.

    The root logger receives a console handler (and a file handler when
    LOG_FILE is set) so module loggers created with logging.getLogger(__name__)
    share the same output. Calling it twice does not duplicate handlers.

    Args:
        service_name: Logger name, usually the service package name
        level: Log level name; falls back to LOG_LEVEL

    Returns:
        The service logger
    """
    global _root_configured

    log_config = LoggingConfig.from_env(service_name)
    if level:
        log_config.log_level = level
    numeric_level = log_config.numeric_level

    root = logging.getLogger()
    root.setLevel(numeric_level)

    if not _root_configured:
        formatter = logging.Formatter(log_config.log_format)

        if log_config.enable_console:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            root.addHandler(console_handler)

        if log_config.log_file:
            log_path = Path(log_config.log_file).resolve()
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

        _root_configured = True

    service_logger = logging.getLogger(service_name)
    service_logger.setLevel(numeric_level)
    return service_logger
