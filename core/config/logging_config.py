#!/usr/bin/env python3
"""Logging configuration

Level defaults to DEBUG in development and INFO elsewhere; LOG_LEVEL wins.
"""
import logging
import os
from dataclasses import dataclass

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _default_level(environment: str) -> str:
    return "DEBUG" if environment in ("development", "dev") else "INFO"


@dataclass
class LoggingConfig:
    """Handler and level settings shared by every service logger"""
    log_level: str = "INFO"
    log_format: str = DEFAULT_FORMAT
    log_file: str = ""
    enable_console: bool = True

    service_name: str = "commerce"
    environment: str = "development"

    @property
    def numeric_level(self) -> int:
        """Level as a logging constant; unknown names fall back to INFO"""
        return getattr(logging, self.log_level.upper(), logging.INFO)

    @classmethod
    def from_env(cls, service_name: str = "commerce") -> 'LoggingConfig':
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        return cls(
            log_level=os.getenv("LOG_LEVEL", _default_level(env)),
            log_format=os.getenv("LOG_FORMAT", DEFAULT_FORMAT),
            log_file=os.getenv("LOG_FILE", ""),
            enable_console=os.getenv("LOG_CONSOLE", "true").lower() == "true",
            service_name=os.getenv("SERVICE_NAME", service_name),
            environment=env,
        )
