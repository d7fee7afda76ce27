import logging
from os import environ

from pydantic import BaseModel, ConfigDict

from core.errors import ConfigurationError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    environment: str
    function_name: str
    log_level: str = "INFO"


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config. For testing only."""
    global _cached_config
    _cached_config = None


def _resolve_log_level() -> str:
    level = environ.get("LOG_LEVEL", "INFO").strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(f"LOG_LEVEL={level!r} is not one of {', '.join(LOG_LEVELS)}")
    return level


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    # A bad LOG_LEVEL must not take the function down; fall back to INFO.
    try:
        log_level = _resolve_log_level()
    except ConfigurationError as err:
        logger.warning("%s; using INFO", err.message)
        log_level = "INFO"

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        environment=environ.get("ENVIRONMENT", "local"),
        function_name=environ.get("AWS_LAMBDA_FUNCTION_NAME", "hello-lambda"),
        log_level=log_level,
    )
    return _cached_config
