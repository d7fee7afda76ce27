"""Greeting handler: returns a fixed 200 response for any event."""

import logging
from typing import Any

from core.config import get_config
from core.services.greeting import build_greeting

logging.getLogger().setLevel(get_config().log_level)

logger = logging.getLogger(__name__)


def handler(event: Any, context: object | None = None) -> dict[str, Any]:
    """Return the greeting envelope.

    The event is never inspected; ``None`` is as good as an API Gateway payload.
    """
    config = get_config()
    logger.info("Greeting requested: function=%s environment=%s", config.function_name, config.environment)

    return build_greeting().to_lambda()


async def async_handler(event: Any, context: object | None = None) -> dict[str, Any]:
    """Awaitable variant of ``handler`` with the same result."""
    return handler(event, context)
