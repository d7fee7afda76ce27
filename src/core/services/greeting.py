"""Greeting service."""

from core.models.response import ResponseEnvelope

GREETING = "Hello from Lambda!"


def build_greeting() -> ResponseEnvelope:
    """Build a fresh 200 envelope whose body is the JSON-encoded greeting."""
    return ResponseEnvelope.from_payload(GREETING)
