"""
Pydantic models for Hello Lambda.
"""

from core.models.response import ResponseEnvelope

__all__ = ["ResponseEnvelope"]
