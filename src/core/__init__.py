"""
Core logic package for Hello Lambda.

Response building, configuration and errors live here.
Lambda handlers in src/handlers/ are thin wrappers that call into core/.
"""

__all__: list[str] = []
