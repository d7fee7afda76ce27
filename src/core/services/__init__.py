"""
Services for Hello Lambda.

- greeting.py: builds the fixed greeting response
"""

__all__: list[str] = []
