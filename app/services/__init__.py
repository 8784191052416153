"""
Services Layer

Business logic for stores, sections and products.
"""

__all__ = []
