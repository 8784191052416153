"""
Core Services Module

Provides the CRUD services for stores, sections and products.
Every method takes the SQLAlchemy session as its transaction context.
"""

from .product_service import ProductService, product_service
from .section_service import SectionService, section_service
from .store_service import StoreService, store_service

__all__ = [
    "StoreService",
    "SectionService",
    "ProductService",
    "store_service",
    "section_service",
    "product_service",
]
