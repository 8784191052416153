from .store import (
    ProductCreate,
    ProductDTO,
    ProductUpdate,
    SectionCreate,
    SectionDTO,
    StoreCreate,
    StoreDTO,
)

__all__ = [
    "StoreCreate",
    "StoreDTO",
    "SectionCreate",
    "SectionDTO",
    "ProductCreate",
    "ProductUpdate",
    "ProductDTO",
]
