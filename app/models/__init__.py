from .store import Product, Section, Store

__all__ = ["Store", "Section", "Product"]
