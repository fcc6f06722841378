"""
Business logic services for product service
"""

from .product_service import ProductService, ProductManager, build_store

__all__ = ["ProductService", "ProductManager", "build_store"]
