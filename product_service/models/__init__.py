"""
Data models for product service
"""

from .product import (
    Product, ProductPayload, CreateResult, MutationResult, MessageResponse,
    PRODUCT_UPDATED, PRODUCT_DELETED, PRODUCT_NOT_FOUND
)

__all__ = [
    "Product",
    "ProductPayload",
    "CreateResult",
    "MutationResult",
    "MessageResponse",
    "PRODUCT_UPDATED",
    "PRODUCT_DELETED",
    "PRODUCT_NOT_FOUND"
]
