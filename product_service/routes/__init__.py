"""
API routes for product service
"""

from . import health, products

__all__ = ["health", "products"]
