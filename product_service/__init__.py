"""
Product Service - product catalog CRUD API
"""

__version__ = "1.0.0"
