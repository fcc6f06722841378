"""
Product data models and schemas
"""

from datetime import datetime
from typing import Optional, Dict, Any

from pydantic import BaseModel, ConfigDict, Field


# Response messages for mutation endpoints
PRODUCT_UPDATED = "Product updated successfully"
PRODUCT_DELETED = "Product deleted successfully"
PRODUCT_NOT_FOUND = "Product not found"

# Keys owned by the service; never taken from a client payload
RESERVED_KEYS = ("id", "createdAt", "updatedAt", "created_at", "updated_at")


# Base product model
class ProductBase(BaseModel):
    """Base product model with common fields"""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: Optional[str] = Field(None, description="Product display name")
    category: Optional[str] = Field(None, description="Category used as a filter key")
    supplier_id: Optional[str] = Field(None, alias="supplierId", description="Supplier used as a filter key")
    quantity: int = Field(default=0, ge=0, description="Units on hand")
    minimum_stock: int = Field(default=0, ge=0, alias="minimumStock", description="Reorder threshold")
    price: Optional[float] = Field(None, ge=0, description="Unit price")

    def attributes(self) -> Dict[str, Any]:
        """Opaque business attributes not covered by a declared field"""
        extra = dict(self.model_extra or {})
        # a field sent under both its name and alias keeps only the alias value
        for name, field in type(self).model_fields.items():
            extra.pop(name, None)
            if field.alias:
                extra.pop(field.alias, None)
        for key in RESERVED_KEYS:
            extra.pop(key, None)
        return extra

    def in_shortage(self) -> bool:
        """A product is short when stock is at or below its reorder threshold"""
        return self.quantity <= self.minimum_stock


# Create/update schema (for API requests)
class ProductPayload(ProductBase):
    """Schema for creating or fully replacing a product; never carries an id"""


# Full product model (storage and response representation)
class Product(ProductBase):
    """Full product model with identity and timestamps"""
    id: str = Field(..., min_length=1, description="Unique product ID assigned on creation")
    created_at: Optional[datetime] = Field(None, alias="createdAt", description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt", description="Last update timestamp")

    @classmethod
    def from_payload(cls, product_id: str, payload: ProductPayload, created_at: datetime,
                     updated_at: datetime) -> "Product":
        """Build a stored product from a request payload"""
        return cls(
            id=product_id,
            name=payload.name,
            category=payload.category,
            supplier_id=payload.supplier_id,
            quantity=payload.quantity,
            minimum_stock=payload.minimum_stock,
            price=payload.price,
            created_at=created_at,
            updated_at=updated_at,
            **payload.attributes()
        )


# Result records replacing the untyped response maps
class CreateResult(BaseModel):
    """Schema for the create response"""
    id: str = Field(..., description="Identifier assigned by the service")


class MutationResult(BaseModel):
    """Outcome of an update or delete addressed by id"""
    found: bool


class MessageResponse(BaseModel):
    """Schema for update/delete responses"""
    message: str = Field(..., description="Outcome message")

    @classmethod
    def for_update(cls, result: MutationResult) -> "MessageResponse":
        return cls(message=PRODUCT_UPDATED if result.found else PRODUCT_NOT_FOUND)

    @classmethod
    def for_delete(cls, result: MutationResult) -> "MessageResponse":
        return cls(message=PRODUCT_DELETED if result.found else PRODUCT_NOT_FOUND)
