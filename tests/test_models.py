"""
Tests for product models
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from product_service.models.product import (
    Product, ProductPayload, MutationResult, MessageResponse,
    PRODUCT_UPDATED, PRODUCT_DELETED, PRODUCT_NOT_FOUND
)


class TestProductPayload:
    """Test ProductPayload validation"""

    def test_accepts_camel_case_keys(self):
        payload = ProductPayload.model_validate({"supplierId": "S1", "minimumStock": 4})
        assert payload.supplier_id == "S1"
        assert payload.minimum_stock == 4

    def test_keeps_filter_keys_verbatim(self):
        payload = ProductPayload(category="  tools ", supplier_id=" S1")
        assert payload.category == "  tools "
        assert payload.supplier_id == " S1"

    def test_accepts_long_names(self):
        assert ProductPayload(name="x" * 500).name == "x" * 500

    def test_attributes_exclude_declared_field_keys(self):
        payload = ProductPayload.model_validate({
            "supplierId": "S1", "supplier_id": "S2",
            "minimumStock": 1, "minimum_stock": 2, "unit": "box"
        })
        assert payload.supplier_id == "S1"
        assert payload.minimum_stock == 1
        assert payload.attributes() == {"unit": "box"}

    def test_rejects_negative_stock(self):
        with pytest.raises(ValidationError):
            ProductPayload(quantity=-1)

    def test_attributes_exclude_service_owned_keys(self):
        payload = ProductPayload.model_validate({
            "id": "P1", "createdAt": "2025-01-01T00:00:00", "unit": "box"
        })
        assert payload.attributes() == {"unit": "box"}


class TestProduct:
    """Test the stored Product model"""

    def test_shortage_rule(self):
        assert Product(id="P1", quantity=0).in_shortage()
        assert Product(id="P1", quantity=5, minimum_stock=5).in_shortage()
        assert not Product(id="P1", quantity=6, minimum_stock=5).in_shortage()

    def test_from_payload_inlines_attributes(self):
        now = datetime(2025, 1, 1)
        payload = ProductPayload.model_validate({"category": "tools", "unit": "box"})

        product = Product.from_payload("P1", payload, created_at=now, updated_at=now)

        assert product.id == "P1"
        assert product.model_dump(mode="json", by_alias=True) == {
            "id": "P1",
            "name": None,
            "category": "tools",
            "supplierId": None,
            "quantity": 0,
            "minimumStock": 0,
            "price": None,
            "createdAt": "2025-01-01T00:00:00",
            "updatedAt": "2025-01-01T00:00:00",
            "unit": "box"
        }

    def test_requires_id(self):
        with pytest.raises(ValidationError):
            Product(id="")


class TestMessageResponse:
    """Test mutation outcome messages"""

    def test_update_messages(self):
        assert MessageResponse.for_update(MutationResult(found=True)).message == PRODUCT_UPDATED
        assert MessageResponse.for_update(MutationResult(found=False)).message == PRODUCT_NOT_FOUND

    def test_delete_messages(self):
        assert MessageResponse.for_delete(MutationResult(found=True)).message == PRODUCT_DELETED
        assert MessageResponse.for_delete(MutationResult(found=False)).message == PRODUCT_NOT_FOUND
