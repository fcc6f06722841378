"""
Product management routes
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response
import structlog

from product_service.models.product import (
    Product, ProductPayload, CreateResult, MutationResult, MessageResponse
)
from product_service.services.product_service import ProductManager

logger = structlog.get_logger(__name__)

router = APIRouter()


def get_product_service(request: Request) -> ProductManager:
    """Dependency to get the product service instance"""
    return request.app.state.product_service


@router.post("", response_model=CreateResult, include_in_schema=False)
@router.post("/", response_model=CreateResult)
async def create_product(
    product: ProductPayload,
    service: ProductManager = Depends(get_product_service)
):
    """Create a new product; the id is assigned by the service"""
    logger.info("Creating product", category=product.category, supplier_id=product.supplier_id)
    product_id = await service.create(product)
    return CreateResult(id=product_id)


@router.get("", response_model=List[Product], include_in_schema=False)
@router.get("/", response_model=List[Product])
async def list_products(service: ProductManager = Depends(get_product_service)):
    """List every product"""
    logger.info("Listing products")
    return await service.list_all()


@router.get("/category/{category}", response_model=List[Product])
async def list_products_by_category(
    category: str,
    service: ProductManager = Depends(get_product_service)
):
    """List products in a category"""
    logger.info("Listing products by category", category=category)
    return await service.list_by_category(category)


@router.get("/supplier/{supplier_id}", response_model=List[Product])
async def list_products_by_supplier(
    supplier_id: str,
    service: ProductManager = Depends(get_product_service)
):
    """List products from a supplier"""
    logger.info("Listing products by supplier", supplier_id=supplier_id)
    return await service.list_by_supplier(supplier_id)


@router.get("/shortage", response_model=List[Product])
async def list_products_in_shortage(service: ProductManager = Depends(get_product_service)):
    """List products whose stock is at or below the reorder threshold"""
    logger.info("Listing products in shortage")
    return await service.list_shortage()


@router.get("/{product_id}", response_model=Optional[Product])
async def get_product(
    product_id: str,
    service: ProductManager = Depends(get_product_service)
):
    """Get product details; an unknown id yields an empty body"""
    product = await service.get_by_id(product_id)
    if product is None:
        logger.info("Product not found", product_id=product_id)
        return Response(status_code=200)
    return product


@router.put("/{product_id}", response_model=MessageResponse)
async def update_product(
    product_id: str,
    product: ProductPayload,
    service: ProductManager = Depends(get_product_service)
):
    """Replace a product; a miss is reported in the message"""
    updated = await service.update(product_id, product)
    logger.info("Product update handled", product_id=product_id, found=updated)
    return MessageResponse.for_update(MutationResult(found=updated))


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: str,
    service: ProductManager = Depends(get_product_service)
):
    """Delete a product; a miss is reported in the message"""
    deleted = await service.delete(product_id)
    logger.info("Product delete handled", product_id=product_id, found=deleted)
    return MessageResponse.for_delete(MutationResult(found=deleted))
