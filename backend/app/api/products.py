"""
Products API Endpoints
Handles product catalog registration

Author: TM3
Date: 2025-10-03
"""
import logging
from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from app.api.dependencies import get_create_product_service
from app.core.errors import AppError
from app.services.product_service import CreateProductService

logger = logging.getLogger(__name__)

router = APIRouter()


# Request models
class CreateProductRequest(BaseModel):
    name: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0)
    quantity: int = Field(..., ge=0)


@router.post("/")
def create_product(
    request: CreateProductRequest,
    service: CreateProductService = Depends(get_create_product_service)
):
    """
    Add a product to the catalog with its price and initial stock
    """
    try:
        product = service.execute(
            name=request.name,
            price=request.price,
            quantity=request.quantity
        )

        return {
            "status": "success",
            "data": product.to_dict()
        }

    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Error creating product: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error creating product: {str(e)}")
