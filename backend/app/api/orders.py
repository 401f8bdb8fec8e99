"""
Orders API Endpoints
Handles order placement and lookup

Author: TM3
Date: 2025-10-03
Updated: 2025-10-17 (refactor: delegate to CreateOrderService / FindOrderService)
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from app.api.dependencies import get_create_order_service, get_find_order_service
from app.core.errors import AppError
from app.domain.order import OrderProductRequest
from app.services.create_order_service import CreateOrderService
from app.services.find_order_service import FindOrderService

logger = logging.getLogger(__name__)

router = APIRouter()


# Request models
class OrderProductIn(BaseModel):
    id: str = Field(..., min_length=1, description="Product ID")
    quantity: int = Field(..., gt=0, description="Requested quantity")


class CreateOrderRequest(BaseModel):
    customer_id: str = Field(..., min_length=1, description="Customer ID")
    products: List[OrderProductIn] = Field(..., min_length=1, description="Requested products")


@router.post("/")
def create_order(
    request: CreateOrderRequest,
    service: CreateOrderService = Depends(get_create_order_service)
):
    """
    Place a new order

    Validates customer, products and stock, stores the order with the
    current catalog prices and decrements stock.
    """
    try:
        order = service.execute(
            customer_id=request.customer_id,
            products=[OrderProductRequest(id=p.id, quantity=p.quantity) for p in request.products]
        )

        return {
            "status": "success",
            "data": order.to_dict()
        }

    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Error creating order for customer {request.customer_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error creating order: {str(e)}")


@router.get("/{order_id}")
def get_order(
    order_id: str,
    service: FindOrderService = Depends(get_find_order_service)
):
    """
    Get a single order with its customer and line items
    """
    try:
        order = service.execute(order_id)

        return {
            "status": "success",
            "data": order.to_dict()
        }

    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Error fetching order {order_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error fetching order: {str(e)}")
