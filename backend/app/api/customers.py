"""
Customers API Endpoints
"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from app.api.dependencies import get_create_customer_service
from app.core.errors import AppError
from app.services.customer_service import CreateCustomerService

logger = logging.getLogger(__name__)

router = APIRouter()


class CreateCustomerRequest(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)


@router.post("/")
def create_customer(
    request: CreateCustomerRequest,
    service: CreateCustomerService = Depends(get_create_customer_service)
):
    """Register a customer"""
    try:
        customer = service.execute(name=request.name, email=request.email)

        return {
            "status": "success",
            "data": customer.to_dict()
        }

    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Error creating customer: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error creating customer: {str(e)}")
