"""
Customer Domain Model

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime


class Customer(BaseModel):
    """
    Customer domain model

    The order workflow only needs the id to resolve; name and email are
    kept for display and for the uniqueness check on registration.
    """

    id: str = Field(..., description="Customer ID (UUID)")
    name: str = Field(..., description="Customer name")
    email: str = Field(..., description="Customer email (unique)")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        data = self.model_dump()
        for field in ['created_at', 'updated_at']:
            if isinstance(data.get(field), datetime):
                data[field] = data[field].isoformat()
        return data
