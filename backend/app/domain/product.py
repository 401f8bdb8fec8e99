"""
Product Domain Model

Represents a product entity in the catalog.
This is the single source of truth for product data structure.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime
from decimal import Decimal


class Product(BaseModel):
    """
    Product domain model - represents a product in our catalog

    Fields:
        id: Internal product ID (UUID, primary key)
        name: Product name (unique)
        price: Current catalog price
        quantity: Current stock level
        created_at: When product was created
        updated_at: When product was last updated
    """

    id: str = Field(..., description="Internal product ID")
    name: str = Field(..., description="Product name")
    price: Decimal = Field(..., description="Catalog price", ge=0)
    quantity: int = Field(..., description="Current stock level", ge=0)
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    # Pydantic v2 configuration
    model_config = ConfigDict(from_attributes=True)

    # Computed properties
    @property
    def is_out_of_stock(self) -> bool:
        """Check if product has no stock"""
        return self.quantity <= 0

    def has_stock_for(self, requested: int) -> bool:
        """Check if current stock covers the requested quantity"""
        return self.quantity >= requested

    def to_dict(self) -> dict:
        """Convert to dictionary with Decimal to float conversion"""
        data = self.model_dump()
        data['price'] = float(data['price'])
        data['is_out_of_stock'] = self.is_out_of_stock

        for field in ['created_at', 'updated_at']:
            if isinstance(data.get(field), datetime):
                data[field] = data[field].isoformat()

        return data
