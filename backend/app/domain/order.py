"""
Order Domain Models

Represents order-related entities.
These are the single source of truth for order data structure.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List
from datetime import datetime
from decimal import Decimal

from app.domain.customer import Customer


class OrderProductRequest(BaseModel):
    """
    A requested order line: product id and desired quantity

    The quantity is not range-checked here; the HTTP request schema
    enforces quantity > 0 before a request reaches the services.
    """

    id: str = Field(..., description="Product ID")
    quantity: int = Field(..., description="Requested quantity")


class OrderProduct(BaseModel):
    """
    Order line item - one product/quantity/price record of an order

    Fields:
        id: Line item ID (set once persisted)
        order_id: Parent order ID (set once persisted)
        product_id: Reference to product catalog
        quantity: Number of units ordered
        price: Catalog unit price captured when the order was placed
    """

    id: Optional[str] = Field(None, description="Line item ID")
    order_id: Optional[str] = Field(None, description="Parent order ID")
    product_id: str = Field(..., description="Product catalog ID")
    quantity: int = Field(..., description="Quantity ordered")
    price: Decimal = Field(..., description="Unit price at order time", ge=0)
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    @property
    def total(self) -> Decimal:
        """Line total (quantity * unit price)"""
        return self.price * self.quantity

    def to_dict(self) -> dict:
        """Convert to dictionary with Decimal to float conversion"""
        data = self.model_dump()
        data['price'] = float(data['price'])
        data['total'] = float(self.total)

        for field in ['created_at', 'updated_at']:
            if isinstance(data.get(field), datetime):
                data[field] = data[field].isoformat()

        return data


class Order(BaseModel):
    """
    Order domain model - aggregate root for a customer order

    Fields:
        id: Order ID (generated by the store)
        customer: Customer who placed the order
        order_products: Line items, created together with the order
        created_at: When order was created
        updated_at: When order was last updated
    """

    id: str = Field(..., description="Order ID")
    customer: Customer = Field(..., description="Customer who placed the order")
    order_products: List[OrderProduct] = Field(default_factory=list, description="Order line items")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    # Computed properties
    @property
    def item_count(self) -> int:
        """Number of line items in order"""
        return len(self.order_products)

    @property
    def total_quantity(self) -> int:
        """Total quantity of all line items"""
        return sum(item.quantity for item in self.order_products)

    @property
    def total(self) -> Decimal:
        """Order total from the captured line prices"""
        return sum((item.total for item in self.order_products), Decimal('0'))

    def to_dict(self) -> dict:
        """
        Convert to dictionary with computed fields

        Returns dict with all fields plus computed properties
        """
        data = {
            'id': self.id,
            'customer': self.customer.to_dict(),
            'order_products': [item.to_dict() for item in self.order_products],
            'created_at': self.created_at.isoformat(),
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }

        # Add computed properties
        data['item_count'] = self.item_count
        data['total_quantity'] = self.total_quantity
        data['total'] = float(self.total)

        return data
