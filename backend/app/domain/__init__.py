"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities.
These models enforce type safety and validation across the application.

Author: TM3
Date: 2025-10-17
"""
from app.domain.customer import Customer
from app.domain.product import Product
from app.domain.order import Order, OrderProduct, OrderProductRequest

__all__ = ['Customer', 'Product', 'Order', 'OrderProduct', 'OrderProductRequest']
