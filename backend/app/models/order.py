"""
Order tables: orders and their line items
"""
from sqlalchemy import Column, Integer, DateTime, DECIMAL, ForeignKey, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base


class Order(Base):
    """
    Orders placed by customers
    """
    __tablename__ = "orders"

    id = Column(UUID(as_uuid=False), primary_key=True, server_default=text("gen_random_uuid()"))
    customer_id = Column(UUID(as_uuid=False), ForeignKey("customers.id"), index=True, nullable=False)

    # Metadata
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    customer = relationship("Customer", back_populates="orders")
    order_products = relationship("OrderProduct", back_populates="order", cascade="all, delete-orphan")


class OrderProduct(Base):
    """
    Line items of each order, with the unit price captured at order time
    """
    __tablename__ = "orders_products"

    id = Column(UUID(as_uuid=False), primary_key=True, server_default=text("gen_random_uuid()"))
    order_id = Column(UUID(as_uuid=False), ForeignKey("orders.id", ondelete="CASCADE"), index=True, nullable=False)
    product_id = Column(UUID(as_uuid=False), ForeignKey("products.id"), index=True, nullable=False)

    position = Column(Integer, nullable=False, default=0)  # line order within the order
    quantity = Column(Integer, nullable=False)
    price = Column(DECIMAL(12, 2), nullable=False)

    # Metadata
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    order = relationship("Order", back_populates="order_products")
    product = relationship("Product", back_populates="order_products")
