"""
Order Repository - Data Access Layer for Orders

Handles all database queries for orders and returns Order domain models.

Author: TM3
Date: 2025-10-17
"""
from typing import List, Optional
import logging

from app.domain.customer import Customer
from app.domain.order import Order, OrderProduct
from app.core.database import get_db_connection_dict
from app.repositories.interfaces import IOrdersRepository

logger = logging.getLogger(__name__)


class OrderRepository(IOrdersRepository):
    """
    Repository for Order data access

    All SQL queries for orders are centralized here.
    Returns Order domain models with their customer and line items.
    """

    def create(self, customer: Customer, order_products: List[OrderProduct]) -> Order:
        """
        Insert an order and all of its line items in a single transaction

        Nothing is committed unless every insert succeeds.

        Args:
            customer: Customer placing the order
            order_products: Line items with their captured unit price

        Returns:
            Order with generated id, timestamps and stored line items
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                INSERT INTO orders (customer_id)
                VALUES (%s)
                RETURNING id::text AS id, created_at, updated_at
            """, (customer.id,))

            order_row = cursor.fetchone()
            order_id = order_row['id']

            stored_items = []
            for position, item in enumerate(order_products):
                cursor.execute("""
                    INSERT INTO orders_products (order_id, product_id, position, quantity, price)
                    VALUES (%s, %s, %s, %s, %s)
                    RETURNING id::text AS id, created_at, updated_at
                """, (order_id, item.product_id, position, item.quantity, item.price))

                item_row = cursor.fetchone()
                stored_items.append(item.model_copy(update={
                    'id': item_row['id'],
                    'order_id': order_id,
                    'created_at': item_row['created_at'],
                    'updated_at': item_row['updated_at'],
                }))

            conn.commit()
            logger.info(f"[Order: {order_id}] Stored with {len(stored_items)} line items")

            return Order(
                id=order_id,
                customer=customer,
                order_products=stored_items,
                created_at=order_row['created_at'],
                updated_at=order_row['updated_at']
            )

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def find_by_id(self, order_id: str) -> Optional[Order]:
        """
        Find order by ID with customer and line items

        Args:
            order_id: Order UUID

        Returns:
            Order with all related data or None if not found
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            # Get order with customer info
            cursor.execute("""
                SELECT
                    o.id::text AS id, o.created_at, o.updated_at,
                    c.id::text AS customer_id,
                    c.name AS customer_name,
                    c.email AS customer_email,
                    c.created_at AS customer_created_at,
                    c.updated_at AS customer_updated_at
                FROM orders o
                JOIN customers c ON o.customer_id = c.id
                WHERE o.id::text = %s
            """, (order_id,))

            row = cursor.fetchone()
            if not row:
                return None

            # Get line items in the order they were placed
            cursor.execute("""
                SELECT
                    op.id::text AS id, op.order_id::text AS order_id,
                    op.product_id::text AS product_id,
                    op.quantity, op.price, op.created_at, op.updated_at
                FROM orders_products op
                WHERE op.order_id::text = %s
                ORDER BY op.position
            """, (order_id,))

            items = cursor.fetchall()

            customer = Customer(
                id=row['customer_id'],
                name=row['customer_name'],
                email=row['customer_email'],
                created_at=row['customer_created_at'],
                updated_at=row['customer_updated_at']
            )

            return Order(
                id=row['id'],
                customer=customer,
                order_products=[OrderProduct(**item) for item in items],
                created_at=row['created_at'],
                updated_at=row['updated_at']
            )

        finally:
            cursor.close()
            conn.close()
