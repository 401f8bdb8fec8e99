"""
Product Repository - Data Access Layer for Products

Handles all database queries for the product catalog and returns Product
domain models.

Author: TM3
Date: 2025-10-17
"""
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple
import logging

from psycopg2.extras import execute_batch

from app.domain.product import Product
from app.core.database import get_db_connection_dict
from app.repositories.interfaces import IProductsRepository

logger = logging.getLogger(__name__)

PRODUCT_COLUMNS = "id::text AS id, name, price, quantity, created_at, updated_at"


class ProductRepository(IProductsRepository):
    """
    Repository for Product data access

    All SQL queries for products are centralized here.
    Returns Product domain models, not raw dictionaries.
    """

    @staticmethod
    def _map_row_to_product(row: dict) -> Product:
        """Map a database row to the Product domain model"""
        return Product(
            id=row['id'],
            name=row['name'],
            price=row['price'],
            quantity=row['quantity'],
            created_at=row.get('created_at'),
            updated_at=row.get('updated_at')
        )

    def find_by_id(self, product_id: str) -> Optional[Product]:
        """
        Find product by ID

        Args:
            product_id: Product UUID

        Returns:
            Product or None if not found
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {PRODUCT_COLUMNS}
                FROM products
                WHERE id::text = %s
            """, (product_id,))

            row = cursor.fetchone()
            if not row:
                return None

            return self._map_row_to_product(row)

        finally:
            cursor.close()
            conn.close()

    def find_all_by_id(self, product_ids: Sequence[str]) -> List[Product]:
        """
        Find all products matching the given IDs in one query

        Args:
            product_ids: Product UUIDs (duplicates allowed)

        Returns:
            Products that exist; missing IDs are simply absent from the list
        """
        ids = list(dict.fromkeys(product_ids))
        if not ids:
            return []

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {PRODUCT_COLUMNS}
                FROM products
                WHERE id::text = ANY(%s)
            """, (ids,))

            rows = cursor.fetchall()
            return [self._map_row_to_product(row) for row in rows]

        finally:
            cursor.close()
            conn.close()

    def find_by_name(self, name: str) -> Optional[Product]:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {PRODUCT_COLUMNS}
                FROM products
                WHERE name = %s
            """, (name,))

            row = cursor.fetchone()
            if not row:
                return None

            return self._map_row_to_product(row)

        finally:
            cursor.close()
            conn.close()

    def create(self, name: str, price: Decimal, quantity: int) -> Product:
        """
        Insert a new catalog product

        Returns:
            The stored Product with generated id and timestamps
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                INSERT INTO products (name, price, quantity)
                VALUES (%s, %s, %s)
                RETURNING {PRODUCT_COLUMNS}
            """, (name, price, quantity))

            row = cursor.fetchone()
            conn.commit()

            return self._map_row_to_product(row)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def update_quantities(self, quantities: Sequence[Tuple[str, int]]) -> None:
        """
        Set the stock of several products in one transaction

        Args:
            quantities: (product_id, new_quantity) pairs
        """
        if not quantities:
            return

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            execute_batch(
                cursor,
                """
                UPDATE products
                SET quantity = %s, updated_at = NOW()
                WHERE id::text = %s
                """,
                [(quantity, product_id) for product_id, quantity in quantities]
            )

            conn.commit()
            logger.debug(f"Updated stock for {len(quantities)} products")

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()
