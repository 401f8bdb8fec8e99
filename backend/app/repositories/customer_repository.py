"""
Customer Repository - Data Access Layer for Customers

Author: TM3
Date: 2025-10-17
"""
from typing import Optional

from app.domain.customer import Customer
from app.core.database import get_db_connection_dict
from app.repositories.interfaces import ICustomersRepository


class CustomerRepository(ICustomersRepository):
    """
    Repository for Customer data access

    Returns Customer domain models, not raw dictionaries.
    """

    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        """
        Find customer by ID

        Args:
            customer_id: Customer UUID (any string; non-UUIDs simply don't match)

        Returns:
            Customer or None if not found
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT id::text AS id, name, email, created_at, updated_at
                FROM customers
                WHERE id::text = %s
            """, (customer_id,))

            row = cursor.fetchone()
            if not row:
                return None

            return Customer(**row)

        finally:
            cursor.close()
            conn.close()

    def find_by_email(self, email: str) -> Optional[Customer]:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT id::text AS id, name, email, created_at, updated_at
                FROM customers
                WHERE email = %s
            """, (email,))

            row = cursor.fetchone()
            if not row:
                return None

            return Customer(**row)

        finally:
            cursor.close()
            conn.close()

    def create(self, name: str, email: str) -> Customer:
        """
        Insert a new customer

        Returns:
            The stored Customer with generated id and timestamps
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                INSERT INTO customers (name, email)
                VALUES (%s, %s)
                RETURNING id::text AS id, name, email, created_at, updated_at
            """, (name, email))

            row = cursor.fetchone()
            conn.commit()

            return Customer(**row)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()
