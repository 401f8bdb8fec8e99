"""
Application errors

Raised by the service layer when a request cannot succeed as given.
The API layer catches AppError and turns it into an HTTP response with
`status_code` and `message`. Anything else (database errors, etc.) is not
an AppError and propagates unchanged.
"""
from typing import List


class AppError(Exception):
    """Base class for user-facing domain errors"""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class InvalidCustomer(AppError):
    """The customer id does not resolve to a customer."""

    def __init__(self, customer_id: str):
        super().__init__("Customer id not valid")
        self.customer_id = customer_id


class ProductsNotFound(AppError):
    """Some (or all) requested products are not in the catalog."""

    def __init__(self, product_ids: List[str]):
        if product_ids:
            message = f"Could not find products with ids {','.join(product_ids)}"
        else:
            message = "Could not find products"
        super().__init__(message)
        self.product_ids = list(product_ids)


class InsufficientStock(AppError):
    """Requested quantity exceeds catalog stock for one or more products."""

    def __init__(self, product_ids: List[str]):
        super().__init__(
            f"Products quantity in stock under requested amount: {','.join(product_ids)}"
        )
        self.product_ids = list(product_ids)


class OrderNotFound(AppError):
    def __init__(self, order_id: str):
        super().__init__("Order not found", status_code=404)
        self.order_id = order_id


class EmailAlreadyUsed(AppError):
    def __init__(self, email: str):
        super().__init__("Email already used")
        self.email = email


class ProductAlreadyExists(AppError):
    def __init__(self, name: str):
        super().__init__("Product already exists")
        self.name = name
