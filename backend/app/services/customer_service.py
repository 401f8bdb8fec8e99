"""
Customer Service
Registers customers that can later place orders
"""
import logging

from app.core.errors import EmailAlreadyUsed
from app.domain.customer import Customer
from app.repositories.interfaces import ICustomersRepository

logger = logging.getLogger(__name__)


class CreateCustomerService:
    """Service for registering a customer (email must be unique)"""

    def __init__(self, customers_repository: ICustomersRepository):
        self.customers_repository = customers_repository

    def execute(self, name: str, email: str) -> Customer:
        """
        Register a customer

        Raises:
            EmailAlreadyUsed: another customer already has this email
        """
        if self.customers_repository.find_by_email(email):
            logger.warning(f"Customer registration rejected: email {email} already used")
            raise EmailAlreadyUsed(email)

        customer = self.customers_repository.create(name=name, email=email)
        logger.info(f"Customer {customer.id} registered")

        return customer
