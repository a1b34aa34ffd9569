"""
Business logic for customers.

Customers are identified in business terms by their e‑mail address,
which must be unique across the system.
"""

import logging
from typing import List

from ..core.errors import DuplicateKeyError, NotFoundError
from ..repositories.customer_repository import DUPLICATE_EMAIL_MESSAGE, CustomerRepository
from ..schemas.customer import CustomerCreate, CustomerRead


logger = logging.getLogger(__name__)


class CustomerService:
    """Service for managing customers."""

    def __init__(self, repository: CustomerRepository) -> None:
        self.repository = repository

    async def find_all_ordered_by_name(self) -> List[CustomerRead]:
        return self.repository.find_all()

    async def find_by_id(self, customer_id: int) -> CustomerRead:
        customer = self.repository.find_by_id(customer_id)
        if customer is None:
            raise NotFoundError(
                f"No Customer with the id {customer_id} was found!",
                {"error": f"No Customer with the id {customer_id} was found!"},
            )
        return customer

    async def find_by_email(self, email: str) -> CustomerRead:
        customer = self.repository.find_by_email(email)
        if customer is None:
            raise NotFoundError(
                f"No Customer with the email {email} was found!",
                {"error": f"No Customer with the email {email} was found!"},
            )
        return customer

    def validate(self, customer: CustomerCreate) -> None:
        """Raise ``DuplicateKeyError`` if the e‑mail is already registered."""
        if self.repository.find_by_email(customer.email) is not None:
            raise DuplicateKeyError(
                "Customer email already exists", {"email": DUPLICATE_EMAIL_MESSAGE}
            )

    async def create(self, customer: CustomerCreate) -> CustomerRead:
        logger.info("CustomerService.create() - Creating customer %s", customer.email)
        try:
            self.validate(customer)
        except DuplicateKeyError as e:
            logger.info("Customer %s rejected: %s", customer.email, e.message)
            raise
        return self.repository.create(customer)

    async def delete(self, customer_id: int) -> CustomerRead:
        """Delete a customer and all of its bookings."""
        customer = await self.find_by_id(customer_id)
        self.repository.delete(customer)
        return customer
