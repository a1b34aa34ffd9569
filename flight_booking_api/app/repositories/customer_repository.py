"""
Storage access for customers.

``CustomerRepository`` connects ``CustomerService`` with the
``customers`` table.  Deleting a customer also removes the bookings it
owns.
"""

import logging
import sqlite3
from typing import List, Optional

from ..core.errors import DuplicateKeyError
from ..schemas.customer import CustomerCreate, CustomerRead


logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "That email is already used, please use a unique email"

_COLUMNS = "id, name, email, phone_number"


def _to_customer(row: sqlite3.Row) -> CustomerRead:
    return CustomerRead(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        phone_number=row["phone_number"],
    )


class CustomerRepository:
    """Repository for :class:`CustomerRead` records."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def find_all(self) -> List[CustomerRead]:
        """Return all customers sorted alphabetically by name."""
        rows = self.conn.execute(
            f"SELECT {_COLUMNS} FROM customers ORDER BY name ASC, id ASC"
        ).fetchall()
        return [_to_customer(row) for row in rows]

    def find_by_id(self, customer_id: int) -> Optional[CustomerRead]:
        row = self.conn.execute(
            f"SELECT {_COLUMNS} FROM customers WHERE id = ?", (customer_id,)
        ).fetchone()
        return _to_customer(row) if row else None

    def find_by_email(self, email: str) -> Optional[CustomerRead]:
        """Return the first customer registered with ``email``.

        If more than one customer shares the address only the first
        encountered is returned.
        """
        row = self.conn.execute(
            f"SELECT {_COLUMNS} FROM customers WHERE email = ? ORDER BY id LIMIT 1",
            (email,),
        ).fetchone()
        return _to_customer(row) if row else None

    def create(self, customer: CustomerCreate) -> CustomerRead:
        logger.info("CustomerRepository.create() - Creating %s", customer.name)
        try:
            cursor = self.conn.execute(
                "INSERT INTO customers (name, email, phone_number) VALUES (?, ?, ?)",
                (customer.name, customer.email, customer.phone_number),
            )
            self.conn.commit()
        except sqlite3.IntegrityError as e:
            self.conn.rollback()
            if "UNIQUE" in str(e):
                raise DuplicateKeyError(
                    "Customer email already exists", {"email": DUPLICATE_EMAIL_MESSAGE}
                ) from e
            raise
        return CustomerRead(id=cursor.lastrowid, **customer.model_dump())

    def delete(self, customer):
        """Delete a customer and its bookings in one transaction."""
        customer_id = getattr(customer, "id", None)
        if customer_id is None:
            logger.info("CustomerRepository.delete() - No ID was found so can't Delete.")
            return customer

        logger.info("CustomerRepository.delete() - Deleting %s", customer_id)
        try:
            self.conn.execute("DELETE FROM bookings WHERE customer_id = ?", (customer_id,))
            self.conn.execute("DELETE FROM customers WHERE id = ?", (customer_id,))
            self.conn.commit()
        except sqlite3.Error:
            self.conn.rollback()
            raise
        return customer
