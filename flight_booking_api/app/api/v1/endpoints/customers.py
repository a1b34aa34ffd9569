"""
Customer endpoints for API v1.

Customers are listed alphabetically by name and can be looked up by
id or by e‑mail address.  Deleting a customer cancels all of its
bookings.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from flight_booking_api.app.api.v1.dependencies import get_customer_service
from flight_booking_api.app.core.db import MAX_ROW_ID
from flight_booking_api.app.schemas.customer import CustomerCreate, CustomerRead
from flight_booking_api.app.services.customer_service import CustomerService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[CustomerRead])
async def retrieve_all_customers(
    service: CustomerService = Depends(get_customer_service),
) -> List[CustomerRead]:
    return await service.find_all_ordered_by_name()


@router.get("/email/{email}", response_model=CustomerRead)
async def retrieve_customer_by_email(
    email: str = Path(..., description="E-mail address of the customer"),
    service: CustomerService = Depends(get_customer_service),
) -> CustomerRead:
    return await service.find_by_email(email)


@router.get("/{customer_id}", response_model=CustomerRead)
async def retrieve_customer_by_id(
    customer_id: int = Path(..., ge=0, le=MAX_ROW_ID, description="Id of the customer"),
    service: CustomerService = Depends(get_customer_service),
) -> CustomerRead:
    return await service.find_by_id(customer_id)


@router.post(
    "",
    response_model=CustomerRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Invalid Customer supplied in request body"},
        409: {"description": "Customer supplied in request body has an email already in use"},
    },
)
async def create_customer(
    customer: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerRead:
    """Register a customer.  The e‑mail address must not be in use yet."""
    created = await service.create(customer)
    logger.info("createCustomer completed. Customer = %s", created.id)
    return created


@router.delete(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_customer(
    customer_id: int = Path(..., ge=0, le=MAX_ROW_ID, description="Id of the customer to be deleted"),
    service: CustomerService = Depends(get_customer_service),
) -> Response:
    customer = await service.delete(customer_id)
    logger.info("deleteCustomer completed. Customer = %s", customer.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
