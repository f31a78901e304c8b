# services/lead_service.py
from typing import List, Optional
from db.graphql_client import GraphQLConnection
from core.exceptions import BranchNotFound
from models.customer import Customer, ContactMessage, Reservation
from models.forms import ContactSubmission, ReservationSubmission
from models.tenant import Tenant
from services.content_service import (
    fetch_customer_by_phone,
    create_customer,
    create_contact_message,
    create_reservation,
)
from utils.logger import get_logger

logger = get_logger("Lead_Service")


async def get_or_create_customer(conn: GraphQLConnection, name: str, phone: str) -> Customer:
    """
    Customers are keyed by phone in practice: reuse an existing record, otherwise create one.
    Not transactional, two concurrent first-time submissions can both create a customer.
    """
    customer = await fetch_customer_by_phone(conn, phone)
    if customer is not None:
        logger.info("Existing customer found", extra={"customer_id": customer.id})
        return customer
    logger.info("Customer not found, creating new customer")
    return await create_customer(conn, name, phone)


def find_branch(tenants: List[Tenant], branch_name: str) -> Tenant:
    for tenant in tenants:
        if tenant.name == branch_name:
            return tenant
    raise BranchNotFound(f"Branch not found: {branch_name}")


async def submit_contact_message(
    conn: GraphQLConnection, submission: ContactSubmission, tenants: List[Tenant]
) -> ContactMessage:
    customer = await get_or_create_customer(conn, submission.name, submission.phone)
    branch = find_branch(tenants, submission.branch)
    result = await create_contact_message(conn, customer.id, submission.message, branch.id)
    logger.info("Contact message submitted", extra={"branch": branch.slug})
    return result


async def submit_reservation(
    conn: GraphQLConnection, submission: ReservationSubmission, tenants: List[Tenant]
) -> Reservation:
    customer = await get_or_create_customer(conn, submission.name, submission.phone)
    branch = find_branch(tenants, submission.branch)
    special_requests: Optional[str] = submission.notes or None
    result = await create_reservation(
        conn,
        customer.id,
        submission.reservation_date_time,
        submission.guests,
        special_requests,
        branch.id,
    )
    logger.info("Reservation submitted", extra={"branch": branch.slug})
    return result
