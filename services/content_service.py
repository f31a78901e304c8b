# services/content_service.py
from typing import List, Optional
from db.graphql_client import GraphQLConnection
from db import queries
from models.tenant import Tenant
from models.content import HomeInformation, GalleryItem
from models.customer import Customer, ContactMessage, Reservation, PENDING
from utils.logger import get_logger

logger = get_logger("Content_Service")

# Reads never raise: a missing record and a failed request both come back as None / [].


async def fetch_tenants(conn: GraphQLConnection, limit: int = 100) -> List[Tenant]:
    try:
        data = await conn.execute(queries.GET_TENANTS, {"limit": limit})
        docs = (data.get("Tenants") or {}).get("docs") or []
        return [Tenant.model_validate(d) for d in docs]
    except Exception as e:
        logger.error(f"Error fetching tenants: {e}")
        return []


async def fetch_tenant_by_slug(conn: GraphQLConnection, slug: str) -> Optional[Tenant]:
    try:
        data = await conn.execute(queries.GET_TENANT, {"slug": slug})
        docs = (data.get("Tenants") or {}).get("docs") or []
        if not docs:
            logger.info(f"No tenant found for slug: {slug}")
            return None
        return Tenant.model_validate(docs[0])
    except Exception as e:
        logger.error(f"Error fetching tenant {slug}: {e}")
        return None


async def fetch_home_information(conn: GraphQLConnection) -> Optional[HomeInformation]:
    try:
        data = await conn.execute(queries.GET_HOME_INFORMATION)
        info = data.get("HomeInformation")
        return HomeInformation.model_validate(info) if info else None
    except Exception as e:
        logger.error(f"Error fetching home information: {e}")
        return None


async def fetch_gallery(conn: GraphQLConnection, branch_id: Optional[str] = None) -> List[GalleryItem]:
    """
    Fetch gallery images, optionally only those of one branch.
    The backend query has no branch filter, so filtering happens here.
    """
    logger.debug(f"Fetching gallery with branch_id: {branch_id}")
    try:
        data = await conn.execute(queries.GET_GALLERY)
        docs = (data.get("Galleries") or {}).get("docs") or []
        items = [GalleryItem.model_validate(d) for d in docs]
    except Exception as e:
        logger.error(f"Error fetching gallery: {e}")
        return []

    if branch_id:
        items = [item for item in items if item.branch and item.branch.id == branch_id]
    return items


async def fetch_customer_by_phone(conn: GraphQLConnection, phone: str) -> Optional[Customer]:
    try:
        data = await conn.execute(queries.GET_CUSTOMER, {"customerPhone": phone})
        docs = (data.get("Customers") or {}).get("docs") or []
        return Customer.model_validate(docs[0]) if docs else None
    except Exception as e:
        logger.error(f"Error fetching customer: {e}")
        return None


async def create_customer(conn: GraphQLConnection, name: str, phone: str) -> Customer:
    try:
        data = await conn.execute(queries.CREATE_CUSTOMER, {"customerName": name, "customerPhone": phone})
        created = data.get("createCustomer")
        if not created:
            raise ValueError("Backend returned no customer")
        customer = Customer.model_validate(created)
    except Exception:
        logger.exception("Error creating customer")
        raise
    logger.info("Customer created", extra={"customer_id": customer.id})
    return customer


async def create_reservation(
    conn: GraphQLConnection,
    customer_id: str,
    reservation_date_time: str,
    number_of_guests: int,
    special_requests: Optional[str],
    branch_id: str,
) -> Reservation:
    variables = {
        "customer": customer_id,
        "reservationDateTime": reservation_date_time,
        "numberOfGuests": number_of_guests,
        "specialRequests": special_requests,
        "branch": branch_id,
        "status": PENDING,
    }
    try:
        data = await conn.execute(queries.CREATE_RESERVATION, variables)
        created = data.get("createReservation")
        if not created:
            raise ValueError("Backend returned no reservation")
        reservation = Reservation.model_validate(created)
    except Exception:
        logger.exception("Error creating reservation")
        raise
    logger.info("Reservation created", extra={"reservation_id": reservation.id, "branch_id": branch_id})
    return reservation


async def create_contact_message(
    conn: GraphQLConnection,
    customer_id: str,
    message: Optional[str],
    branch_id: str,
) -> ContactMessage:
    variables = {
        "customer": customer_id,
        "message": message or "",
        "branch": branch_id,
        "status": PENDING,
    }
    try:
        data = await conn.execute(queries.CREATE_CONTACT_MESSAGE, variables)
        created = data.get("createContactMessage")
        if not created:
            raise ValueError("Backend returned no contact message")
        contact_message = ContactMessage.model_validate(created)
    except Exception:
        logger.exception("Error creating contact message")
        raise
    logger.info("Contact message created", extra={"message_id": contact_message.id, "branch_id": branch_id})
    return contact_message
