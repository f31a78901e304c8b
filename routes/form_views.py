# routes/form_views.py
from typing import List, Optional
from fastapi import Request
from pydantic import ValidationError
from core.templating import templates
from db.graphql_client import GraphQLConnection
from models.forms import ContactSubmission, ReservationSubmission, form_errors, MIN_GUESTS, MAX_GUESTS, OPENING_TIME, CLOSING_TIME, restaurant_now
from models.tenant import Tenant
from services.lead_service import submit_contact_message, submit_reservation
from utils.logger import get_logger

logger = get_logger("Form_Views")

CONTACT_SUCCESS = "Message sent successfully!"
CONTACT_FAILURE = "Failed to send message. Please try again."
RESERVATION_SUCCESS = "Reservation submitted successfully!"
RESERVATION_FAILURE = "Failed to submit reservation. Please try again."


def render_contact(request: Request, tenants: List[Tenant], selected_branch: str, tenant: Optional[Tenant] = None,
                   form: Optional[dict] = None, errors: Optional[dict] = None, toast: Optional[dict] = None,
                   status_code: int = 200):
    return templates.TemplateResponse(
        request,
        "contact.html",
        {
            "tenant": tenant,
            "tenants": tenants,
            "selected_branch": (form or {}).get("branch") or selected_branch,
            "form": form or {},
            "errors": errors or {},
            "toast": toast,
        },
        status_code=status_code,
    )


def render_reservation(request: Request, tenants: List[Tenant], selected_branch: str, tenant: Optional[Tenant] = None,
                       form: Optional[dict] = None, errors: Optional[dict] = None, toast: Optional[dict] = None,
                       status_code: int = 200):
    return templates.TemplateResponse(
        request,
        "reservation.html",
        {
            "tenant": tenant,
            "tenants": tenants,
            "selected_branch": (form or {}).get("branch") or selected_branch,
            "form": form or {"guests": 2},
            "errors": errors or {},
            "toast": toast,
            "guest_options": range(MIN_GUESTS, MAX_GUESTS + 1),
            "opening_time": OPENING_TIME.strftime("%H:%M"),
            "closing_time": CLOSING_TIME.strftime("%H:%M"),
            "today": restaurant_now().date().isoformat(),
        },
        status_code=status_code,
    )


async def handle_contact_post(request: Request, conn: GraphQLConnection, tenants: List[Tenant], form_data: dict,
                              tenant: Optional[Tenant] = None):
    if tenant is not None:
        form_data = {**form_data, "branch": tenant.name}
    selected = tenant.name if tenant else form_data.get("branch", "")
    try:
        submission = ContactSubmission(**form_data)
    except ValidationError as e:
        logger.info("Contact form rejected", extra={"fields": list(form_errors(e))})
        return render_contact(request, tenants, selected, tenant, form=form_data, errors=form_errors(e), status_code=400)

    try:
        await submit_contact_message(conn, submission, tenants)
    except Exception:
        logger.exception("Contact submission error")
        return render_contact(request, tenants, selected, tenant, form=form_data,
                              toast={"type": "error", "message": CONTACT_FAILURE}, status_code=502)

    return render_contact(request, tenants, submission.branch, tenant, form={"branch": submission.branch},
                          toast={"type": "success", "message": CONTACT_SUCCESS})


async def handle_reservation_post(request: Request, conn: GraphQLConnection, tenants: List[Tenant], form_data: dict,
                                  tenant: Optional[Tenant] = None):
    if tenant is not None:
        form_data = {**form_data, "branch": tenant.name}
    selected = tenant.name if tenant else form_data.get("branch", "")
    try:
        submission = ReservationSubmission(**form_data)
    except ValidationError as e:
        logger.info("Reservation form rejected", extra={"fields": list(form_errors(e))})
        return render_reservation(request, tenants, selected, tenant, form=form_data, errors=form_errors(e), status_code=400)

    try:
        await submit_reservation(conn, submission, tenants)
    except Exception:
        logger.exception("Reservation error")
        return render_reservation(request, tenants, selected, tenant, form=form_data,
                                  toast={"type": "error", "message": RESERVATION_FAILURE}, status_code=502)

    return render_reservation(request, tenants, submission.branch, tenant, form={"branch": submission.branch, "guests": 2},
                              toast={"type": "success", "message": RESERVATION_SUCCESS})
