# models/forms.py
import re
from datetime import date as date_type, datetime, time as time_type, timezone
from typing import Dict
from zoneinfo import ZoneInfo
from pydantic import BaseModel, ValidationError, ValidationInfo, field_validator
from settings.config import settings

# Vietnamese numbers: mobile 03/05/07/08/09 + 8 digits, landline 02 + 9 digits
MOBILE_PHONE_RE = re.compile(r"^(03|05|07|08|09)[0-9]{8}$")
LANDLINE_PHONE_RE = re.compile(r"^02[0-9]{9}$")

OPENING_TIME = time_type(16, 0)
CLOSING_TIME = time_type(22, 0)
MIN_GUESTS = 1
MAX_GUESTS = 8
MIN_NAME_LENGTH = 5


def clean_phone(phone: str) -> str:
    return re.sub(r"\s+", "", phone or "")


def is_valid_vietnamese_phone(phone: str) -> bool:
    cleaned = clean_phone(phone)
    return bool(MOBILE_PHONE_RE.match(cleaned) or LANDLINE_PHONE_RE.match(cleaned))


def restaurant_now() -> datetime:
    return datetime.now(ZoneInfo(settings.RESERVATION_TIMEZONE))


class LeadForm(BaseModel):
    name: str = ""
    phone: str = ""
    branch: str = ""

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("Name is required")
        if len(v) < MIN_NAME_LENGTH:
            raise ValueError(f"Name must be at least {MIN_NAME_LENGTH} characters")
        return v

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: str) -> str:
        if not (v or "").strip():
            raise ValueError("Phone number is required")
        if not is_valid_vietnamese_phone(v):
            raise ValueError("Please enter a valid Vietnamese phone number")
        return clean_phone(v)

    @field_validator("branch")
    @classmethod
    def check_branch(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("Please select a branch")
        return v


class ContactSubmission(LeadForm):
    message: str = ""


class ReservationSubmission(LeadForm):
    # time is declared before date so the date check can see it
    time: str = ""
    date: str = ""
    guests: int = 2
    notes: str = ""

    @field_validator("time")
    @classmethod
    def check_time(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("Time is required")
        try:
            parsed = datetime.strptime(v, "%H:%M").time()
        except ValueError:
            raise ValueError(f"Time must be between {OPENING_TIME:%H:%M} and {CLOSING_TIME:%H:%M}")
        if parsed < OPENING_TIME or parsed > CLOSING_TIME:
            raise ValueError(f"Time must be between {OPENING_TIME:%H:%M} and {CLOSING_TIME:%H:%M}")
        return parsed.strftime("%H:%M")

    @field_validator("date")
    @classmethod
    def check_date(cls, v: str, info: ValidationInfo) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("Date is required")
        try:
            selected = date_type.fromisoformat(v)
        except ValueError:
            raise ValueError("Date is required")

        now = restaurant_now()
        if selected < now.date():
            raise ValueError("Date must be today or later")

        chosen_time = info.data.get("time")
        if selected == now.date() and chosen_time:
            if datetime.strptime(chosen_time, "%H:%M").time() <= now.time().replace(tzinfo=None):
                raise ValueError("For today's reservation, please select a time later than now")
        return selected.isoformat()

    @field_validator("guests")
    @classmethod
    def check_guests(cls, v: int) -> int:
        if v < MIN_GUESTS or v > MAX_GUESTS:
            raise ValueError(f"Number of guests must be between {MIN_GUESTS} and {MAX_GUESTS}")
        return v

    @property
    def reservation_date_time(self) -> str:
        """Date and time in the restaurant's timezone, as a UTC ISO string."""
        local = datetime.combine(
            date_type.fromisoformat(self.date),
            datetime.strptime(self.time, "%H:%M").time(),
            tzinfo=ZoneInfo(settings.RESERVATION_TIMEZONE),
        )
        return local.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.000Z")


def form_errors(exc: ValidationError) -> Dict[str, str]:
    """First error message per field, without pydantic's "Value error, " prefix."""
    errors = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err.get("loc") else "form"
        if field in errors:
            continue
        ctx_error = (err.get("ctx") or {}).get("error")
        errors[field] = str(ctx_error) if ctx_error is not None else err.get("msg", "Invalid value")
    return errors
