# models/customer.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from models.tenant import BranchRef

PENDING = "Pending"


class Customer(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: Optional[str] = Field(None, alias="customerName")
    phone: Optional[str] = Field(None, alias="customerPhone")


class ContactMessage(BaseModel):
    id: str
    customer: Optional[Customer] = None
    message: Optional[str] = None
    branch: Optional[BranchRef] = None
    status: Optional[str] = None


class Reservation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    reservation_date_time: Optional[str] = Field(None, alias="reservationDateTime")
    number_of_guests: Optional[float] = Field(None, alias="numberOfGuests")
