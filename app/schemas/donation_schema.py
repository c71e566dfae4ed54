# app/schemas/donation_schema.py

from datetime import date, datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field

from app.db.models.donation_model import DonationCondition


class DonationCreate(BaseModel):
    """Pickup request; accepts snake_case and the web client's camelCase."""
    phone: Optional[str] = None
    items: Optional[str] = None
    condition: Optional[DonationCondition] = None
    pickup_date: Optional[date] = Field(
        None, validation_alias=AliasChoices("pickup_date", "pickupDate")
    )
    pickup_slot: Optional[str] = Field(
        None, validation_alias=AliasChoices("pickup_slot", "pickupSlot")
    )


class DonationOut(BaseModel):
    id: int
    phone: str
    items: str
    condition: DonationCondition
    pickup_date: Optional[date] = None
    pickup_slot: Optional[str] = None
    created_at: datetime

    model_config = {
        "from_attributes": True
    }


class DonationCreated(BaseModel):
    success: bool = True
    message: str = "Donation scheduled successfully!"
    donationId: int


class DonationList(BaseModel):
    success: bool = True
    donations: List[DonationOut]
