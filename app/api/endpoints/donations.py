import logging
import traceback
from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError

from app.api.deps import (
    ensure_same_identity,
    get_donation_service,
    get_token_subject,
    require_fields,
)
from app.core.exceptions import StoreException
from app.schemas.donation_schema import DonationCreate, DonationCreated, DonationList, DonationOut
from app.services.donation_service import DonationService

router = APIRouter(prefix="/api/donations", tags=["donations"])


@router.post("", response_model=DonationCreated, status_code=status.HTTP_201_CREATED)
async def schedule_donation(
        body: DonationCreate,
        subject: Optional[str] = Depends(get_token_subject),
        donation_svc: DonationService = Depends(get_donation_service),
):
    require_fields(body, "phone", "items", "condition")
    phone = body.phone.strip()
    ensure_same_identity(subject, phone)
    try:
        donation_id = await donation_svc.schedule(
            phone,
            body.items,
            body.condition,
            pickup_date=body.pickup_date,
            pickup_slot=body.pickup_slot,
        )
    except SQLAlchemyError as e:
        logging.error(f"Database error while scheduling donation: {e}\n{traceback.format_exc()}")
        raise StoreException("Failed to schedule donation.")
    return DonationCreated(donationId=donation_id)


@router.get("/{phone}", response_model=DonationList)
async def list_donations(
        phone: str,
        subject: Optional[str] = Depends(get_token_subject),
        donation_svc: DonationService = Depends(get_donation_service),
):
    ensure_same_identity(subject, phone)
    try:
        donations = await donation_svc.list_for_user(phone)
    except SQLAlchemyError as e:
        logging.error(f"Error fetching donations: {e}\n{traceback.format_exc()}")
        raise StoreException("Failed to fetch donations.")
    return DonationList(donations=[DonationOut(**d) for d in donations])
