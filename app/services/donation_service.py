# app/services/donation_service.py

import logging
from datetime import date
from typing import Optional

from app.core.exceptions import InvalidFieldException, MissingFieldsException
from app.db.models.donation_model import DonationCondition
from app.repositories.donation_repo import DonationRepository

logger = logging.getLogger(__name__)


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class DonationService:
    def __init__(self, donation_repo: DonationRepository):
        self.donation_repo = donation_repo

    async def schedule(
        self,
        phone: Optional[str],
        items: Optional[str],
        condition,
        pickup_date: Optional[date] = None,
        pickup_slot: Optional[str] = None,
    ) -> int:
        missing = [
            name for name, value in (("phone", phone), ("items", items), ("condition", condition))
            if _blank(value)
        ]
        if missing:
            raise MissingFieldsException(missing)

        try:
            condition = DonationCondition(condition)
        except ValueError:
            allowed = ", ".join(c.value for c in DonationCondition)
            raise InvalidFieldException("condition", f"must be one of {allowed}")

        donation_id = await self.donation_repo.create_donation(
            phone=phone,
            items=items.strip(),
            condition=condition,
            pickup_date=pickup_date,
            pickup_slot=pickup_slot or None,
        )
        logger.info(f"Donation {donation_id} scheduled for {phone}.")
        return donation_id

    async def list_for_user(self, phone: str) -> list[dict]:
        return await self.donation_repo.list_for_phone(phone)
