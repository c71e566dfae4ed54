from datetime import date, datetime, timezone
from typing import List, Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.donation_model import Donation, DonationCondition


class DonationRepository:
    """Persistence for scheduled clothing pickups."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_donation(
        self,
        phone: str,
        items: str,
        condition: DonationCondition,
        pickup_date: Optional[date] = None,
        pickup_slot: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> int:
        created_at = created_at or datetime.now(timezone.utc)
        stmt = (
            insert(Donation)
            .values(
                phone=phone,
                items=items,
                condition=condition,
                pickup_date=pickup_date,
                pickup_slot=pickup_slot,
                created_at=created_at,
            )
            .returning(Donation.id)
        )
        donation_id = (await self.session.execute(stmt)).scalar_one()
        await self.session.commit()
        return donation_id

    async def list_for_phone(self, phone: str) -> List[dict]:
        stmt = (
            select(*Donation.__table__.c)
            .where(Donation.phone == phone)
            .order_by(Donation.created_at.desc(), Donation.id.desc())
        )
        rows = (await self.session.execute(stmt)).mappings().all()
        return [dict(r) for r in rows]
