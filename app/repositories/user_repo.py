from typing import Optional

from sqlalchemy import func, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.user_model import User


class UserRepository:

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_phone(self, phone: str) -> Optional[dict]:
        stmt = select(*User.__table__.c).where(User.phone == phone)
        record = (await self.session.execute(stmt)).mappings().first()
        return dict(record) if record else None

    async def create(self, user_in: dict) -> dict:
        stmt = (
            insert(User)
            .values(
                phone=user_in["phone"],
                name=user_in["name"],
                hashed_password=user_in["hashed_password"],
                address=user_in["address"],
            )
            .returning(*User.__table__.c)
        )
        try:
            record = (await self.session.execute(stmt)).mappings().one()
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise ValueError("Phone already registered")
        return dict(record)

    async def count(self) -> int:
        stmt = select(func.count()).select_from(User)
        return (await self.session.execute(stmt)).scalar_one()
