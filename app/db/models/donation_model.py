from sqlalchemy import Column, Integer, String, Text, Date, DateTime, func, Enum
from app.db.base import Base
import enum


class DonationCondition(str, enum.Enum):
    NEW = "new"
    GOOD = "good"
    FAIR = "fair"


class Donation(Base):
    __tablename__ = "donations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # owner identifier; referential integrity is not enforced
    phone = Column(String(120), nullable=False, index=True)
    items = Column(Text, nullable=False)
    condition = Column(
        Enum(
            DonationCondition,
            name="donationcondition",
            values_callable=lambda e: [member.value for member in e],
        ),
        nullable=False,
    )
    pickup_date = Column(Date, nullable=True)
    pickup_slot = Column(String(50), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Donation(id={self.id}, phone={self.phone}, condition={self.condition})>"
