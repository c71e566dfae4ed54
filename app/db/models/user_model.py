from sqlalchemy import Column, String, Text
from app.db.base import Base


class User(Base):
    __tablename__ = "users"

    phone = Column(String(120), primary_key=True, doc="Phone number or Google email")
    name = Column(String(100), nullable=False)
    hashed_password = Column(String(255), nullable=False)
    address = Column(Text, nullable=False)

    def __repr__(self):
        return f"<User(phone={self.phone}, name={self.name})>"
