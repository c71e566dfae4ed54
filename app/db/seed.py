# app/db/seed.py
import asyncio
import logging
import random
from datetime import date, datetime, timezone, timedelta
from typing import Optional

from faker import Faker
from tqdm import tqdm

from app.core.security import hash_password
from app.db import session as db_session
from app.db.models.donation_model import DonationCondition
from app.repositories.donation_repo import DonationRepository
from app.repositories.user_repo import UserRepository

fake = Faker("en_IN")

NUM_USERS = 20
MAX_DONATIONS_PER_USER = 5
DEMO_PASSWORD = "vastra123"
PICKUP_SLOTS = ["morning", "afternoon", "evening"]
CLOTHING = ["shirts", "sarees", "jeans", "sweaters", "kurtas", "jackets", "school uniforms", "blankets"]


def random_phone() -> str:
    return f"{random.choice('6789')}{random.randint(100000000, 999999999)}"


def random_items() -> str:
    picks = random.sample(CLOTHING, k=random.randint(1, 3))
    return ", ".join(f"{random.randint(1, 6)} {item}" for item in picks)


def random_datetime_within_last_n_months(months: int = 6) -> datetime:
    now = datetime.now(tz=timezone.utc)
    start = now - timedelta(days=30 * months)
    delta_seconds = int((now - start).total_seconds())
    return start + timedelta(seconds=random.randint(0, max(0, delta_seconds)))


async def seed(
    num_users: int = NUM_USERS,
    max_donations_per_user: int = MAX_DONATIONS_PER_USER,
    database_url: Optional[str] = None,
) -> list[str]:
    """Insert demo users and donations; returns the phones that were created."""
    await db_session.connect_db_engine(database_url)
    await db_session.init_db()

    # one hash for everyone, bcrypt is slow
    hashed_password = hash_password(DEMO_PASSWORD)
    phones = []

    try:
        async with db_session.async_session() as session:
            user_repo = UserRepository(session)
            donation_repo = DonationRepository(session)

            for _ in tqdm(range(num_users), desc="Creating users"):
                phone = random_phone()
                try:
                    await user_repo.create({
                        "phone": phone,
                        "name": fake.name(),
                        "hashed_password": hashed_password,
                        "address": fake.address().replace("\n", ", "),
                    })
                except ValueError:
                    continue
                phones.append(phone)

                for _ in range(random.randint(0, max_donations_per_user)):
                    await donation_repo.create_donation(
                        phone=phone,
                        items=random_items(),
                        condition=random.choice(list(DonationCondition)),
                        pickup_date=date.today() + timedelta(days=random.randint(1, 30)),
                        pickup_slot=random.choice(PICKUP_SLOTS),
                        created_at=random_datetime_within_last_n_months(6),
                    )
    finally:
        await db_session.close_db_engine()

    logging.info(f"✅ Seed finished: {len(phones)} users (password '{DEMO_PASSWORD}').")
    return phones


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())
