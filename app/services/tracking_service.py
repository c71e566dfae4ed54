# app/services/tracking_service.py

import enum
import random
from datetime import datetime, timezone
from typing import Optional


class TrackingStatus(str, enum.Enum):
    SCHEDULED = "Scheduled"
    PICKUP_ASSIGNED = "Pickup Assigned"
    IN_TRANSIT = "In Transit"
    PROCESSING = "Processing"
    COMPLETED = "Completed"


class TrackingService:
    """Placeholder tracker: every lookup draws a fresh random status.

    Nothing is read from the donations table, so two calls for the same id can
    disagree.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def status(self, donation_id) -> TrackingStatus:
        return self.rng.choice(list(TrackingStatus))

    def snapshot(self, donation_id) -> dict:
        return {
            "donationId": str(donation_id),
            "status": self.status(donation_id),
            "updatedAt": datetime.now(timezone.utc).isoformat(),
        }
