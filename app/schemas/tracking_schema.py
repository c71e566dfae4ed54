from pydantic import BaseModel

from app.services.tracking_service import TrackingStatus


class TrackingOut(BaseModel):
    success: bool = True
    donationId: str
    status: TrackingStatus
    updatedAt: str
