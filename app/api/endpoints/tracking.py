from fastapi import APIRouter, Depends

from app.api.deps import get_tracking_service
from app.schemas.tracking_schema import TrackingOut
from app.services.tracking_service import TrackingService

router = APIRouter(prefix="/api/tracking", tags=["tracking"])


@router.get("/{donation_id}", response_model=TrackingOut)
async def track_donation(donation_id: str, tracker: TrackingService = Depends(get_tracking_service)):
    return TrackingOut(**tracker.snapshot(donation_id))
