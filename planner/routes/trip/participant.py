from uuid import UUID
from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession
from planner.core.database import get_db
from planner.core.redis_lifecycle import get_cache
from planner.services.trips.email_invite import generate_trip_page_link
from planner.services.trips.participant_service import confirm_participant

router = APIRouter(prefix="/trips", tags=["Participants"])

@router.get("/{trip_id}/confirm/{participant_id}")
async def confirm_participant_route(
    trip_id: UUID,
    participant_id: UUID,
    db: AsyncSession = Depends(get_db),
    cache=Depends(get_cache)
):
    await confirm_participant(db, trip_id, participant_id, cache)
    return RedirectResponse(generate_trip_page_link(trip_id), status_code=status.HTTP_302_FOUND)
