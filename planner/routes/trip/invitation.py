from uuid import UUID
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from planner.schemas.trip.invite import InviteCreate, InviteCreated
from planner.services.trips.invite_service import create_trip_invite
from planner.core.database import get_db
from planner.core.mail import MailClient, get_mail_client
from planner.core.redis_lifecycle import get_cache

router = APIRouter(prefix="/trips", tags=["Trip Invites"])

@router.post("/{trip_id}/invites", response_model=InviteCreated, status_code=status.HTTP_201_CREATED)
async def send_trip_invite(
    trip_id: UUID,
    invite_data: InviteCreate,
    db: AsyncSession = Depends(get_db),
    mail: MailClient = Depends(get_mail_client),
    cache=Depends(get_cache)
):
    participant = await create_trip_invite(db, trip_id, invite_data, mail, cache)
    return InviteCreated(participant_id=participant.id)
