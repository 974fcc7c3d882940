from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from planner.core.cache import RedisCache, invalidate_trip_cache
from planner.core.errors import MailDispatchError
from planner.core.logger import logger
from planner.core.mail import MailClient, MailDeliveryError
from planner.models.trips.participant import Participant
from planner.schemas.trip.invite import InviteCreate
from planner.services.trips.email_invite import participant_invite_email
from planner.services.trips.trip_service import get_trip_with_participants


async def create_trip_invite(
        db: AsyncSession,
        trip_id: UUID,
        invite_data: InviteCreate,
        mail: MailClient,
        cache: RedisCache,
) -> Participant:
    trip = await get_trip_with_participants(db, trip_id)

    participant = Participant(trip_id=trip.id, email=invite_data.email)
    db.add(participant)
    await db.commit()
    await invalidate_trip_cache(cache, trip.id)

    logger.info(f"Participant {participant.id} invited to trip {trip.id}")

    # The participant stays stored even if the email cannot be delivered
    inviter_name = trip.owner.name if trip.owner else None
    subject, html = participant_invite_email(trip, participant.id, inviter_name)
    try:
        await mail.send(participant.email, subject, html)
    except MailDeliveryError as e:
        logger.exception(f"Invite email for participant {participant.id} failed")
        raise MailDispatchError(f"Could not send invite email to {e.recipient}") from e

    return participant
