from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from planner.core.cache import RedisCache, invalidate_trip_cache
from planner.core.errors import NotFoundError
from planner.core.logger import logger
from planner.models.trips.participant import Participant
from planner.models.trips.trip_model import Trip


async def confirm_participant(
        db: AsyncSession,
        trip_id: UUID,
        participant_id: UUID,
        cache: RedisCache,
) -> Participant:
    trip = await db.get(Trip, trip_id)
    if not trip:
        logger.warning(f"Trip not found: ID {trip_id}")
        raise NotFoundError("Trip not found")

    result = await db.execute(
        select(Participant).where(
            Participant.id == participant_id,
            Participant.trip_id == trip_id,
        )
    )
    participant = result.scalar_one_or_none()

    if not participant:
        logger.warning(f"Participant {participant_id} not found on trip {trip_id}")
        raise NotFoundError("Participant not found")

    if participant.is_confirmed:
        return participant

    participant.is_confirmed = True
    await db.commit()
    await invalidate_trip_cache(cache, trip_id)

    logger.info(f"Participant {participant_id} confirmed for trip {trip_id}")
    return participant
