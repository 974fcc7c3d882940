import asyncio
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import update
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.attributes import set_committed_value
from planner.core.cache import RedisCache, invalidate_trip_cache, trip_key
from planner.core.config import settings
from planner.core.errors import InvalidDateRangeError, MailDispatchError, NotFoundError
from planner.core.logger import logger
from planner.core.mail import MailClient, MailDeliveryError
from planner.models.trips.participant import Participant
from planner.models.trips.trip_model import Trip
from planner.schemas.trip.trip_schema import TripCreate, TripResponse
from planner.services.trips.email_invite import participant_invite_email, trip_confirmation_email
from planner.utils.dates import ensure_utc


def validate_trip_dates(starts_at: datetime, ends_at: datetime, now: Optional[datetime] = None) -> None:
    now = now or datetime.now(timezone.utc)
    starts_at, ends_at = ensure_utc(starts_at), ensure_utc(ends_at)

    if starts_at < now:
        raise InvalidDateRangeError("Invalid start date. Start date must not be in the past.")
    if ends_at < starts_at:
        raise InvalidDateRangeError("Invalid end date. End date should be after start date.")


async def get_trip_with_participants(db: AsyncSession, trip_id: UUID) -> Trip:
    result = await db.execute(
        select(Trip)
        .options(selectinload(Trip.participants))
        .where(Trip.id == trip_id)
    )
    trip = result.scalar_one_or_none()

    if not trip:
        logger.warning(f"Trip not found: ID {trip_id}")
        raise NotFoundError("Trip not found")
    return trip


class TripService:
    def __init__(self, cache: RedisCache, mail: MailClient):
        self.cache = cache
        self.mail = mail

    async def create_trip(self, db: AsyncSession, trip_data: TripCreate) -> Trip:
        validate_trip_dates(trip_data.starts_at, trip_data.ends_at)

        owner = Participant(
            name=trip_data.owner_name,
            email=trip_data.owner_email,
            is_owner=True,
            is_confirmed=True,
        )
        invited = [Participant(email=email) for email in trip_data.emails_to_invite]

        new_trip = Trip(
            destination=trip_data.destination,
            starts_at=trip_data.starts_at,
            ends_at=trip_data.ends_at,
            participants=[owner, *invited],
        )
        db.add(new_trip)
        await db.commit()

        logger.info(f"Trip {new_trip.id} to {new_trip.destination} created with {len(invited)} invite(s)")

        # The trip is already stored, so a failed owner email only gets logged
        subject, html = trip_confirmation_email(new_trip)
        try:
            await self.mail.send(trip_data.owner_email, subject, html, to_name=trip_data.owner_name)
        except MailDeliveryError:
            logger.exception(f"Could not send trip confirmation email for trip {new_trip.id}")

        return new_trip

    async def get_trip_by_id(self, db: AsyncSession, trip_id: UUID) -> TripResponse:
        # The version is read before the database so a concurrent mutation
        # makes this snapshot land under a version nobody reads anymore
        cache_key = trip_key(trip_id)
        version = await self.cache.get_version(cache_key)
        cached_trip = await self.cache.get(cache_key, version=version)

        if cached_trip:
            logger.info(f"Trip ID {trip_id} retrieved from cache")
            return TripResponse.model_validate(cached_trip)

        # Get from database
        trip = TripResponse.model_validate(await get_trip_with_participants(db, trip_id))

        await self.cache.set(
            cache_key,
            trip.model_dump(mode="json"),
            expire=settings.TRIP_CACHE_TTL_SECONDS,
            version=version
        )

        logger.info(f"Trip ID {trip_id} retrieved from database")
        return trip

    async def confirm_trip(self, db: AsyncSession, trip_id: UUID) -> Trip:
        trip = await get_trip_with_participants(db, trip_id)

        if trip.is_confirmed:
            logger.info(f"Trip ID {trip_id} already confirmed")
            return trip

        # Only the request that flips the flag sends the emails
        result = await db.execute(
            update(Trip)
            .where(Trip.id == trip_id, Trip.is_confirmed.is_(False))
            .values(is_confirmed=True)
            .execution_options(synchronize_session=False)
        )
        await db.commit()
        set_committed_value(trip, "is_confirmed", True)

        if result.rowcount != 1:
            logger.info(f"Trip ID {trip_id} was confirmed by another request")
            return trip

        await invalidate_trip_cache(self.cache, trip_id)
        logger.info(f"Trip ID {trip_id} confirmed")

        inviter_name = trip.owner.name if trip.owner else None
        guests = [p for p in trip.participants if not p.is_owner]

        await self._notify_participants(trip, guests, inviter_name)
        return trip

    async def _notify_participants(
        self, trip: Trip, participants: List[Participant], inviter_name: Optional[str] = None
    ) -> None:
        async def notify(participant: Participant) -> str:
            subject, html = participant_invite_email(trip, participant.id, inviter_name)
            return await self.mail.send(participant.email, subject, html, to_name=participant.name)

        try:
            await asyncio.gather(*(notify(p) for p in participants))
        except MailDeliveryError as e:
            logger.exception(f"Confirmation emails for trip {trip.id} failed")
            raise MailDispatchError(f"Could not send confirmation emails: {e.recipient}") from e
