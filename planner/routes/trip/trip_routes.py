from uuid import UUID
from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession
from planner.schemas.trip.trip_schema import TripCreate, TripCreated, TripDetailsResponse
from planner.core.database import get_db
from planner.core.mail import MailClient, get_mail_client
from planner.core.redis_lifecycle import get_cache
from planner.services.trips.email_invite import generate_trip_page_link
from planner.services.trips.trip_service import TripService

router = APIRouter(prefix="/trips", tags=['Trips'])

async def get_trip_service(
    cache=Depends(get_cache),
    mail: MailClient = Depends(get_mail_client)
) -> TripService:
    return TripService(cache, mail)

@router.post("", response_model=TripCreated, status_code=status.HTTP_201_CREATED)
async def create_trip_route(
    trip: TripCreate,
    db: AsyncSession = Depends(get_db),
    trip_service: TripService = Depends(get_trip_service)
):
    new_trip = await trip_service.create_trip(db, trip)
    return TripCreated(trip_id=new_trip.id)

@router.get("/{trip_id}", response_model=TripDetailsResponse)
async def get_trip(
    trip_id: UUID,
    db: AsyncSession = Depends(get_db),
    trip_service: TripService = Depends(get_trip_service)
):
    return TripDetailsResponse(trip=await trip_service.get_trip_by_id(db, trip_id))

@router.get("/{trip_id}/confirm")
async def confirm_trip_route(
    trip_id: UUID,
    db: AsyncSession = Depends(get_db),
    trip_service: TripService = Depends(get_trip_service)
):
    await trip_service.confirm_trip(db, trip_id)
    return RedirectResponse(generate_trip_page_link(trip_id), status_code=status.HTTP_302_FOUND)
