from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import List
from datetime import datetime
from uuid import UUID

from planner.schemas.trip.participant import ParticipantResponse
from planner.utils.dates import ensure_utc


class TripCreate(BaseModel):
    destination: str = Field(min_length=4)
    starts_at: datetime
    ends_at: datetime
    owner_name: str
    owner_email: EmailStr
    emails_to_invite: List[EmailStr] = []

    @field_validator("starts_at", "ends_at")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class TripCreated(BaseModel):
    trip_id: UUID = Field(alias="tripId")

    model_config = ConfigDict(populate_by_name=True)


class TripResponse(BaseModel):
    id: UUID
    destination: str
    starts_at: datetime
    ends_at: datetime
    is_confirmed: bool
    participants: List[ParticipantResponse] = []

    model_config = ConfigDict(from_attributes=True)


class TripDetailsResponse(BaseModel):
    trip: TripResponse
