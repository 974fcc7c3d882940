from pydantic import BaseModel, ConfigDict, EmailStr, Field
from uuid import UUID


# When someone invites a new participant to a trip
class InviteCreate(BaseModel):
    email: EmailStr


class InviteCreated(BaseModel):
    participant_id: UUID = Field(alias="participantId")

    model_config = ConfigDict(populate_by_name=True)
