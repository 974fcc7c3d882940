from pydantic import BaseModel, ConfigDict
from typing import Optional
from uuid import UUID


class ParticipantResponse(BaseModel):
    id: UUID
    name: Optional[str] = None
    email: str
    is_owner: bool
    is_confirmed: bool

    model_config = ConfigDict(from_attributes=True)
