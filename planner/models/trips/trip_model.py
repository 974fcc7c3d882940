from sqlalchemy import Boolean, Column, DateTime, String, Uuid, func
from planner.core.database import Base
from sqlalchemy.orm import relationship
import uuid


class Trip(Base):
    __tablename__ = "trips"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    destination = Column(String, nullable=False)
    starts_at = Column(DateTime(timezone=True), nullable=False)
    ends_at = Column(DateTime(timezone=True), nullable=False)
    is_confirmed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    participants = relationship(
        "Participant",
        back_populates="trip",
        cascade="all, delete",
    )

    @property
    def owner(self):
        return next((p for p in self.participants if p.is_owner), None)
