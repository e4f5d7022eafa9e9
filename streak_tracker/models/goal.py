import uuid
from sqlalchemy import Column, String, Text, DateTime, func
from streak_tracker.database import Base


def new_id() -> str:
    return str(uuid.uuid4())


class Goal(Base):
    __tablename__ = "goals"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    deadline = Column(DateTime(timezone=True), nullable=False)  # validated at creation only
    reason = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
