from sqlalchemy import Column, Integer, String, Date, Boolean, ForeignKey, UniqueConstraint
from streak_tracker.database import Base
from streak_tracker.models.goal import new_id


class Streak(Base):
    __tablename__ = "streaks"

    id = Column(String(36), primary_key=True, default=new_id)
    goal_id = Column(String(36), ForeignKey("goals.id", ondelete="CASCADE"), nullable=False, unique=True)
    current_streak = Column(Integer, nullable=False, default=0)
    best_streak = Column(Integer, nullable=False, default=0)
    total_completed = Column(Integer, nullable=False, default=0)
    last_completed_date = Column(Date, nullable=True)


class DailyCompletion(Base):
    __tablename__ = "daily_completions"

    id = Column(String(36), primary_key=True, default=new_id)
    goal_id = Column(String(36), ForeignKey("goals.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False)  # calendar day, never a timestamp
    completed = Column(Boolean, nullable=False, default=False)

    __table_args__ = (
        UniqueConstraint("goal_id", "date", name="uq_completion_goal_day"),
    )
