from sqlalchemy import Column, Integer, String, Date, DateTime, Boolean, ForeignKey, func
from streak_tracker.database import Base
from streak_tracker.models.goal import new_id


class ScreenTimeEntry(Base):
    __tablename__ = "screen_time_entries"

    id = Column(String(36), primary_key=True, default=new_id)
    goal_id = Column(String(36), ForeignKey("goals.id", ondelete="CASCADE"), nullable=False, index=True)
    app_name = Column(String, nullable=False)
    time_spent_minutes = Column(Integer, nullable=False)
    date = Column(Date, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class FocusSession(Base):
    __tablename__ = "focus_sessions"

    id = Column(String(36), primary_key=True, default=new_id)
    goal_id = Column(String(36), ForeignKey("goals.id", ondelete="CASCADE"), nullable=False, index=True)
    start_time = Column(DateTime(timezone=True), nullable=False)
    end_time = Column(DateTime(timezone=True), nullable=True)
    planned_duration_minutes = Column(Integer, nullable=False)
    actual_duration_minutes = Column(Integer, nullable=True)
    distraction_events = Column(Integer, nullable=False, default=0)
    completion_rate = Column(Integer, nullable=False, default=0)  # 0–100


class Reward(Base):
    __tablename__ = "rewards"

    id = Column(String(36), primary_key=True, default=new_id)
    goal_id = Column(String(36), ForeignKey("goals.id", ondelete="CASCADE"), nullable=False, index=True)
    reward_type = Column(String, nullable=False)  # streak, milestone, surprise, focus
    points_earned = Column(Integer, nullable=False, default=0)
    badge_name = Column(String, nullable=True)
    unlocked_at = Column(DateTime(timezone=True), server_default=func.now())
    claimed = Column(Boolean, nullable=False, default=False)


class ShameMetrics(Base):
    __tablename__ = "shame_metrics"

    id = Column(String(36), primary_key=True, default=new_id)
    goal_id = Column(String(36), ForeignKey("goals.id", ondelete="CASCADE"), nullable=False, unique=True)
    consecutive_skips = Column(Integer, nullable=False, default=0)
    total_skips = Column(Integer, nullable=False, default=0)
    social_media_minutes_today = Column(Integer, nullable=False, default=0)
    opportunity_cost_hours = Column(Integer, nullable=False, default=0)
    last_shame_notification = Column(DateTime(timezone=True), nullable=True)
