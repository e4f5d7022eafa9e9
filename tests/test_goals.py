from datetime import date, datetime, timedelta, timezone

import pytest

from streak_tracker.config import settings
from streak_tracker.core.errors import StorageError, ValidationError
from streak_tracker.models.streak import DailyCompletion, Streak
from streak_tracker.services.goals import GoalRegistry
from streak_tracker.services.tracking import TrackingService
from streak_tracker.storage.sql import SqlAlchemyStorage

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


async def test_create_goal_starts_zeroed_streak(registry, storage):
    goal = await registry.create_goal("Read", NOW + timedelta(days=10), now=NOW)

    assert goal.id
    assert goal.created_at is not None
    streak = await storage.get_streak(goal.id)
    assert (streak.current_streak, streak.best_streak, streak.total_completed) == (0, 0, 0)
    assert streak.last_completed_date is None


@pytest.mark.parametrize("name", ["", "   "])
async def test_blank_name_is_rejected(registry, name):
    with pytest.raises(ValidationError):
        await registry.create_goal(name, NOW + timedelta(days=1), now=NOW)


@pytest.mark.parametrize("deadline", [NOW, NOW - timedelta(seconds=1)])
async def test_deadline_must_be_in_the_future(registry, deadline):
    with pytest.raises(ValidationError):
        await registry.create_goal("Read", deadline, now=NOW)


class StreakFailingStorage(SqlAlchemyStorage):
    async def add(self, record):
        if isinstance(record, Streak):
            raise StorageError("streaks table unavailable")
        return await super().add(record)


async def test_goal_is_rolled_back_when_streak_creation_fails(session):
    storage = StreakFailingStorage(session)
    with pytest.raises(StorageError):
        await GoalRegistry(storage).create_goal("Read", NOW + timedelta(days=1), now=NOW)

    assert await storage.list_goals() == []


async def test_update_only_touches_given_fields(registry, goal):
    created_at = goal.created_at

    updated = await registry.update_goal(goal.id, {"name": "Run 10k"})

    assert updated.id == goal.id
    assert updated.name == "Run 10k"
    assert updated.reason == "Marathon in spring"
    assert updated.created_at == created_at


async def test_update_does_not_revalidate_deadline(registry, goal):
    past = datetime(2020, 1, 1, tzinfo=timezone.utc)
    updated = await registry.update_goal(goal.id, {"deadline": past})
    assert updated.deadline.replace(tzinfo=None) == past.replace(tzinfo=None)


async def test_update_rejects_immutable_fields_and_blank_name(registry, goal):
    with pytest.raises(ValidationError):
        await registry.update_goal(goal.id, {"created_at": NOW})
    with pytest.raises(ValidationError):
        await registry.update_goal(goal.id, {"name": " "})


async def test_update_missing_goal(registry):
    assert await registry.update_goal("missing", {"name": "x"}) is None


async def test_list_goals(registry, goal):
    other = await registry.create_goal("Meditate", NOW + timedelta(days=400))
    assert {g.id for g in await registry.list_goals()} == {goal.id, other.id}


async def test_delete_cascades_to_engine_state(registry, storage, goal):
    await storage.add(DailyCompletion(goal_id=goal.id, date=date(2026, 3, 1), completed=True))
    tracking = TrackingService(storage)
    await tracking.log_screen_time(goal.id, "tiktok", 45)
    await tracking.grant_reward(goal.id, "streak", points_earned=10)
    await tracking.update_shame_metrics(goal.id, {"total_skips": 3})

    assert await registry.delete_goal(goal.id) is True

    assert await registry.get_goal(goal.id) is None
    assert await storage.get_streak(goal.id) is None
    assert await storage.list_completions(goal.id) == []
    assert await storage.list_screen_time(goal.id) == []
    assert await storage.list_rewards(goal.id) == []
    assert await storage.get_shame_metrics(goal.id) is None


async def test_delete_missing_goal_returns_false(registry):
    assert await registry.delete_goal("missing") is False


async def test_rejected_update_leaves_goal_unchanged(registry, session, goal):
    with pytest.raises(ValidationError):
        await registry.update_goal(goal.id, {"name": "Run 10k", "deadline": None})

    assert goal.name == "Run 5k every day"
    assert goal not in session.dirty


async def test_naive_deadline_is_wall_clock_in_calendar_zone(registry, monkeypatch):
    monkeypatch.setattr(settings, "CALENDAR_TIMEZONE", "America/New_York")

    # 10:00 in New York is 15:00 UTC, three hours after NOW
    goal = await registry.create_goal("Read", datetime(2026, 3, 1, 10, 0), now=NOW)
    assert goal.id

    # 06:00 in New York is 11:00 UTC, already past
    with pytest.raises(ValidationError):
        await registry.create_goal("Read", datetime(2026, 3, 1, 6, 0), now=NOW)
