from datetime import date, datetime, timedelta, timezone

import pytest

from streak_tracker.core.errors import NotFoundError, ValidationError
from streak_tracker.services.tracking import TrackingService

D = date(2026, 3, 1)


@pytest.fixture
def tracking(storage):
    return TrackingService(storage)


async def test_screen_time_totals_per_day(tracking, goal):
    await tracking.log_screen_time(goal.id, "instagram", 30, day=D)
    await tracking.log_screen_time(goal.id, "youtube", 45, day=D)
    await tracking.log_screen_time(goal.id, "youtube", 60, day=D - timedelta(days=1))

    assert await tracking.screen_time_for_day(goal.id, D) == 75
    assert await tracking.screen_time_for_day(goal.id, D + timedelta(days=1)) == 0

    entries = await tracking.list_screen_time(goal.id)
    assert [e.date for e in entries][0] == D
    assert len(entries) == 3


async def test_screen_time_requires_goal(tracking):
    with pytest.raises(NotFoundError):
        await tracking.log_screen_time("missing", "tiktok", 10)


async def test_focus_session_lifecycle(tracking, goal):
    started = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)
    session = await tracking.start_session(goal.id, start_time=started, planned_duration_minutes=25)
    assert session.distraction_events == 0
    assert session.completion_rate == 0

    updated = await tracking.update_session(
        session.id, {"actual_duration_minutes": 20, "completion_rate": 80, "distraction_events": 2}
    )
    assert updated.actual_duration_minutes == 20
    assert updated.completion_rate == 80

    assert [s.id for s in await tracking.list_sessions(goal.id)] == [session.id]


async def test_focus_session_update_errors(tracking, goal):
    with pytest.raises(NotFoundError):
        await tracking.update_session("missing", {"completion_rate": 10})

    session = await tracking.start_session(
        goal.id, start_time=datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc), planned_duration_minutes=25
    )
    with pytest.raises(ValidationError):
        await tracking.update_session(session.id, {"goal_id": "other"})


async def test_claim_reward_once(tracking, goal):
    reward = await tracking.grant_reward(goal.id, "milestone", points_earned=50, badge_name="First week")
    assert reward.claimed is False

    claimed = await tracking.claim_reward(reward.id)
    assert claimed.claimed is True
    again = await tracking.claim_reward(reward.id)
    assert again.claimed is True

    assert len(await tracking.list_rewards(goal.id)) == 1


async def test_reward_errors(tracking, goal):
    with pytest.raises(ValidationError):
        await tracking.grant_reward(goal.id, "confetti")
    with pytest.raises(NotFoundError):
        await tracking.claim_reward("missing")


async def test_shame_metrics_created_on_first_update(tracking, goal):
    assert await tracking.get_shame_metrics(goal.id) is None

    metrics = await tracking.update_shame_metrics(goal.id, {"consecutive_skips": 2, "total_skips": 5})
    assert (metrics.consecutive_skips, metrics.total_skips) == (2, 5)
    assert metrics.social_media_minutes_today == 0
    assert metrics.last_shame_notification is None

    notified = datetime(2026, 3, 1, 20, 0, tzinfo=timezone.utc)
    again = await tracking.update_shame_metrics(
        goal.id, {"consecutive_skips": 0, "last_shame_notification": notified}
    )
    assert again.id == metrics.id
    assert (again.consecutive_skips, again.total_skips) == (0, 5)
    assert (await tracking.get_shame_metrics(goal.id)).id == metrics.id


async def test_shame_metrics_errors(tracking, goal):
    with pytest.raises(NotFoundError):
        await tracking.update_shame_metrics("missing", {"total_skips": 1})
    with pytest.raises(ValidationError):
        await tracking.update_shame_metrics(goal.id, {"goal_id": "other"})
    with pytest.raises(ValidationError):
        await tracking.update_shame_metrics(goal.id, {"total_skips": None})
