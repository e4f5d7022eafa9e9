from datetime import date, datetime, timedelta, timezone

import pytest

from streak_tracker.core.errors import AlreadyCompletedError, NotFoundError, ValidationError
from streak_tracker.models.streak import DailyCompletion
from streak_tracker.services.ledger import CompletionLedger

D = date(2026, 3, 1)


@pytest.fixture
def ledger(storage):
    return CompletionLedger(storage)


async def test_record_and_lookup_by_calendar_day(ledger, goal):
    await ledger.record_completion(goal.id, datetime(2026, 3, 1, 7, 30, tzinfo=timezone.utc))

    found = await ledger.get_completion_for_day(goal.id, datetime(2026, 3, 1, 22, 0, tzinfo=timezone.utc))
    assert found is not None
    assert found.date == D
    assert found.completed is True


async def test_second_completion_same_day_is_rejected(ledger, storage, goal):
    await ledger.record_completion(goal.id, D)
    with pytest.raises(AlreadyCompletedError):
        await ledger.record_completion(goal.id, D)

    assert len(await ledger.list_completions(goal.id)) == 1


async def test_unknown_goal(ledger):
    with pytest.raises(NotFoundError):
        await ledger.record_completion("no-such-goal", D)


async def test_out_of_order_day_is_rejected(ledger, goal):
    await ledger.record_completion(goal.id, D + timedelta(days=3))
    with pytest.raises(ValidationError):
        await ledger.record_completion(goal.id, D)


async def test_not_completed_row_is_flipped(ledger, storage, goal):
    await storage.add(DailyCompletion(goal_id=goal.id, date=D, completed=False))

    completion = await ledger.record_completion(goal.id, D)

    assert completion.completed is True
    assert len(await ledger.list_completions(goal.id)) == 1


async def test_list_is_ordered_by_date(ledger, storage, goal):
    # stored out of order on purpose; the ledger API itself refuses that
    for offset in (2, 0, 1):
        await storage.add(DailyCompletion(goal_id=goal.id, date=D + timedelta(days=offset), completed=True))

    listed = [c.date for c in await ledger.list_completions(goal.id)]
    assert listed == [D, D + timedelta(days=1), D + timedelta(days=2)]


async def test_unique_constraint_becomes_already_completed(storage, goal):
    await storage.add(DailyCompletion(goal_id=goal.id, date=D, completed=True))
    with pytest.raises(AlreadyCompletedError):
        await storage.add(DailyCompletion(goal_id=goal.id, date=D, completed=True))


async def test_list_for_unknown_goal_is_empty(ledger):
    assert await ledger.list_completions("no-such-goal") == []
