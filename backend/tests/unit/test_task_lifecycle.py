"""
Unit tests for the task lifecycle policy.
"""

from datetime import date

import pytest

from taskplanner.core.exceptions import DateRangeError, InvariantViolationError
from taskplanner.models.recurrence import EveryNDays, NoRepeat, Yearly
from taskplanner.models.task import Delete, Reschedule, Task
from taskplanner.services.task_lifecycle import (
    complete_task,
    is_overdue,
    schedule_on_create,
)

TODAY = date(2024, 2, 1)


def _task(task_date: str, repeat: str = "") -> Task:
    return Task(id="1", date=task_date, title="Task", comment="", repeat=repeat)


class TestScheduleOnCreate:
    def test_missing_date_defaults_to_today(self):
        assert schedule_on_create(TODAY, None, NoRepeat()) == TODAY

    def test_past_one_shot_snaps_to_today(self):
        assert schedule_on_create(TODAY, date(2023, 12, 20), NoRepeat()) == TODAY

    def test_past_yearly_moves_to_next_occurrence(self):
        assert schedule_on_create(TODAY, date(2024, 1, 2), Yearly()) == date(2025, 1, 2)

    def test_past_every_n_days(self):
        assert schedule_on_create(TODAY, date(2024, 1, 8), EveryNDays(interval=10)) == date(
            2024, 2, 7
        )

    def test_today_is_kept(self):
        assert schedule_on_create(TODAY, TODAY, EveryNDays(interval=1)) == TODAY

    def test_future_date_is_kept(self):
        future = date(2024, 5, 5)
        assert schedule_on_create(TODAY, future, NoRepeat()) == future
        assert schedule_on_create(TODAY, future, Yearly()) == future


class TestCompleteTask:
    def test_one_shot_is_deleted(self):
        assert isinstance(complete_task(TODAY, _task("20240101")), Delete)

    def test_future_one_shot_is_deleted(self):
        assert isinstance(complete_task(TODAY, _task("20301231")), Delete)

    def test_overdue_recurring_is_rescheduled_like_next_occurrence(self):
        outcome = complete_task(date(2024, 1, 10), _task("20240108", "d 10"))
        assert outcome == Reschedule(date=date(2024, 1, 18))

    def test_yearly(self):
        outcome = complete_task(date(2024, 7, 1), _task("20240102", "y"))
        assert outcome == Reschedule(date=date(2025, 1, 2))

    def test_due_today_moves_forward(self):
        outcome = complete_task(TODAY, _task("20240201", "d 1"))
        assert outcome == Reschedule(date=date(2024, 2, 2))

    def test_future_task_moves_one_step(self):
        outcome = complete_task(TODAY, _task("20240301", "d 7"))
        assert outcome == Reschedule(date=date(2024, 3, 8))

    @pytest.mark.parametrize("repeat", ["d 1", "d 3", "d 400", "y"])
    def test_reschedule_never_before_today(self, repeat):
        outcome = complete_task(TODAY, _task("20230115", repeat))
        assert isinstance(outcome, Reschedule)
        assert outcome.date >= TODAY

    def test_repeated_completion_progresses(self):
        task = _task("20240201", "d 2")
        dates = []
        for _ in range(3):
            outcome = complete_task(TODAY, task)
            dates.append(outcome.date)
            task = task.model_copy(update={"date": outcome.date.strftime("%Y%m%d")})
        assert dates == [date(2024, 2, 3), date(2024, 2, 5), date(2024, 2, 7)]

    def test_multi_day_when_enabled(self):
        outcome = complete_task(TODAY, _task("20240129", "d 1,3,5"), allow_multi_day=True)
        assert outcome == Reschedule(date=date(2024, 2, 1))

    def test_corrupt_rule_is_invariant_violation(self):
        with pytest.raises(InvariantViolationError):
            complete_task(TODAY, _task("20240101", "every day"))

    def test_corrupt_date_is_invariant_violation(self):
        with pytest.raises(InvariantViolationError):
            complete_task(TODAY, _task("01.01.2024", "d 1"))

    @pytest.mark.parametrize("repeat", ["d 1", "y"])
    def test_last_calendar_day_cannot_advance(self, repeat):
        with pytest.raises(DateRangeError):
            complete_task(TODAY, _task("99991231", repeat))


class TestIsOverdue:
    def test_past(self):
        assert is_overdue(TODAY, _task("20240131"))

    def test_today_is_not_overdue(self):
        assert not is_overdue(TODAY, _task("20240201"))

    def test_future(self):
        assert not is_overdue(TODAY, _task("20240202"))
