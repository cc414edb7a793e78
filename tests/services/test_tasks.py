"""Tests for TaskService: create, complete, list."""

from __future__ import annotations

import pytest

from todoctl.domain.errors import NotFoundError
from todoctl.domain.ids import validate_id
from todoctl.domain.lifecycle import TaskStatus
from todoctl.domain.models import Task
from todoctl.infrastructure.tracker import Tracker
from todoctl.services.owners import OwnerService
from todoctl.services.tasks import TaskService


class TestCreateTask:
    def test_created_pending(self, tracker: Tracker) -> None:
        task = TaskService(tracker).create_task("USR-0001", "Buy milk")
        assert task.status is TaskStatus.PENDING
        assert task.owner_id == "USR-0001"
        assert task.title == "Buy milk"
        assert validate_id(task.id, "task")

    def test_persists_task(self, tracker: Tracker) -> None:
        task = TaskService(tracker).create_task("USR-0001", "Buy milk")
        assert tracker.tasks.find_by_id(task.id) == task

    def test_fresh_ids(self, tracker: Tracker) -> None:
        svc = TaskService(tracker)
        ids = {svc.create_task("USR-0001", f"task {i}").id for i in range(10)}
        assert len(ids) == 10
        assert len(svc.list_tasks_by_owner("USR-0001")) == 10

    def test_unknown_owner_allowed_by_default(self, tracker: Tracker) -> None:
        task = TaskService(tracker).create_task("no-such-owner", "Orphan")
        assert tracker.tasks.find_by_id(task.id).owner_id == "no-such-owner"


class TestCreateTaskRequireOwner:
    def test_unknown_owner_rejected(self, strict_tracker: Tracker) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            TaskService(strict_tracker).create_task("no-such-owner", "Orphan")
        assert exc_info.value.kind == "owner"
        assert len(strict_tracker.tasks) == 0

    def test_known_owner_accepted(self, strict_tracker: Tracker) -> None:
        owner = OwnerService(strict_tracker).create_owner("Alice", "admin")
        task = TaskService(strict_tracker).create_task(owner.id, "Buy milk")
        assert task.owner_id == owner.id


class TestCompleteTask:
    def test_transitions_to_completed(self, tracker: Tracker) -> None:
        svc = TaskService(tracker)
        task = svc.create_task("USR-0001", "Buy milk")
        svc.complete_task(task.id)
        assert tracker.tasks.find_by_id(task.id).status is TaskStatus.COMPLETED

    def test_second_completion_is_idempotent(self, tracker: Tracker) -> None:
        svc = TaskService(tracker)
        task = svc.create_task("USR-0001", "Buy milk")
        svc.complete_task(task.id)
        svc.complete_task(task.id)
        stored = tracker.tasks.find_by_id(task.id)
        assert stored.status is TaskStatus.COMPLETED
        assert stored.title == "Buy milk"

    def test_completes_in_progress_task(self, tracker: Tracker) -> None:
        tracker.tasks.save(
            Task(id="TASK-0042", owner_id="o", title="x", status=TaskStatus.IN_PROGRESS)
        )
        TaskService(tracker).complete_task("TASK-0042")
        assert tracker.tasks.find_by_id("TASK-0042").status is TaskStatus.COMPLETED

    def test_unknown_task_raises(self, tracker: Tracker) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            TaskService(tracker).complete_task("TASK-9999")
        assert exc_info.value.entity_id == "TASK-9999"

    def test_second_completion_still_calls_update(self, tracker: Tracker) -> None:
        calls: list[Task] = []
        original_update = tracker.tasks.update

        def recording_update(task: Task) -> None:
            calls.append(task)
            original_update(task)

        tracker.tasks.update = recording_update  # type: ignore[method-assign]
        svc = TaskService(tracker)
        task = svc.create_task("o", "x")
        svc.complete_task(task.id)
        svc.complete_task(task.id)
        assert len(calls) == 2

    def test_other_tasks_untouched(self, tracker: Tracker) -> None:
        svc = TaskService(tracker)
        first = svc.create_task("o", "first")
        second = svc.create_task("o", "second")
        svc.complete_task(first.id)
        assert tracker.tasks.find_by_id(second.id).status is TaskStatus.PENDING


class TestListTasksByOwner:
    def test_filters_by_owner(self, tracker: Tracker) -> None:
        svc = TaskService(tracker)
        a1 = svc.create_task("alice", "a1")
        svc.create_task("bob", "b1")
        a2 = svc.create_task("alice", "a2")
        assert {t.id for t in svc.list_tasks_by_owner("alice")} == {a1.id, a2.id}

    def test_no_tasks(self, tracker: Tracker) -> None:
        assert TaskService(tracker).list_tasks_by_owner("alice") == []


class TestScenarios:
    def test_buy_milk_lifecycle(self, tracker: Tracker) -> None:
        owner = OwnerService(tracker).create_owner("Alice", "admin")
        svc = TaskService(tracker)

        task = svc.create_task(owner.id, "Buy milk")
        assert tracker.tasks.find_by_id(task.id).status is TaskStatus.PENDING

        svc.complete_task(task.id)
        assert tracker.tasks.find_by_id(task.id).status is TaskStatus.COMPLETED

        listed = svc.list_tasks_by_owner(owner.id)
        assert len(listed) == 1
        assert listed[0].title == "Buy milk"
        assert listed[0].status is TaskStatus.COMPLETED

    def test_never_created_task_not_found(self, tracker: Tracker) -> None:
        with pytest.raises(NotFoundError):
            tracker.tasks.find_by_id("TASK-0001")
