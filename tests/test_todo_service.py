"""Tests for the in-memory TodoService."""

from __future__ import annotations

import threading

from hello_todo_api.app.schemas.todo import TodoCreate
from hello_todo_api.app.services.todo_service import TodoService


class TestIndex:
    def test_should_start_empty(self, todo_service: TodoService) -> None:
        assert todo_service.index() == []

    def test_should_preserve_insertion_order(self, todo_service: TodoService) -> None:
        for title in ["first", "second", "third"]:
            todo_service.create(TodoCreate(title=title))

        assert [todo.title for todo in todo_service.index()] == ["first", "second", "third"]


class TestCreate:
    def test_created_todo_is_listed(self, todo_service: TodoService) -> None:
        created = todo_service.create(TodoCreate(title="buy milk"))

        listed = todo_service.index()
        assert [todo.title for todo in listed] == ["buy milk"]
        assert listed[0].id == created.id

    def test_ids_are_unique(self, todo_service: TodoService) -> None:
        ids = [todo_service.create(TodoCreate(title=f"t{i}")).id for i in range(10)]
        assert len(set(ids)) == 10

    def test_ids_are_not_reused_after_delete(self, todo_service: TodoService) -> None:
        first = todo_service.create(TodoCreate(title="a"))
        todo_service.delete(first.id)
        second = todo_service.create(TodoCreate(title="b"))
        assert second.id != first.id

    def test_concurrent_creates_get_distinct_ids(self, todo_service: TodoService) -> None:
        def worker() -> None:
            for i in range(50):
                todo_service.create(TodoCreate(title=f"todo {i}"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        todos = todo_service.index()
        assert len(todos) == 400
        assert len({todo.id for todo in todos}) == 400


class TestDelete:
    def test_should_remove_existing_todo(self, todo_service: TodoService) -> None:
        keep = todo_service.create(TodoCreate(title="keep"))
        drop = todo_service.create(TodoCreate(title="drop"))

        assert todo_service.delete(drop.id) is True
        assert todo_service.index() == [keep]
        assert todo_service.get(drop.id) is None

    def test_should_report_missing_todo_without_changes(self, todo_service: TodoService) -> None:
        todo = todo_service.create(TodoCreate(title="only"))

        assert todo_service.delete(todo.id + 100) is False
        assert todo_service.index() == [todo]

    def test_deleting_twice_reports_missing(self, todo_service: TodoService) -> None:
        todo = todo_service.create(TodoCreate(title="once"))
        assert todo_service.delete(todo.id) is True
        assert todo_service.delete(todo.id) is False


def test_clear_empties_collection(todo_service: TodoService) -> None:
    todo_service.create(TodoCreate(title="x"))
    todo_service.clear()
    assert todo_service.index() == []
