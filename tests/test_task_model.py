from datetime import datetime

from basket.core import Priority, Task, generate_task_id, truncate
from basket.core import task as task_module


def test_display_title_keeps_short_titles():
    task = Task(id="1", title="Buy milk")
    assert task.display_title() == "Buy milk"


def test_display_title_truncates_at_twenty_chars():
    task = Task(id="1", title="A very long task title indeed")
    assert task.display_title() == "A very long task ..."
    assert len(task.display_title()) == 20
    assert task.title == "A very long task title indeed"


def test_exactly_twenty_chars_not_truncated():
    assert truncate("x" * 20, 20) == "x" * 20
    assert truncate("x" * 21, 20) == "x" * 17 + "..."


def test_create_assigns_id_timestamp_and_defaults():
    task = Task.create("Write report", Priority.HIGH)
    assert task.id.isdigit()
    assert task.title == "Write report"
    assert task.description == ""
    assert task.completed is False
    assert task.priority is Priority.HIGH
    parsed = datetime.fromisoformat(task.created_at)
    assert parsed.tzinfo is not None


def test_generated_ids_are_unique_even_when_clock_stalls(monkeypatch):
    monkeypatch.setattr(task_module.time, "time_ns", lambda: 1_700_000_000_000_000_000)
    ids = [generate_task_id() for _ in range(5)]
    assert len(set(ids)) == 5
    assert [int(i) for i in ids] == sorted(int(i) for i in ids)


def test_to_dict_field_order():
    task = Task(id="42", title="t", description="d", completed=True, priority=Priority.LOW, created_at="2024-05-01T10:00:00+02:00")
    data = task.to_dict()
    assert list(data) == ["id", "title", "description", "completed", "priority", "created_at"]
    assert data["priority"] == 1
    assert isinstance(data["priority"], int)


def test_from_dict_tolerates_missing_fields():
    task = Task.from_dict({"id": 17, "title": "legacy"})
    assert task.id == "17"
    assert task.description == ""
    assert task.completed is False
    assert task.priority is Priority.MEDIUM
    assert task.created_at == ""


def test_entries_without_id_get_distinct_ids():
    first = Task.from_dict({"title": "a"})
    second = Task.from_dict({"title": "b", "id": ""})
    assert first.id and second.id
    assert first.id != second.id
    assert Task.from_dict({"id": "keep", "title": "c"}).id == "keep"
