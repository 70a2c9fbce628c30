"""Tests for the YAML record store."""

import pytest

from aide.store import Aide, Store, StoreError, Task, split_entry

from conftest import read_store, write_store


class TestTasks:
    def test_empty_store(self, temp_home):
        store = Store(temp_home)
        assert store.task_names() == []
        assert store.get_task("anything") is None
        assert not store.path.exists()

    def test_put_and_get(self, temp_home):
        store = Store(temp_home)
        store.put_task(Task(name="fix_login", priority=2, created_at="2026-01-01 09:00:00"))

        task = Store(temp_home).get_task("fix_login")
        assert task.priority == 2
        assert task.status == "created"
        assert task.log == []
        assert read_store(temp_home)["tasks"]["fix_login"]["priority"] == 2

    def test_list_orders_by_priority_then_created(self, populated_home):
        names = [t.name for t in Store(populated_home).list_tasks()]
        assert names == ["fix_login", "write-report", "commands"]

    def test_delete(self, populated_home):
        store = Store(populated_home)
        assert store.delete_task("fix_login") is True
        assert store.delete_task("fix_login") is False
        assert "fix_login" not in read_store(populated_home)["tasks"]


class TestAides:
    def test_get(self, populated_home):
        aide = Store(populated_home).get_aide("commands")
        assert aide.aide_type == "text"
        assert len(aide.entries) == 2

    def test_put(self, temp_home):
        store = Store(temp_home)
        store.put_aide(Aide(name="journal", aide_type="file"))
        assert read_store(temp_home)["aides"]["journal"] == {"type": "file", "entries": []}

    def test_append_file(self, temp_home):
        store = Store(temp_home)
        path = store.append_aide_file("journal", "2026-01-01 09:00:00", "first")
        store.append_aide_file("journal", "2026-01-01 10:00:00", "second")
        assert path == temp_home / "aides" / "journal.txt"
        assert path.read_text() == (
            "# journal\n\nCreated: 2026-01-01 09:00:00\n\n"
            "2026-01-01 09:00:00\n* first\n"
            "2026-01-01 10:00:00\n* second\n"
        )


class TestConfigValues:
    def test_set_reports_new_keys(self, temp_home):
        store = Store(temp_home)
        assert store.set_value("debug_mode", "true") is True
        assert store.set_value("debug_mode", "false") is False
        assert store.get_value("debug_mode") == "false"

    def test_delete(self, populated_home):
        store = Store(populated_home)
        assert store.delete_value("debug_mode") is True
        assert store.config_keys() == ["api_endpoint", "database_url"]


class TestErrors:
    def test_malformed_yaml(self, temp_home):
        (temp_home / "aide.yaml").write_text("tasks: [unclosed\n")
        with pytest.raises(StoreError):
            Store(temp_home).task_names()

    def test_section_not_a_mapping(self, temp_home):
        write_store(temp_home, {"tasks": ["a", "b"]})
        with pytest.raises(StoreError):
            Store(temp_home).load()

    @pytest.mark.parametrize("text, message", [
        ("tasks:\n  fix_login: null\n", "is not a mapping"),
        ("aides:\n  commands: [a, b]\n", "is not a mapping"),
        ("config:\n  8080: web\n", "is not a string"),
        ("config:\n  debug_mode: {a: 1}\n", "is not a scalar"),
        ("tasks:\n  fix_login: {log: oops}\n", "Field 'log'"),
        ("aides:\n  commands: {entries: 3}\n", "Field 'entries'"),
        ("tasks:\n  fix_login: {priority: high}\n", "is not an integer"),
    ])
    def test_malformed_records(self, temp_home, text, message):
        (temp_home / "aide.yaml").write_text(text)
        with pytest.raises(StoreError, match=message):
            Store(temp_home).load()


class TestTaskFiles:
    def test_edit_round_trip(self, populated_home):
        store = Store(populated_home)
        task = store.get_task("write-report")
        path = store.write_task_file(task)
        assert path == populated_home / "tasks" / "write-report.txt"
        assert store.read_task_log("write-report") == ["[2026-01-01 10:00:00] draft"]

    def test_missing_marker_empties_log(self, populated_home):
        store = Store(populated_home)
        store.write_task_file(store.get_task("write-report"))
        store.task_file("write-report").write_text("Task: write-report\n")
        assert store.read_task_log("write-report") == []


def test_split_entry():
    assert split_entry("[2026-01-01 09:00:00] git log") == ("2026-01-01 09:00:00", "git log")
    assert split_entry("no stamp here") == ("", "no stamp here")


def test_clear(populated_home):
    store = Store(populated_home)
    store.clear()
    assert read_store(populated_home) == {"tasks": {}, "aides": {}, "config": {}}
