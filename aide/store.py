"""YAML-backed storage for tasks, aides and configuration values.

Everything lives in a single ``aide.yaml`` under the data directory::

    tasks:
      fix_login: {priority: 2, status: in_progress, created_at: ..., log: [...]}
    aides:
      commands: {type: text, entries: [...]}
    config:
      database_url: postgres://...

File-type aides additionally append their entries to ``aides/<name>.txt``.
"""

import re
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path

import yaml

from .schema import (
    DEFAULT_AIDE_TYPE,
    DEFAULT_PRIORITY,
    DEFAULT_TASK_STATUS,
    TIMESTAMP_FORMAT,
)

STORE_FILENAME = "aide.yaml"
SECTIONS = ("tasks", "aides", "config")
TASK_LOG_MARKER = "--- Task Log ---"

_ENTRY_RE = re.compile(r"^\[([^\]]*)\] (.*)$", re.DOTALL)


class StoreError(Exception):
    """The data file cannot be read or has an unexpected shape."""


def timestamp() -> str:
    return datetime.now().strftime(TIMESTAMP_FORMAT)


def split_entry(entry: str) -> tuple[str, str]:
    """Split "[stamp] text" into (stamp, text); stamp is "" when absent."""
    match = _ENTRY_RE.match(entry)
    if match is None:
        return "", entry
    return match.group(1), match.group(2)


@dataclass
class Task:
    name: str
    priority: int = DEFAULT_PRIORITY
    status: str = DEFAULT_TASK_STATUS
    created_at: str = field(default_factory=timestamp)
    log: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        data = asdict(self)
        del data["name"]
        return data


@dataclass
class Aide:
    name: str
    aide_type: str = DEFAULT_AIDE_TYPE
    entries: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"type": self.aide_type, "entries": list(self.entries)}


class Store:
    """Read-modify-write access to aide.yaml."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        self._data: dict | None = None

    @property
    def path(self) -> Path:
        return self.data_dir / STORE_FILENAME

    def load(self) -> dict:
        if self._data is not None:
            return self._data

        data = {}
        if self.path.exists():
            try:
                data = yaml.safe_load(self.path.read_text()) or {}
            except yaml.YAMLError as e:
                raise StoreError(f"Cannot parse {self.path}: {e}") from e
            if not isinstance(data, dict):
                raise StoreError(f"Unexpected content in {self.path}")

        for section in SECTIONS:
            value = data.get(section) or {}
            if not isinstance(value, dict):
                raise StoreError(f"Section '{section}' in {self.path} is not a mapping")
            data[section] = value

        self._validate(data)
        self._data = data
        return data

    def _validate(self, data: dict) -> None:
        """Reject hand-edited records the commands cannot work with."""
        for section in SECTIONS:
            for key, record in data[section].items():
                where = f"'{key}' in section '{section}' of {self.path}"
                if not isinstance(key, str):
                    raise StoreError(f"Key {where} is not a string")
                if section == "config":
                    if isinstance(record, (dict, list)):
                        raise StoreError(f"Value of {where} is not a scalar")
                    continue
                if not isinstance(record, dict):
                    raise StoreError(f"Record {where} is not a mapping")

                list_field = "log" if section == "tasks" else "entries"
                if not isinstance(record.get(list_field) or [], list):
                    raise StoreError(f"Field '{list_field}' of {where} is not a list")
                if section == "tasks" and not isinstance(
                    record.get("priority", DEFAULT_PRIORITY), int
                ):
                    raise StoreError(f"Priority of {where} is not an integer")

    def save(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            yaml.safe_dump(self.load(), default_flow_style=False, sort_keys=True)
        )

    # Tasks

    def task_names(self) -> list[str]:
        return sorted(self.load()["tasks"])

    def get_task(self, name: str) -> Task | None:
        raw = self.load()["tasks"].get(name)
        if raw is None:
            return None
        return Task(
            name=name,
            priority=int(raw.get("priority", DEFAULT_PRIORITY)),
            status=raw.get("status", DEFAULT_TASK_STATUS),
            created_at=str(raw.get("created_at", "")),
            log=list(raw.get("log") or []),
        )

    def list_tasks(self) -> list[Task]:
        """Tasks ordered by priority, then creation time."""
        tasks = [self.get_task(name) for name in self.task_names()]
        return sorted(tasks, key=lambda t: (t.priority, t.created_at, t.name))

    def put_task(self, task: Task) -> None:
        self.load()["tasks"][task.name] = task.to_dict()
        self.save()

    def delete_task(self, name: str) -> bool:
        if self.load()["tasks"].pop(name, None) is None:
            return False
        self.save()
        return True

    # Aides

    def aide_names(self) -> list[str]:
        return sorted(self.load()["aides"])

    def get_aide(self, name: str) -> Aide | None:
        raw = self.load()["aides"].get(name)
        if raw is None:
            return None
        return Aide(
            name=name,
            aide_type=raw.get("type", DEFAULT_AIDE_TYPE),
            entries=list(raw.get("entries") or []),
        )

    def list_aides(self) -> list[Aide]:
        return [self.get_aide(name) for name in self.aide_names()]

    def put_aide(self, aide: Aide) -> None:
        self.load()["aides"][aide.name] = aide.to_dict()
        self.save()

    def delete_aide(self, name: str) -> bool:
        if self.load()["aides"].pop(name, None) is None:
            return False
        self.save()
        return True

    def aide_file(self, name: str) -> Path:
        return self.data_dir / "aides" / f"{name}.txt"

    def append_aide_file(self, name: str, stamp: str, content: str) -> Path:
        """Append an entry to a file-type aide's text file."""
        file_path = self.aide_file(name)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        if file_path.exists():
            existing = file_path.read_text()
        else:
            existing = f"# {name}\n\nCreated: {stamp}\n\n"
        file_path.write_text(f"{existing}{stamp}\n* {content}\n")
        return file_path

    def write_aide_file(self, aide: Aide) -> Path:
        """Create an aide's text file from its entries unless it exists."""
        file_path = self.aide_file(aide.name)
        if file_path.exists():
            return file_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        lines = [f"# {aide.name}", ""]
        for entry in aide.entries:
            stamp, text = split_entry(entry)
            lines.extend([stamp, f"* {text}"] if stamp else [f"* {text}"])
        file_path.write_text("\n".join(lines) + "\n")
        return file_path

    def task_file(self, name: str) -> Path:
        return self.data_dir / "tasks" / f"{name}.txt"

    def write_task_file(self, task: Task) -> Path:
        """Render a task and its log to tasks/<name>.txt for editing."""
        file_path = self.task_file(task.name)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        header = (
            f"Task: {task.name}\nStatus: {task.status}\nPriority: {task.priority}\n"
            f"Created: {task.created_at}\n\n{TASK_LOG_MARKER}\n"
        )
        file_path.write_text(header + "".join(f"{entry}\n" for entry in task.log))
        return file_path

    def read_task_log(self, name: str) -> list[str]:
        """Log lines below the marker of an edited task file."""
        lines = self.task_file(name).read_text().splitlines()
        if TASK_LOG_MARKER not in lines:
            return []
        start = lines.index(TASK_LOG_MARKER) + 1
        return [line for line in lines[start:] if line.strip()]

    # Configuration values

    def config_keys(self) -> list[str]:
        return sorted(self.load()["config"])

    def get_value(self, key: str) -> str | None:
        value = self.load()["config"].get(key)
        return None if value is None else str(value)

    def set_value(self, key: str, value: str) -> bool:
        """Store a value. Returns True if the key is new."""
        config = self.load()["config"]
        is_new = key not in config
        config[key] = value
        self.save()
        return is_new

    def delete_value(self, key: str) -> bool:
        if self.load()["config"].pop(key, None) is None:
            return False
        self.save()
        return True

    def clear(self) -> None:
        """Remove every task, aide and configuration value."""
        data = self.load()
        for section in SECTIONS:
            data[section] = {}
        self.save()
