"""Typed key/value payloads passed between agents and functions."""

from __future__ import annotations

import json
import uuid
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any


def _normalise(value: Any) -> Any:
    """Convert a value into one that an AgentData may hold."""
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, AgentData):
        return AgentData(value._data)
    if isinstance(value, Mapping):
        return AgentData(value)
    if isinstance(value, (list, tuple)):
        return [_normalise(item) for item in value]
    raise TypeError(f"unsupported value type: {type(value).__name__}")


def _to_json(value: Any) -> Any:
    if isinstance(value, AgentData):
        return value.to_json()
    if isinstance(value, list):
        return [_to_json(item) for item in value]
    return value


class AgentData:
    """A mapping of string keys to strings, numbers, booleans, string lists and nested data."""

    __slots__ = ("_data",)

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = {}
        if initial:
            for key, value in initial.items():
                self.set(key, value)

    def set(self, key: str, value: Any) -> None:
        if not isinstance(key, str):
            raise TypeError("AgentData keys must be strings")
        self._data[key] = _normalise(value)

    def get_string(self, key: str, default: str = "") -> str:
        value = self._data.get(key)
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return default

    def get_int(self, key: str, default: int = 0) -> int:
        value = self._data.get(key)
        if isinstance(value, bool):
            return default
        if isinstance(value, (int, float)):
            return int(value)
        return default

    def get_double(self, key: str, default: float = 0.0) -> float:
        value = self._data.get(key)
        if isinstance(value, bool):
            return default
        if isinstance(value, (int, float)):
            return float(value)
        return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._data.get(key)
        return value if isinstance(value, bool) else default

    def get_array_string(self, key: str) -> list[str]:
        value = self._data.get(key)
        if isinstance(value, list):
            return [item for item in value if isinstance(item, str)]
        return []

    def has_key(self, key: str) -> bool:
        return key in self._data

    def clear(self) -> None:
        self._data.clear()

    def get_all_keys(self) -> list[str]:
        return sorted(self._data)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the raw stored value for a key."""
        return self._data.get(key, default)

    def to_string(self) -> str:
        return json.dumps(self.to_json(), sort_keys=True)

    def to_json(self) -> dict[str, Any]:
        return {key: _to_json(self._data[key]) for key in sorted(self._data)}

    def from_json(self, json_data: Mapping[str, Any]) -> None:
        if not isinstance(json_data, Mapping):
            raise TypeError("AgentData can only be loaded from a JSON object")
        for key, value in json_data.items():
            self.set(key, value)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_all_keys())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AgentData):
            return NotImplemented
        return self.to_json() == other.to_json()

    def __repr__(self) -> str:
        return f"AgentData({self.to_json()!r})"


def generate_uuid() -> str:
    """Return a new random identifier."""
    return str(uuid.uuid4())


@dataclass
class Agent:
    agent_id: str
    agent_name: str
    agent_type: str
    running: bool = False

    def capabilities(self) -> list[str]:
        return ["text_processing", "data_analysis", "task_execution"]


@dataclass
class CommandResult:
    success: bool = False
    message: str = ""
    data: str = ""
    error_message: str = ""
    total_execution_time_ms: int = 0
    step_results: dict[str, CommandResult] = field(default_factory=dict)


@dataclass
class WorkflowResult:
    workflow_id: str = ""
    success: bool = False
    error_message: str = ""
    final_output: str = ""
    step_outputs: list[str] = field(default_factory=list)
    total_execution_time_ms: int = 0
    step_results: dict[str, CommandResult] = field(default_factory=dict)


@dataclass
class CollaborationGroup:
    group_id: str = ""
    agent_ids: list[str] = field(default_factory=list)
    pattern_type: str = ""