"""Registry and executor for agent functions."""

from __future__ import annotations

import logging
import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .agent_data import AgentData


@dataclass
class FunctionResult:
    success: bool = False
    error_message: str = ""
    result_data: AgentData = field(default_factory=AgentData)
    execution_time_ms: float = 0.0
    llm_response: str = ""


class AgentFunction(ABC):
    """Base for callable agent tools."""

    name: str = ""
    description: str = ""
    function_type: str = "builtin"

    @abstractmethod
    def execute(self, params: AgentData) -> FunctionResult:
        """Run the function with the given parameters."""


class FunctionManager:
    """Thread-safe registry of named agent functions."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._functions: dict[str, AgentFunction] = {}
        self._lock = threading.RLock()

    def register_function(self, function: AgentFunction) -> bool:
        with self._lock:
            self._functions[function.name] = function
        self._logger.info("Registered function: %s", function.name)
        return True

    def execute_function(self, name: str, params: AgentData) -> FunctionResult:
        with self._lock:
            function = self._functions.get(name)
            if function is None:
                return FunctionResult(False, f"Function not found: {name}")
            start = time.perf_counter()
            result = function.execute(params)
            elapsed_ms = (time.perf_counter() - start) * 1000.0
        if result.execution_time_ms == 0.0:
            result.execution_time_ms = elapsed_ms
        self._logger.debug("Function '%s' executed in %fms", name, result.execution_time_ms)
        return result

    def get_function_names(self) -> list[str]:
        with self._lock:
            return sorted(self._functions)

    def has_function(self, name: str) -> bool:
        with self._lock:
            return name in self._functions

    def get_function_description(self, name: str) -> str:
        with self._lock:
            function = self._functions.get(name)
            return function.description if function is not None else ""

    def get_available_tools_summary(self) -> str:
        with self._lock:
            lines = [f"Available Tools/Functions ({len(self._functions)} total):\n"]
            for name in sorted(self._functions):
                function = self._functions[name]
                lines.append(f"- {name} ({function.function_type}): {function.description}\n")
        return "".join(lines)

    def get_all_functions_with_descriptions(self) -> list[tuple[str, str]]:
        with self._lock:
            return [(name, self._functions[name].description) for name in sorted(self._functions)]