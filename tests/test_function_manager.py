import pytest

from kolosal_agent.agent_data import AgentData
from kolosal_agent.function_manager import AgentFunction, FunctionManager, FunctionResult


class Doubler(AgentFunction):
    name = "double"
    description = "Doubles a number"
    function_type = "builtin"

    def execute(self, params):
        result = FunctionResult(True)
        result.result_data.set("result", params.get_int("n") * 2)
        return result


class Timed(AgentFunction):
    name = "timed"
    description = "Reports its own time"

    def execute(self, params):
        return FunctionResult(True, execution_time_ms=12.5)


@pytest.fixture
def manager():
    fm = FunctionManager()
    fm.register_function(Doubler())
    fm.register_function(Timed())
    return fm


def test_execute_registered(manager):
    params = AgentData()
    params.set("n", 21)
    result = manager.execute_function("double", params)
    assert result.success
    assert result.result_data.get_int("result") == 42
    assert result.execution_time_ms >= 0.0


def test_execute_missing(manager):
    result = manager.execute_function("nope", AgentData())
    assert result.success is False
    assert result.error_message == "Function not found: nope"


def test_reported_time_kept(manager):
    assert manager.execute_function("timed", AgentData()).execution_time_ms == 12.5


def test_registry_queries(manager):
    assert manager.get_function_names() == ["double", "timed"]
    assert manager.has_function("double")
    assert not manager.has_function("other")
    assert manager.get_function_description("double") == Doubler.description
    assert manager.get_function_description("other") == ""


def test_summary_format(manager):
    summary = manager.get_available_tools_summary()
    assert summary.startswith("Available Tools/Functions (2 total):\n")
    assert f"- double (builtin): {Doubler.description}\n" in summary


def test_descriptions_pairs(manager):
    assert manager.get_all_functions_with_descriptions() == [
        ("double", Doubler.description),
        ("timed", Timed.description),
    ]


def test_register_replaces_same_name(manager):
    class Other(Doubler):
        description = "replacement"

    assert manager.register_function(Other()) is True
    assert manager.get_function_description("double") == "replacement"
    assert len(manager.get_function_names()) == 2