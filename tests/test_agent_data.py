import uuid

import pytest

from kolosal_agent.agent_data import (
    Agent,
    AgentData,
    CommandResult,
    WorkflowResult,
    generate_uuid,
)


def test_typed_round_trip():
    data = AgentData()
    data.set("name", "alpha")
    data.set("count", 3)
    data.set("ratio", 0.25)
    data.set("flag", True)
    data.set("items", ["x", "y"])
    assert data.get_string("name") == "alpha"
    assert data.get_int("count") == 3
    assert data.get_double("ratio") == 0.25
    assert data.get_bool("flag") is True
    assert data.get_array_string("items") == ["x", "y"]


def test_defaults_for_missing_keys():
    data = AgentData()
    assert data.get_string("missing", "fallback") == "fallback"
    assert data.get_int("missing", 7) == 7
    assert data.get_double("missing", 1.5) == 1.5
    assert data.get_bool("missing", True) is True
    assert data.get_array_string("missing") == []


def test_wrong_type_falls_back_to_default():
    data = AgentData()
    data.set("text", "hello")
    data.set("flag", True)
    assert data.get_int("text", 9) == 9
    assert data.get_int("flag", 9) == 9
    assert data.get_bool("text", False) is False


def test_numbers_widen_and_render():
    data = AgentData()
    data.set("n", 4)
    assert data.get_double("n") == float(4)
    assert data.get_string("n") == str(4)


def test_keys_sorted_and_clear():
    data = AgentData()
    data.set("b", 1)
    data.set("a", 2)
    assert data.get_all_keys() == ["a", "b"]
    assert data.has_key("a")
    data.clear()
    assert data.get_all_keys() == []
    assert not data.has_key("a")


def test_json_round_trip_with_nesting():
    inner = AgentData()
    inner.set("depth", 2)
    data = AgentData()
    data.set("inner", inner)
    data.set("words", ["p", "q"])
    restored = AgentData()
    restored.from_json(data.to_json())
    assert restored == data
    assert restored.to_json()["inner"] == {"depth": 2}


def test_from_json_rejects_non_object():
    with pytest.raises(TypeError):
        AgentData().from_json(["not", "an", "object"])


def test_set_rejects_unsupported_value():
    with pytest.raises(TypeError):
        AgentData().set("bad", object())


def test_nested_value_is_copied():
    inner = AgentData()
    inner.set("v", 1)
    outer = AgentData()
    outer.set("inner", inner)
    inner.set("v", 2)
    assert outer.to_json()["inner"]["v"] == 1


def test_to_string_is_json_of_contents():
    data = AgentData()
    data.set("k", "v")
    import json

    assert json.loads(data.to_string()) == data.to_json()


def test_generate_uuid_unique_and_valid():
    first, second = generate_uuid(), generate_uuid()
    assert first != second
    assert str(uuid.UUID(first)) == first


def test_agent_capabilities():
    agent = Agent("id-1", "helper", "generic")
    assert agent.capabilities() == ["text_processing", "data_analysis", "task_execution"]
    assert agent.running is False


def test_result_defaults_independent():
    a, b = WorkflowResult(), WorkflowResult()
    a.step_outputs.append("x")
    assert b.step_outputs == []
    assert CommandResult().step_results == {}