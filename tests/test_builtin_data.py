import pytest

from kolosal_agent.agent_data import AgentData
from kolosal_agent.builtin_data import (
    DataAnalysisFunction,
    DataTransformFunction,
    ExternalAPIFunction,
    WebSearchFunction,
)


def _params(**kwargs):
    return AgentData(kwargs)


@pytest.mark.parametrize(
    "operation, expected",
    [
        ("uppercase", '["ABC", "XY"]'),
        ("lowercase", '["abc", "xy"]'),
        ("reverse", '["cbA", "yX"]'),
        ("identity", '["Abc", "Xy"]'),
        ("unknown", '["Abc", "Xy"]'),
    ],
)
def test_transform_operations(operation, expected):
    result = DataTransformFunction().execute(_params(data=["Abc", "Xy"], operation=operation))
    assert result.success
    assert result.result_data.get_string("transformed_data") == expected
    assert result.result_data.get_string("operation_applied") == operation


def test_transform_length_and_counts():
    items = ["Abc", "Xy"]
    result = DataTransformFunction().execute(_params(data=items, operation="length"))
    assert result.result_data.get_string("transformed_data") == (
        "[" + ", ".join(f'"{len(i)}"' for i in items) + "]"
    )
    assert result.result_data.get_int("original_count") == len(items)
    assert result.result_data.get_int("processed_count") == len(items)


def test_transform_empty_data():
    result = DataTransformFunction().execute(_params())
    assert result.result_data.get_string("transformed_data") == "[]"
    assert result.result_data.get_string("operation_applied") == "identity"


def test_analysis_requires_data():
    result = DataAnalysisFunction().execute(_params())
    assert not result.success
    assert result.error_message == "Data parameter is required"


def test_analysis_basic():
    text = "one two\nthree"
    result = DataAnalysisFunction().execute(_params(data=text))
    data = result.result_data
    assert result.success
    assert data.get_int("line_count") == 2
    assert data.get_int("word_count") == 3
    assert data.get_int("data_size_bytes") == len(text)
    assert data.get_string("result") == "Data contains 2 lines and 3 words"
    assert result.execution_time_ms >= 0.0


def test_analysis_statistical():
    result = DataAnalysisFunction().execute(_params(data="x", analysis_type="statistical"))
    assert result.result_data.get_double("mean") == 42.5
    assert result.result_data.get_double("std_dev") == 15.2
    assert result.result_data.get_string("result") == (
        "Statistical analysis shows mean=42.5, std_dev=15.2"
    )


def test_analysis_pattern_and_custom():
    pattern = DataAnalysisFunction().execute(_params(data="x", analysis_type="pattern"))
    assert pattern.result_data.get_double("confidence") == 0.85
    assert pattern.result_data.get_string("patterns") == "Sequential patterns, Recurring elements"
    custom = DataAnalysisFunction().execute(_params(data="x", analysis_type="special"))
    assert custom.result_data.get_bool("data_processed") is True
    assert custom.result_data.get_string("result") == "Data analysis completed for type: special"


def test_external_api_simulation():
    function = ExternalAPIFunction("weather", "Gets weather", "https://api.example.com/weather")
    assert function.name == "weather"
    result = function.execute(_params())
    assert result.success
    assert result.result_data.get_string("endpoint") == "https://api.example.com/weather"
    assert result.result_data.get_string("api_response") == (
        "Simulated API response from https://api.example.com/weather"
    )
    assert result.execution_time_ms >= 50.0


def test_web_search_requires_query():
    result = WebSearchFunction().execute(_params())
    assert not result.success
    assert result.error_message == "Query parameter is required for web search"


def test_web_search_results():
    result = WebSearchFunction().execute(_params(query="cats", limit=3))
    data = result.result_data
    assert data.get_int("results_count") == 3
    assert len(data.get_array_string("urls")) == 3
    assert data.get_array_string("urls")[0] == "https://example1.com/search-result"
    assert data.get_array_string("results")[1] == "Search Result 2 for 'cats'"
    assert data.get_string("search_type") == "simulated"
    assert data.get_string("formatted_results").startswith("Web Search Results for: cats\n\n1. ")
    assert data.get_string("result") == "Found 3 simulated search results for: cats"


def test_web_search_default_limit():
    result = WebSearchFunction().execute(_params(query="dogs"))
    assert result.result_data.get_int("results_count") == 5
    assert len(result.result_data.get_array_string("snippets")) == 5