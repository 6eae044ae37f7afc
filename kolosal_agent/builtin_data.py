"""Built-in agent functions for data transformation, analysis, external APIs and web search."""

from __future__ import annotations

import logging
import random
import time

from .agent_data import AgentData
from .function_manager import AgentFunction, FunctionResult

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


def _transform(item: str, operation: str) -> str:
    if operation == "uppercase":
        return item.upper()
    if operation == "lowercase":
        return item.lower()
    if operation == "reverse":
        return item[::-1]
    if operation == "length":
        return str(len(item))
    return item


class DataTransformFunction(AgentFunction):
    name = "data_transform"
    description = "Transforms a list of strings: uppercase, lowercase, reverse, length or identity"

    def execute(self, params: AgentData) -> FunctionResult:
        input_data = params.get_array_string("data")
        operation = params.get_string("operation", "identity")
        transformed = [_transform(item, operation) for item in input_data]

        result = FunctionResult(True)
        data = result.result_data
        data.set("original_count", len(input_data))
        data.set("processed_count", len(transformed))
        data.set("operation_applied", operation)
        data.set("transformed_data", "[" + ", ".join(f'"{item}"' for item in transformed) + "]")
        return result


class DataAnalysisFunction(AgentFunction):
    name = "data_analysis"
    description = "Analyzes data: basic, statistical or pattern analysis"

    def execute(self, params: AgentData) -> FunctionResult:
        start = time.perf_counter()
        data = params.get_string("data")
        analysis_type = params.get_string("analysis_type", "basic")

        if not data:
            return FunctionResult(False, "Data parameter is required")

        result = FunctionResult(True)
        out = result.result_data
        if analysis_type == "basic":
            line_count = data.count("\n") + 1
            word_count = len(data.split())
            out.set("data_size_bytes", len(data.encode("utf-8")))
            out.set("line_count", line_count)
            out.set("word_count", word_count)
            out.set("analysis_type", analysis_type)
            out.set("summary", "Basic data analysis completed")
            out.set("result", f"Data contains {line_count} lines and {word_count} words")
        elif analysis_type == "statistical":
            out.set("mean", 42.5)
            out.set("median", 40.0)
            out.set("std_dev", 15.2)
            out.set("min", 10.0)
            out.set("max", 95.0)
            out.set("analysis_type", analysis_type)
            out.set("summary", "Statistical analysis completed")
            out.set("result", "Statistical analysis shows mean=42.5, std_dev=15.2")
        elif analysis_type == "pattern":
            patterns_found = "Sequential patterns, Recurring elements"
            out.set("patterns", patterns_found)
            out.set("confidence", 0.85)
            out.set("analysis_type", analysis_type)
            out.set("summary", "Pattern analysis completed")
            out.set("result", f"Found patterns: {patterns_found}")
        else:
            out.set("analysis_type", analysis_type)
            out.set("data_processed", True)
            out.set("summary", "Custom data analysis completed")
            out.set("result", f"Data analysis completed for type: {analysis_type}")

        result.execution_time_ms = _elapsed_ms(start)
        return result


class ExternalAPIFunction(AgentFunction):
    """Simulates a call to an external API endpoint."""

    function_type = "external_api"

    def __init__(self, name: str, description: str, endpoint: str) -> None:
        self.name = name
        self.description = description
        self.endpoint = endpoint

    def execute(self, params: AgentData) -> FunctionResult:
        start = time.perf_counter()
        time.sleep((50 + random.randrange(150)) / 1000.0)

        result = FunctionResult(True)
        result.result_data.set("api_response", f"Simulated API response from {self.endpoint}")
        result.result_data.set("endpoint", self.endpoint)
        result.execution_time_ms = _elapsed_ms(start)
        logger.info("External API function simulated call to: %s", self.endpoint)
        return result


class WebSearchFunction(AgentFunction):
    name = "web_search"
    description = "Returns simulated web search results for a query"

    def execute(self, params: AgentData) -> FunctionResult:
        start = time.perf_counter()
        query = params.get_string("query")
        if not query:
            return FunctionResult(False, "Query parameter is required for web search")

        limit = params.get_int("limit", 5)
        titles = [f"Search Result {i} for '{query}'" for i in range(1, limit + 1)]
        urls = [f"https://example{i}.com/search-result" for i in range(1, limit + 1)]
        snippets = [
            f"This is a simulated search result snippet for {query}. "
            "This result contains relevant information about your query."
            for _ in range(1, limit + 1)
        ]

        result = FunctionResult(True)
        out = result.result_data
        out.set("query", query)
        out.set("results_count", len(titles))
        out.set("results", titles)
        out.set("urls", urls)
        out.set("snippets", snippets)
        out.set("search_type", "simulated")

        parts = [f"Web Search Results for: {query}\n\n"]
        for number, (title, url, snippet) in enumerate(zip(titles, urls, snippets), start=1):
            parts.append(f"{number}. {title}\n   URL: {url}\n   Snippet: {snippet}\n\n")
        out.set("formatted_results", "".join(parts))
        out.set(
            "result", f"Found {len(titles)} simulated search results for: {query}"
        )
        result.execution_time_ms = _elapsed_ms(start)
        logger.info(
            "WebSearchFunction: Simulated search for '%s' returned %d results", query, len(titles)
        )
        return result