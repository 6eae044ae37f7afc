"""Simple built-in agent functions: arithmetic, echo, delay and text analysis."""

from __future__ import annotations

import time

from .agent_data import AgentData
from .function_manager import AgentFunction, FunctionResult

POSITIVE_WORDS = ("good", "great", "excellent", "amazing", "wonderful", "fantastic")
NEGATIVE_WORDS = ("bad", "terrible", "awful", "horrible", "disappointing")
SUMMARY_LIMIT = 100
MOCK_READABILITY_SCORE = 8.2


def _analyze(text: str) -> FunctionResult:
    lower_text = text.lower()
    positive_score = sum(word in lower_text for word in POSITIVE_WORDS)
    negative_score = sum(word in lower_text for word in NEGATIVE_WORDS)
    if positive_score > negative_score:
        sentiment = "positive"
    elif negative_score > positive_score:
        sentiment = "negative"
    else:
        sentiment = "neutral"

    result = FunctionResult(True)
    data = result.result_data
    data.set("word_count", len(text.split()))
    data.set("character_count", len(text))
    data.set("char_count_no_spaces", sum(c not in " \t\n" for c in text))
    data.set("sentiment", sentiment)
    data.set("positive_score", positive_score)
    data.set("negative_score", negative_score)
    data.set("readability_score", MOCK_READABILITY_SCORE)
    data.set("result", "Text analyzed successfully")
    return result


def _summarize(text: str) -> FunctionResult:
    summary = text[:SUMMARY_LIMIT]
    if len(text) > SUMMARY_LIMIT:
        summary += "..."
    result = FunctionResult(True)
    data = result.result_data
    data.set("summary", summary)
    data.set("original_length", len(text))
    data.set("summary_length", len(summary))
    data.set("result", summary)
    return result


def _tokenize(text: str) -> FunctionResult:
    tokens = text.split()
    result = FunctionResult(True)
    result.result_data.set("token_count", len(tokens))
    result.result_data.set("result", f"Text tokenized into {len(tokens)} tokens")
    return result


def _process_text(params: AgentData) -> FunctionResult:
    text = params.get_string("text")
    operation = params.get_string("operation", "analyze")
    handlers = {"analyze": _analyze, "summarize": _summarize, "tokenize": _tokenize}
    handler = handlers.get(operation)
    if handler is not None:
        return handler(text)
    result = FunctionResult(True)
    result.result_data.set("result", f"Text processing completed for operation: {operation}")
    return result


class AddFunction(AgentFunction):
    name = "add"
    description = "Adds two integers"

    def execute(self, params: AgentData) -> FunctionResult:
        result = FunctionResult(True)
        result.result_data.set("result", params.get_int("a") + params.get_int("b"))
        result.result_data.set("operation", "addition")
        return result


class EchoFunction(AgentFunction):
    name = "echo"
    description = "Echoes a message, optionally in upper case"

    def execute(self, params: AgentData) -> FunctionResult:
        original = params.get_string("message")
        uppercase = params.get_bool("uppercase", False)
        result = FunctionResult(True)
        result.result_data.set("echo", original.upper() if uppercase else original)
        result.result_data.set("original", original)
        result.result_data.set("processed", uppercase)
        return result


class DelayFunction(AgentFunction):
    name = "delay"
    description = "Waits for the given number of milliseconds"

    def execute(self, params: AgentData) -> FunctionResult:
        ms = params.get_int("ms")
        if ms < 0:
            return FunctionResult(False, "Delay must be non-negative")
        if ms > 0:
            time.sleep(ms / 1000.0)
        result = FunctionResult(True)
        result.result_data.set("waited_ms", ms)
        result.result_data.set("status", "completed")
        return result


class TextAnalysisFunction(AgentFunction):
    name = "text_analysis"
    description = "Analyzes, summarizes or tokenizes text"

    def execute(self, params: AgentData) -> FunctionResult:
        return _process_text(params)


class TextProcessingFunction(AgentFunction):
    name = "text_processing"
    description = "Processes text: analyze, summarize or tokenize"

    def execute(self, params: AgentData) -> FunctionResult:
        return _process_text(params)