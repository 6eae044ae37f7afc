# kolosal-agent

Building blocks for a multi-agent system. The package uses only the
standard library.

## What is in it

- **`kolosal_agent.agent_data`**
  - `AgentData` is a key/value bag. It holds strings, ints, floats, bools,
    lists and nested `AgentData`. Mappings passed in are converted to
    `AgentData`.
    - Getters: `get_string`, `get_int`, `get_double`, `get_bool` and
      `get_array_string`. They never raise on a missing key or a value of
      the wrong type. They return the default you pass, or an empty value.
      `get_string` also renders numbers and bools, with bools as
      `"true"`/`"false"`.
    - Other methods: `has_key`, `clear`, `get_all_keys` (sorted),
      `to_json`, `from_json` and `to_string`. `to_string` returns a JSON
      string.
  - `generate_uuid()` returns a random identifier.
  - Plain dataclasses: `Agent`, `CommandResult`, `WorkflowResult` and
    `CollaborationGroup`.
- **`kolosal_agent.function_manager`**
  - `AgentFunction` is the abstract base for tools. A tool has a `name`, a
    `description`, a `function_type` and `execute(params)`.
  - `FunctionResult` holds the outcome of a run: `success`,
    `error_message`, `result_data`, `execution_time_ms` and `llm_response`.
  - `FunctionManager` is a thread-safe registry.
    - `execute_function(name, params)` runs a function. If the function did
      not record its own timing, the manager fills in the execution time.
      An unknown name returns a failed result, `Function not found: <name>`.
    - It can also list the registered tools. The methods are
      `get_function_names`, `has_function`, `get_function_description`,
      `get_available_tools_summary` and
      `get_all_functions_with_descriptions`.
- **`kolosal_agent.builtin_basic`**
  - `AddFunction`, `EchoFunction` and `DelayFunction`. `DelayFunction`
    rejects negative delays.
  - `TextAnalysisFunction` and `TextProcessingFunction`. Both take
    `operation`: `analyze`, `summarize` or `tokenize`. `analyze` returns
    word and character counts and a keyword-based sentiment. `summarize`
    returns the first 100 characters, plus `...` when the text is longer.
    `tokenize` returns the token count.
- **`kolosal_agent.builtin_data`**
  - `DataTransformFunction` applies one operation to every item:
    uppercase, lowercase, reverse, length or identity.
  - `DataAnalysisFunction` offers `basic`, `statistical` and `pattern`
    analysis. `statistical` and `pattern` return fixed sample figures.
  - `ExternalAPIFunction` simulates a call to an endpoint. It sleeps 50 to
    200 ms and returns a canned response.
  - `WebSearchFunction` returns simulated results at `example<N>.com`.
- **`kolosal_agent.builtin_tools`**
  - `ToolDiscoveryFunction` describes the contents of a `FunctionManager`.
    Its `format` is `detailed`, `list` or `summary`.
  - `CodeGenerationFunction` produces a code skeleton for Python,
    JavaScript or C++. Any other language gets a generic template.
  - `ParsePdfFunction` extracts the text of a PDF. It reads uncompressed
    and FlateDecode content streams, and `max_pages` limits how many pages
    are read.
  - `ParseDocxFunction` extracts paragraph text from a `.docx` file. With
    `extract_metadata` it also returns the title, author and subject.
    `preserve_formatting` keeps the original whitespace.
  - `extract_pdf_pages(data)` returns the text of each page of a PDF.
- **`kolosal_agent.job_manager`**
  - `JobManager` runs submitted jobs on one background worker, in
    submission order.
    - `submit_job` returns a job id.
    - You can poll `get_job_status` and `get_job_result`. For an unknown
      id the status is `JobStatus.FAILED` and the result is a failed
      `Job not found`.
    - `cancel_job` works only on jobs that are still pending.
    - `get_stats` reports the total and the queue size.
    - It can be used as a context manager, which starts and stops the
      worker.
- **`kolosal_agent.event_system`**
  - `EventSystem` delivers `AgentEvent`s to the `EventHandler`s subscribed
    to an event type, but only while it is started.
  - A handler that raises is logged and does not stop delivery to the
    other handlers.

## Installation

```
pip install .
```

Use `pip install .[test]` to add pytest.

## Quick look

```python
from kolosal_agent.agent_data import AgentData
from kolosal_agent.builtin_basic import AddFunction, EchoFunction
from kolosal_agent.function_manager import FunctionManager
from kolosal_agent.job_manager import JobManager, JobStatus

manager = FunctionManager()
manager.register_function(AddFunction())
manager.register_function(EchoFunction())

params = AgentData({"a": 2, "b": 3})
result = manager.execute_function("add", params)
print(result.success, result.result_data.get_int("result"))   # True 5

with JobManager(manager) as jobs:
    job_id = jobs.submit_job("echo", AgentData({"message": "hi", "uppercase": True}))
```

## Launcher

```
kolosal-launcher [arguments...]
```

The launcher looks for a `kolosal-agent` executable (`kolosal-agent.exe` on
Windows) in the same directory as itself. It replaces the current process
with that executable and passes on the same arguments. If the executable is
missing, it prints an error and exits with status 1.

## What this package does not do

- It does not call an LLM inference server. There are no inference or
  LLM-backed functions.
- It has no document store or vector search. There is no retrieval,
  embedding, or adding or removing of documents.
- It does not define agent roles.

`ExternalAPIFunction` and `WebSearchFunction` make no network requests.
Their results are simulated.

## Tests

```
pytest
```