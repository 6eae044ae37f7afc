"""Built-in agent functions for tool discovery, code generation and document parsing."""

from __future__ import annotations

import logging
import os
import re
import time
import zipfile
import zlib
from xml.etree import ElementTree

from .agent_data import AgentData
from .function_manager import AgentFunction, FunctionManager, FunctionResult

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


class ToolDiscoveryFunction(AgentFunction):
    name = "tool_discovery"
    description = "Lists the tools and functions available to the agent"

    def __init__(self, function_manager: FunctionManager) -> None:
        self.function_manager = function_manager

    def execute(self, params: AgentData) -> FunctionResult:
        start = time.perf_counter()
        try:
            fmt = params.get_string("format", "detailed")
            include_descriptions = params.get_bool("include_descriptions", True)
            result = FunctionResult(True)
            out = result.result_data

            if fmt == "summary":
                summary = self.function_manager.get_available_tools_summary()
                out.set("tools_summary", summary)
                out.set("result", summary)
            elif fmt == "list":
                names = self.function_manager.get_function_names()
                tools_list = ", ".join(names)
                out.set("tools_list", tools_list)
                out.set("tool_count", len(names))
                out.set("result", f"Available tools: {tools_list}")
            else:
                functions = self.function_manager.get_all_functions_with_descriptions()
                parts = ["Available Tools and Functions:\n\n"]
                for name, desc in functions:
                    parts.append(f"Tool: {name}\n")
                    if include_descriptions:
                        parts.append(f"Description: {desc}\n")
                    parts.append("\n")
                detailed = "".join(parts)
                out.set("tools_detailed", detailed)
                out.set("tool_count", len(functions))
                out.set("result", detailed)

            result.execution_time_ms = _elapsed_ms(start)
            return result
        except Exception as exc:
            result = FunctionResult(False, f"Tool discovery error: {exc}")
            result.execution_time_ms = _elapsed_ms(start)
            return result


def _python_template(requirement: str) -> str:
    return (
        f"# Generated Python code for: {requirement}\n"
        "def solution():\n"
        '    """\n'
        f"    This is a generated function to handle the task: {requirement}\n"
        '    """\n'
        "    # Implement the actual logic here\n"
        f'    result = "Task completed: " + "{requirement}"\n'
        "    return result\n"
        "\n"
        'if __name__ == "__main__":\n'
        "    print(solution())\n"
    )


def _javascript_template(requirement: str) -> str:
    return (
        f"// Generated JavaScript code for: {requirement}\n"
        "function solution() {\n"
        "    /**\n"
        f"     * This function handles the task: {requirement}\n"
        "     */\n"
        "    // Implement the actual logic here\n"
        f"    const result = `Task completed: {requirement}`;\n"
        "    return result;\n"
        "}\n"
        "\n"
        "// Example usage\n"
        "console.log(solution());\n"
    )


def _cpp_template(requirement: str) -> str:
    return (
        f"// Generated C++ code for: {requirement}\n"
        "#include <iostream>\n"
        "#include <string>\n"
        "\n"
        "class Solution {\n"
        "public:\n"
        "    /**\n"
        f"     * This function handles the task: {requirement}\n"
        "     */\n"
        "    std::string solve() {\n"
        "        // Implement the actual logic here\n"
        f'        return "Task completed: {requirement}";\n'
        "    }\n"
        "};\n"
        "\n"
        "int main() {\n"
        "    Solution solution;\n"
        "    std::cout << solution.solve() << std::endl;\n"
        "    return 0;\n"
        "}\n"
    )


def _generic_template(requirement: str, language: str) -> str:
    return (
        f"# Generated code for: {requirement}\n"
        f"# Language: {language}\n"
        f"# Implement the solution for: {requirement}\n"
        "\n"
        "def main():\n"
        f'    print("Task: {requirement}")\n'
        "    # Add your implementation here\n"
        "    pass\n"
        "\n"
        'if __name__ == "__main__":\n'
        "    main()\n"
    )


class CodeGenerationFunction(AgentFunction):
    name = "code_generation"
    description = "Generates a code skeleton for a task in a given language"

    def execute(self, params: AgentData) -> FunctionResult:
        start = time.perf_counter()
        try:
            language = params.get_string("language", "python")
            task = params.get_string("task", "")
            description = params.get_string("description", "")
            if not task and not description:
                return FunctionResult(False, "Either 'task' or 'description' parameter is required")
            requirement = task or description

            if language in ("python", "py"):
                code = _python_template(requirement)
                explanation = f"Generated Python function with basic structure for: {requirement}"
            elif language in ("javascript", "js"):
                code = _javascript_template(requirement)
                explanation = (
                    f"Generated JavaScript function with basic structure for: {requirement}"
                )
            elif language in ("cpp", "c++"):
                code = _cpp_template(requirement)
                explanation = f"Generated C++ class with basic structure for: {requirement}"
            else:
                code = _generic_template(requirement, language)
                explanation = f"Generated generic code template for {language} - {requirement}"

            result = FunctionResult(True)
            out = result.result_data
            out.set("language", language)
            out.set("task", requirement)
            out.set("generated_code", code)
            out.set("explanation", explanation)
            out.set("lines_of_code", code.count("\n") + 1)
            out.set("result", f"Generated {language} code for: {requirement}")
            result.execution_time_ms = _elapsed_ms(start)
            logger.info(
                "CodeGenerationFunction: Generated %s code for task '%s'", language, requirement
            )
            return result
        except Exception as exc:
            result = FunctionResult(False, f"Code generation error: {exc}")
            result.execution_time_ms = _elapsed_ms(start)
            return result


# --- PDF text extraction -------------------------------------------------

_OBJECT = re.compile(rb"(\d+)\s+\d+\s+obj\b(.*?)\bendobj", re.S)
_STREAM = re.compile(rb"stream\r?\n(.*?)\r?\n?endstream", re.S)
_PAGE_TYPE = re.compile(rb"/Type\s*/Page(?![s\w])")
_CONTENTS = re.compile(rb"/Contents\s*(\[[^\]]*\]|\d+\s+\d+\s+R)")
_REFERENCE = re.compile(rb"(\d+)\s+\d+\s+R")
_NUMBER = re.compile(rb"[+-]?(?:\d+\.?\d*|\.\d+)")
_OPERATOR = re.compile(rb"[A-Za-z'\"*]+")
_WHITESPACE = b" \t\r\n\f\x00"
_ESCAPES = {
    ord("n"): b"\n",
    ord("r"): b"\r",
    ord("t"): b"\t",
    ord("b"): b"\b",
    ord("f"): b"\f",
    ord("("): b"(",
    ord(")"): b")",
    ord("\\"): b"\\",
}
_TJ_SPACE_GAP = -200.0


def _decode_pdf_string(raw: bytes) -> str:
    if raw.startswith(b"\xfe\xff"):
        return raw[2:].decode("utf-16-be", errors="replace")
    return raw.decode("latin-1")


def _read_literal(data: bytes, pos: int) -> tuple[str, int]:
    out = bytearray()
    depth = 1
    i = pos + 1
    size = len(data)
    while i < size:
        byte = data[i]
        if byte == 0x5C:
            i += 1
            if i >= size:
                break
            escaped = data[i]
            if escaped in _ESCAPES:
                out += _ESCAPES[escaped]
                i += 1
            elif 0x30 <= escaped <= 0x37:
                digits = re.match(rb"[0-7]{1,3}", data[i : i + 3]).group()
                out.append(int(digits, 8) & 0xFF)
                i += len(digits)
            elif escaped == 0x0D:
                i += 2 if data[i + 1 : i + 2] == b"\n" else 1
            elif escaped == 0x0A:
                i += 1
            else:
                out.append(escaped)
                i += 1
            continue
        if byte == 0x28:
            depth += 1
        elif byte == 0x29:
            depth -= 1
            if depth == 0:
                return _decode_pdf_string(bytes(out)), i + 1
        out.append(byte)
        i += 1
    return _decode_pdf_string(bytes(out)), i


def _content_text(content: bytes) -> str:
    pieces: list[str] = []
    operands: list[object] = []

    def newline() -> None:
        if pieces and not pieces[-1].endswith("\n"):
            pieces.append("\n")

    def strings() -> list[str]:
        return [op for op in operands if isinstance(op, str)]

    pos = 0
    size = len(content)
    while pos < size:
        char = content[pos : pos + 1]
        if char in _WHITESPACE:
            pos += 1
        elif char == b"%":
            end = content.find(b"\n", pos)
            pos = size if end < 0 else end + 1
        elif char == b"(":
            text, pos = _read_literal(content, pos)
            operands.append(text)
        elif char == b"<":
            if content[pos + 1 : pos + 2] == b"<":
                pos += 2
                continue
            end = content.find(b">", pos)
            end = size if end < 0 else end
            digits = re.sub(rb"\s", b"", content[pos + 1 : end])
            if len(digits) % 2:
                digits += b"0"
            try:
                operands.append(_decode_pdf_string(bytes.fromhex(digits.decode("ascii"))))
            except ValueError:
                pass
            pos = end + 1
        elif char == b"/":
            match = re.match(rb"/[^\s/\[\]()<>{}%]*", content[pos:])
            pos += len(match.group())
        elif (number := _NUMBER.match(content, pos)) is not None:
            operands.append(float(number.group()))
            pos = number.end()
        elif (operator := _OPERATOR.match(content, pos)) is not None:
            op = operator.group()
            pos = operator.end()
            if op in (b"'", b'"'):
                newline()
                pieces.extend(strings())
            elif op == b"Tj":
                pieces.extend(strings())
            elif op == b"TJ":
                for operand in operands:
                    if isinstance(operand, str):
                        pieces.append(operand)
                    elif isinstance(operand, float) and operand < _TJ_SPACE_GAP:
                        pieces.append(" ")
            elif op in (b"T*", b"Td", b"TD", b"ET"):
                newline()
            operands.clear()
        else:
            pos += 1
    return "".join(pieces).strip()


def _stream_content(body: bytes) -> bytes | None:
    match = _STREAM.search(body)
    if match is None:
        return None
    header = body[: match.start()]
    data = match.group(1)
    if b"/Filter" not in header:
        return data
    if b"/FlateDecode" not in header:
        return None
    try:
        return zlib.decompressobj().decompress(data)
    except zlib.error:
        return None


def extract_pdf_pages(data: bytes) -> list[str]:
    """Return the text of each page of a PDF, in file order."""
    objects = {int(num): body for num, body in _OBJECT.findall(data)}
    pages: list[str] = []
    for body in objects.values():
        if not _PAGE_TYPE.search(body):
            continue
        contents = _CONTENTS.search(body)
        refs = _REFERENCE.findall(contents.group(1)) if contents else []
        streams = (_stream_content(objects.get(int(ref), b"")) for ref in refs)
        pages.append("\n".join(_content_text(s) for s in streams if s))
    if not pages:
        for body in objects.values():
            content = _stream_content(body)
            if content and b"BT" in content:
                pages.append(_content_text(content))
    return pages


class ParsePdfFunction(AgentFunction):
    name = "parse_pdf"
    description = "Extracts the text of a PDF file"

    def execute(self, params: AgentData) -> FunctionResult:
        start = time.perf_counter()
        try:
            file_path = params.get_string("file_path")
            if not file_path:
                return FunctionResult(False, "file_path parameter is required")
            max_pages = params.get_int("max_pages", -1)
            extract_metadata = params.get_bool("extract_metadata", True)
            logger.info("ParsePdfFunction: Parsing PDF file '%s'", file_path)

            with open(file_path, "rb") as handle:
                data = handle.read()
            pages = extract_pdf_pages(data)
            selected = pages[:max_pages] if max_pages > 0 else pages
            text = "\n\n".join(page for page in selected if page)

            result = FunctionResult(True)
            out = result.result_data
            out.set("file_path", file_path)
            out.set("extracted_text", text)
            out.set("text_length", len(text))
            out.set("word_count", len(text.split()))
            out.set("page_count", len(pages))
            out.set("pages_extracted", len(selected))
            if extract_metadata:
                out.set("file_size_bytes", os.path.getsize(file_path))
                out.set("processing_time_ms", _elapsed_ms(start))
            out.set("result", "Successfully extracted text from PDF")
            result.execution_time_ms = _elapsed_ms(start)
            logger.info(
                "ParsePdfFunction: Extracted %d characters from PDF in %.2f ms",
                len(text),
                result.execution_time_ms,
            )
            return result
        except Exception as exc:
            logger.error("ParsePdfFunction error: %s", exc)
            result = FunctionResult(False, f"PDF parsing error: {exc}")
            result.execution_time_ms = _elapsed_ms(start)
            return result


# --- DOCX text extraction ------------------------------------------------


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _paragraph_text(paragraph: ElementTree.Element) -> str:
    parts = []
    for elem in paragraph.iter():
        local = _local(elem.tag)
        if local == "t":
            parts.append(elem.text or "")
        elif local == "tab":
            parts.append("\t")
        elif local in ("br", "cr"):
            parts.append("\n")
    return "".join(parts)


def _docx_text(archive: zipfile.ZipFile, preserve_formatting: bool) -> tuple[str, int]:
    root = ElementTree.fromstring(archive.read("word/document.xml"))
    paragraphs = [_paragraph_text(p) for p in root.iter() if _local(p.tag) == "p"]
    if not preserve_formatting:
        paragraphs = [" ".join(p.split()) for p in paragraphs]
        paragraphs = [p for p in paragraphs if p]
    return "\n".join(paragraphs), len(paragraphs)


def _docx_properties(archive: zipfile.ZipFile) -> dict[str, str]:
    if "docProps/core.xml" not in archive.namelist():
        return {}
    root = ElementTree.fromstring(archive.read("docProps/core.xml"))
    wanted = {"title": "title", "creator": "author", "subject": "subject"}
    properties = {}
    for elem in root:
        key = wanted.get(_local(elem.tag))
        if key and elem.text:
            properties[key] = elem.text.strip()
    return properties


class ParseDocxFunction(AgentFunction):
    name = "parse_docx"
    description = "Extracts the text of a DOCX file"

    def execute(self, params: AgentData) -> FunctionResult:
        start = time.perf_counter()
        try:
            file_path = params.get_string("file_path")
            if not file_path:
                return FunctionResult(False, "file_path parameter is required")
            extract_metadata = params.get_bool("extract_metadata", True)
            preserve_formatting = params.get_bool("preserve_formatting", False)
            logger.info("ParseDocxFunction: Parsing DOCX file '%s'", file_path)

            with zipfile.ZipFile(file_path) as archive:
                text, paragraph_count = _docx_text(archive, preserve_formatting)
                properties = _docx_properties(archive) if extract_metadata else {}

            result = FunctionResult(True)
            out = result.result_data
            out.set("file_path", file_path)
            out.set("extracted_text", text)
            out.set("text_length", len(text))
            out.set("word_count", len(text.split()))
            out.set("paragraph_count", paragraph_count)
            out.set("preserve_formatting", preserve_formatting)
            if extract_metadata:
                out.set("file_size_bytes", os.path.getsize(file_path))
                out.set("processing_time_ms", _elapsed_ms(start))
                for key, value in properties.items():
                    out.set(key, value)
            out.set("result", "Successfully extracted text from DOCX")
            result.execution_time_ms = _elapsed_ms(start)
            logger.info(
                "ParseDocxFunction: Extracted %d characters from DOCX in %.2f ms",
                len(text),
                result.execution_time_ms,
            )
            return result
        except Exception as exc:
            logger.error("ParseDocxFunction error: %s", exc)
            result = FunctionResult(False, f"DOCX parsing error: {exc}")
            result.execution_time_ms = _elapsed_ms(start)
            return result