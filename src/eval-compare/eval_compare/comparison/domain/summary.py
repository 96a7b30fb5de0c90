"""Content summarizer — short previews of inputs, outputs, and free text.

Only the first message of an input and the first block of an output are
inspected.
"""

import json
from dataclasses import dataclass
from typing import Literal, TypeAlias

from pydantic import TypeAdapter

from eval_compare.content.domain.input import (
    DisplayInput,
    MissingFunctionTextContent,
    RawTextContent,
    StructuredTextContent,
    UnstructuredTextContent,
)
from eval_compare.content.domain.output import (
    ContentBlockOutput,
    JsonInferenceOutput,
    Output,
    TextOutputBlock,
)

DEFAULT_MAX_LENGTH = 30
ELLIPSIS = "..."

ContentKind: TypeAlias = Literal["text", "input", "output"]

_OUTPUT_BLOCKS: TypeAdapter[list[ContentBlockOutput]] = TypeAdapter(
    list[ContentBlockOutput]
)


@dataclass(frozen=True)
class ContentSummary:
    """A preview label plus the full representation shown on expansion."""

    label: str
    full: str


def truncate(text: str, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Cut *text* to *max_length* characters and append "..." if it was longer."""
    if len(text) > max_length:
        return text[:max_length] + ELLIPSIS
    return text


def summarize_input(value: DisplayInput) -> str:
    if not value.messages:
        return "Empty input"

    first_message = value.messages[0]
    if not first_message.content:
        return f"{first_message.role} message"

    first_content = first_message.content[0]
    if isinstance(first_content, StructuredTextContent):
        text = json.dumps(first_content.arguments, indent=2, ensure_ascii=False)
        return truncate(text)
    if isinstance(first_content, UnstructuredTextContent):
        return truncate(first_content.text)
    if isinstance(first_content, MissingFunctionTextContent | RawTextContent):
        return truncate(first_content.value)
    return f"{first_message.role} message ({first_content.type})"


def summarize_output(value: Output) -> str:
    if isinstance(value, JsonInferenceOutput):
        if not value.raw:
            return "Empty output"
        return truncate(value.raw)

    if not value:
        return "Empty output"
    first_block = value[0]
    if isinstance(first_block, TextOutputBlock):
        return truncate(first_block.text)
    return f"{first_block.type} output"


def _dump_output(value: Output) -> str:
    if isinstance(value, JsonInferenceOutput):
        return value.model_dump_json(indent=2)
    return _OUTPUT_BLOCKS.dump_json(value, indent=2).decode("utf-8")


def summarize_text(text: str, max_length: int = DEFAULT_MAX_LENGTH) -> ContentSummary:
    return ContentSummary(label=truncate(text, max_length=max_length), full=text)


def summarize_display_input(value: DisplayInput) -> ContentSummary:
    return ContentSummary(
        label=summarize_input(value), full=value.model_dump_json(indent=2)
    )


def summarize_display_output(value: Output) -> ContentSummary:
    return ContentSummary(label=summarize_output(value), full=_dump_output(value))


def summarize(
    content: str | DisplayInput | Output,
    kind: ContentKind,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> ContentSummary:
    """Summarize *content* according to its declared *kind*.

    `max_length` only applies to free text; structured previews always cut
    at the default length.

    Raises:
        TypeError: if *content* does not match *kind*.
    """
    if kind == "text" and isinstance(content, str):
        return summarize_text(content, max_length=max_length)
    if kind == "input" and isinstance(content, DisplayInput):
        return summarize_display_input(content)
    if kind == "output" and isinstance(content, list | JsonInferenceOutput):
        return summarize_display_output(content)
    raise TypeError(f"cannot summarize {type(content).__name__} as {kind!r}")
