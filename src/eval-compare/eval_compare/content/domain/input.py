"""Input content models — the message list a datapoint feeds to a function.

Content blocks form a closed union discriminated on `type`. Kinds this package
does not know about land in `OtherInputContent` instead of failing validation.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag


class StructuredTextContent(BaseModel, frozen=True):
    """Text content validated against a function's input schema."""

    type: Literal["structured_text"]
    arguments: Any


class UnstructuredTextContent(BaseModel, frozen=True):
    type: Literal["unstructured_text"]
    text: str


class MissingFunctionTextContent(BaseModel, frozen=True):
    """Text whose function schema could not be resolved."""

    type: Literal["missing_function_text"]
    value: str


class RawTextContent(BaseModel, frozen=True):
    type: Literal["raw_text"]
    value: str


class ToolCallContent(BaseModel, frozen=True):
    type: Literal["tool_call"]
    id: str = ""
    name: str = ""
    arguments: str = ""


class ToolResultContent(BaseModel, frozen=True):
    type: Literal["tool_result"]
    id: str = ""
    name: str = ""
    result: str = ""


class ImageContent(BaseModel, frozen=True):
    type: Literal["image"]
    url: str | None = None
    mime_type: str | None = None


class ThoughtContent(BaseModel, frozen=True):
    type: Literal["thought"]
    text: str | None = None


class FileContent(BaseModel, frozen=True):
    type: Literal["file"]
    mime_type: str | None = None


class OtherInputContent(BaseModel, frozen=True):
    """Any content kind outside the known set; extra fields are kept verbatim."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: str


_KNOWN_INPUT_KINDS = frozenset(
    {
        "structured_text",
        "unstructured_text",
        "missing_function_text",
        "raw_text",
        "tool_call",
        "tool_result",
        "image",
        "thought",
        "file",
    }
)


def _input_content_kind(value: Any) -> str:
    kind = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    if kind in _KNOWN_INPUT_KINDS and not isinstance(value, OtherInputContent):
        return str(kind)
    return "other"


InputContent = Annotated[
    Annotated[StructuredTextContent, Tag("structured_text")]
    | Annotated[UnstructuredTextContent, Tag("unstructured_text")]
    | Annotated[MissingFunctionTextContent, Tag("missing_function_text")]
    | Annotated[RawTextContent, Tag("raw_text")]
    | Annotated[ToolCallContent, Tag("tool_call")]
    | Annotated[ToolResultContent, Tag("tool_result")]
    | Annotated[ImageContent, Tag("image")]
    | Annotated[ThoughtContent, Tag("thought")]
    | Annotated[FileContent, Tag("file")]
    | Annotated[OtherInputContent, Tag("other")],
    Discriminator(_input_content_kind),
]


class InputMessage(BaseModel, frozen=True):
    role: Literal["user", "assistant"]
    content: list[InputContent] = Field(default_factory=list)


class DisplayInput(BaseModel, frozen=True):
    """The full input of one datapoint: an optional system value plus messages."""

    system: Any = None
    messages: list[InputMessage] = Field(default_factory=list)
