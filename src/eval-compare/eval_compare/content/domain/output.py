"""Output content models — what a function produced, or was expected to produce.

An output is either a list of content blocks (chat functions) or a single
JSON result object (JSON functions).
"""

from typing import Annotated, Any, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Discriminator, Tag


class TextOutputBlock(BaseModel, frozen=True):
    type: Literal["text"]
    text: str


class ToolCallOutputBlock(BaseModel, frozen=True):
    type: Literal["tool_call"]
    id: str = ""
    raw_name: str = ""
    raw_arguments: str = ""
    name: str | None = None
    arguments: Any = None


class ThoughtOutputBlock(BaseModel, frozen=True):
    type: Literal["thought"]
    text: str | None = None


class OtherOutputBlock(BaseModel, frozen=True):
    """Any output block kind outside the known set."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: str


_KNOWN_OUTPUT_KINDS = frozenset({"text", "tool_call", "thought"})


def _output_block_kind(value: Any) -> str:
    kind = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    if kind in _KNOWN_OUTPUT_KINDS and not isinstance(value, OtherOutputBlock):
        return str(kind)
    return "other"


ContentBlockOutput = Annotated[
    Annotated[TextOutputBlock, Tag("text")]
    | Annotated[ToolCallOutputBlock, Tag("tool_call")]
    | Annotated[ThoughtOutputBlock, Tag("thought")]
    | Annotated[OtherOutputBlock, Tag("other")],
    Discriminator(_output_block_kind),
]


class JsonInferenceOutput(BaseModel, frozen=True):
    """Result of a JSON function: the raw text and, if it parsed, the object."""

    raw: str | None = None
    parsed: Any = None


Output: TypeAlias = list[ContentBlockOutput] | JsonInferenceOutput
