"""Prompt catalog, templates and rendering for documentation servers."""

from .catalog import PromptArgument, PromptCatalog, PromptDescriptor
from .renderer import PromptRenderer, RenderedPrompt
from .template import (
    Literal,
    MessageFragment,
    PromptTemplate,
    Slot,
    TextTemplate,
    parse_template,
)

__all__ = [
    "Literal",
    "MessageFragment",
    "PromptArgument",
    "PromptCatalog",
    "PromptDescriptor",
    "PromptRenderer",
    "PromptTemplate",
    "RenderedPrompt",
    "Slot",
    "TextTemplate",
    "parse_template",
]
