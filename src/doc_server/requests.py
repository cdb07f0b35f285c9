"""Typed requests understood by the dispatcher.

Each request class carries its ``kind`` so error envelopes can name the
request that failed.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional, Union

from .constants import RequestKind


@dataclass(frozen=True)
class ListResources:
    kind: ClassVar[RequestKind] = RequestKind.LIST_RESOURCES


@dataclass(frozen=True)
class ReadResource:
    uri: str
    kind: ClassVar[RequestKind] = RequestKind.READ_RESOURCE


@dataclass(frozen=True)
class ListPrompts:
    kind: ClassVar[RequestKind] = RequestKind.LIST_PROMPTS


@dataclass(frozen=True)
class GetPrompt:
    name: str
    arguments: Optional[Dict[str, Any]] = field(default=None, hash=False)
    kind: ClassVar[RequestKind] = RequestKind.GET_PROMPT


@dataclass(frozen=True)
class SearchResources:
    query: str
    category: Optional[str] = None
    complexity: Optional[str] = None
    kind: ClassVar[RequestKind] = RequestKind.SEARCH_RESOURCES


@dataclass(frozen=True)
class GetOverview:
    kind: ClassVar[RequestKind] = RequestKind.GET_OVERVIEW


@dataclass(frozen=True)
class GetQuickReference:
    kind: ClassVar[RequestKind] = RequestKind.GET_QUICK_REFERENCE


@dataclass(frozen=True)
class CallTool:
    """A raw tools/call request; translated to one of the above when handled."""

    name: str
    arguments: Optional[Dict[str, Any]] = field(default=None, hash=False)
    kind: ClassVar[RequestKind] = RequestKind.CALL_TOOL


Request = Union[
    ListResources,
    ReadResource,
    ListPrompts,
    GetPrompt,
    SearchResources,
    GetOverview,
    GetQuickReference,
    CallTool,
]
