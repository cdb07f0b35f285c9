"""Tool definitions for documentation servers.

Every documentation server exposes the same three read-only tools:

- ``search_resources``: filter the manifest by keyword, category and
  complexity
- ``get_overview``: server identity, statistics and a summary of every
  resource
- ``get_quick_reference``: the curated index of key resources
"""

from typing import Any, Dict, Optional

from .exceptions import NotFoundError
from .requests import GetOverview, GetQuickReference, Request, SearchResources

SEARCH_RESOURCES = "search_resources"
GET_OVERVIEW = "get_overview"
GET_QUICK_REFERENCE = "get_quick_reference"

_NO_ARGUMENTS = {"type": "object", "properties": {}, "required": []}

TOOL_SCHEMAS: Dict[str, Dict[str, Any]] = {
    SEARCH_RESOURCES: {
        "name": SEARCH_RESOURCES,
        "description": "Search the documentation resources of this server by keyword, optionally within one category or complexity level.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Text matched against resource URI, name, description and tags",
                },
                "category": {
                    "type": "string",
                    "description": "Only return resources in this category",
                },
                "complexity": {
                    "type": "string",
                    "description": "Only return resources of this complexity (e.g. intermediate, advanced, enterprise)",
                },
            },
            "required": ["query"],
        },
    },
    GET_OVERVIEW: {
        "name": GET_OVERVIEW,
        "description": "Get an overview of this server: statistics, categories and every resource.",
        "inputSchema": _NO_ARGUMENTS,
    },
    GET_QUICK_REFERENCE: {
        "name": GET_QUICK_REFERENCE,
        "description": "Get the quick reference guide to the key resources of this server.",
        "inputSchema": _NO_ARGUMENTS,
    },
}


def _optional_string(arguments: Dict[str, Any], key: str) -> Optional[str]:
    value = arguments.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string")
    return value


def build_tool_request(name: str, arguments: Optional[Dict[str, Any]]) -> Request:
    """Translate a tool call into a dispatcher request.

    Args:
        name: Tool name
        arguments: Tool arguments as sent by the client

    Returns:
        The request the tool call stands for

    Raises:
        NotFoundError: If ``name`` is not a known tool
        ValueError: If required arguments are missing or mistyped
    """
    if name not in TOOL_SCHEMAS:
        raise NotFoundError(name, kind="Tool")

    if name == GET_OVERVIEW:
        return GetOverview()
    if name == GET_QUICK_REFERENCE:
        return GetQuickReference()

    arguments = arguments or {}
    query = arguments.get("query")
    if not isinstance(query, str) or not query.strip():
        raise ValueError("search_resources requires a non-empty 'query'")
    return SearchResources(
        query=query,
        category=_optional_string(arguments, "category"),
        complexity=_optional_string(arguments, "complexity"),
    )
