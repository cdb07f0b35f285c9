"""Constants for the documentation servers.

This module defines the enums and error messages shared by the registries,
the dispatcher and the MCP binding, to avoid magic strings.
"""

from enum import Enum


DEFAULT_MIME_TYPE = "text/plain"
DEFAULT_CATALOG = "agency"
PROTOCOL_VERSION = "2024-11-05"


class ResponseStatus(str, Enum):
    """Response status values."""

    SUCCESS = "success"
    ERROR = "error"


class Role(str, Enum):
    """Message roles a prompt template may produce."""

    USER = "user"


class RequestKind(str, Enum):
    """The request kinds the dispatcher understands."""

    LIST_RESOURCES = "list_resources"
    READ_RESOURCE = "read_resource"
    LIST_PROMPTS = "list_prompts"
    GET_PROMPT = "get_prompt"
    SEARCH_RESOURCES = "search_resources"
    GET_OVERVIEW = "get_overview"
    GET_QUICK_REFERENCE = "get_quick_reference"
    CALL_TOOL = "call_tool"


class ErrorCode(str, Enum):
    """Error code identifiers for error categorization."""

    # Lookup errors
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    PROMPT_NOT_FOUND = "PROMPT_NOT_FOUND"
    TOOL_NOT_FOUND = "TOOL_NOT_FOUND"

    # Input validation errors
    INVALID_INPUT = "INVALID_INPUT"

    # Generic errors
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


class ErrorMessage:
    """Error message templates."""

    RESOURCE_NOT_FOUND = "Resource not found: {identifier}"
    PROMPT_NOT_FOUND = "Prompt not found: {identifier}"
    TOOL_NOT_FOUND = "Unknown tool: {identifier}"

    EMPTY_URI = "Resource URI cannot be empty"
    EMPTY_PROMPT_NAME = "Prompt name cannot be empty"
    EMPTY_QUERY = "Search query cannot be empty"

    UNEXPECTED_ERROR = "Unexpected error occurred"
