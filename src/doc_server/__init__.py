"""Documentation servers: static resources and prompt templates over MCP."""

from .catalog import ServerCatalog, ServerInfo, available_catalogs, build_catalog, load_catalog
from .constants import ErrorCode, ErrorMessage, RequestKind, ResponseStatus, Role
from .dispatcher import Dispatcher
from .exceptions import CatalogIntegrityError, NotFoundError
from .requests import (
    CallTool,
    GetOverview,
    GetPrompt,
    GetQuickReference,
    ListPrompts,
    ListResources,
    ReadResource,
    Request,
    SearchResources,
)

__version__ = "0.1.0"

__all__ = [
    "CallTool",
    "CatalogIntegrityError",
    "Dispatcher",
    "ErrorCode",
    "ErrorMessage",
    "GetOverview",
    "GetPrompt",
    "GetQuickReference",
    "ListPrompts",
    "ListResources",
    "NotFoundError",
    "ReadResource",
    "Request",
    "RequestKind",
    "ResponseStatus",
    "Role",
    "SearchResources",
    "ServerCatalog",
    "ServerInfo",
    "available_catalogs",
    "build_catalog",
    "load_catalog",
]
