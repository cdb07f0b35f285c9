"""Request dispatcher for documentation servers.

The dispatcher is a stateless router: it receives one of the typed
requests from ``requests.py``, calls the matching registry or renderer
method and hands the result to the response builder.
"""

import logging
from functools import singledispatchmethod
from typing import Any, Dict, Mapping, Optional

from .decorators import handle_errors
from .prompts.renderer import PromptRenderer
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
from .resources.store import ResourceRegistry
from .response_builder import (
    build_overview_response,
    build_prompt_list,
    build_prompt_response,
    build_quick_reference_response,
    build_resource_list,
    build_resource_response,
    build_search_response,
)
from .tools import build_tool_request

logger = logging.getLogger(__name__)

__all__ = [
    "CallTool",
    "Dispatcher",
    "GetOverview",
    "GetPrompt",
    "GetQuickReference",
    "ListPrompts",
    "ListResources",
    "ReadResource",
    "Request",
    "SearchResources",
]


class Dispatcher:
    """Routes typed requests to the registries of one server.

    The registries are passed in, never looked up globally, and are only
    read; one dispatcher can serve any number of concurrent requests.
    """

    def __init__(
        self,
        resources: ResourceRegistry,
        prompts: PromptRenderer,
        server: Optional[Mapping[str, Any]] = None,
    ):
        """Initialize the dispatcher.

        Args:
            resources: Resource registry of the server
            prompts: Prompt renderer of the server
            server: Server identity reported by the overview
                (name, version, description)
        """
        self.resources = resources
        self.prompts = prompts
        self.server = dict(server or {})

    @singledispatchmethod
    def dispatch(self, request: Any) -> Dict[str, Any]:
        """Handle one request and return its envelope.

        Raises:
            NotFoundError: If the requested resource, prompt or tool is unknown
            ValueError: If a required identifier or argument is empty
            TypeError: If ``request`` is not a known request type
        """
        raise TypeError(f"Unsupported request type: {type(request).__name__}")

    @dispatch.register
    def _(self, request: ListResources) -> Dict[str, Any]:
        logger.debug("Dispatching list_resources")
        return build_resource_list(self.resources.list_resources())

    @dispatch.register
    def _(self, request: ReadResource) -> Dict[str, Any]:
        logger.debug(f"Dispatching read_resource: {request.uri}")
        content = self.resources.get_resource(request.uri)
        descriptor = self.resources.get_descriptor(request.uri)
        return build_resource_response(request.uri, content, descriptor.mime_type)

    @dispatch.register
    def _(self, request: ListPrompts) -> Dict[str, Any]:
        logger.debug("Dispatching list_prompts")
        return build_prompt_list(self.prompts.list_prompts())

    @dispatch.register
    def _(self, request: GetPrompt) -> Dict[str, Any]:
        logger.debug(f"Dispatching get_prompt: {request.name}")
        rendered = self.prompts.render_prompt(request.name, request.arguments)
        return build_prompt_response(rendered.summary, rendered.messages)

    @dispatch.register
    def _(self, request: SearchResources) -> Dict[str, Any]:
        logger.debug(f"Dispatching search_resources: {request.query!r}")
        matches = self.resources.search(
            request.query,
            category=request.category,
            complexity=request.complexity,
        )
        return build_search_response(
            request.query,
            matches,
            category=request.category,
            complexity=request.complexity,
        )

    @dispatch.register
    def _(self, request: GetOverview) -> Dict[str, Any]:
        logger.debug("Dispatching get_overview")
        return build_overview_response(
            self.server,
            self.resources.list_resources(),
            self.resources.categories(),
        )

    @dispatch.register
    def _(self, request: GetQuickReference) -> Dict[str, Any]:
        logger.debug("Dispatching get_quick_reference")
        name = self.server.get("name")
        title = f"{name} - Key Resources" if name else None
        return build_quick_reference_response(self.resources.quick_reference(title=title))

    @dispatch.register
    def _(self, request: CallTool) -> Dict[str, Any]:
        logger.debug(f"Dispatching call_tool: {request.name}")
        return self.dispatch(build_tool_request(request.name, request.arguments))

    @handle_errors
    def handle(self, request: Request) -> Dict[str, Any]:
        """Handle one request without raising.

        Failures become error envelopes for this request only; the
        dispatcher stays usable for the next one.
        """
        return self.dispatch(request)
