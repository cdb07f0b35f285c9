"""Response builder for documentation servers.

Pure functions that wrap lookup results into the envelope shapes of the
MCP resources/prompts methods. None of them fail on well-typed input.
"""

from typing import Any, Dict, Iterable, Mapping, Optional, Sequence

from .constants import DEFAULT_MIME_TYPE, ResponseStatus
from .exceptions import NotFoundError
from .prompts.catalog import PromptDescriptor
from .prompts.template import MessageFragment
from .resources.manifest import ResourceDescriptor
from .resources.reference import QuickReference


def build_resource_list(descriptors: Iterable[ResourceDescriptor]) -> Dict[str, Any]:
    """Wrap descriptors as a resources/list result.

    Args:
        descriptors: Descriptors in the order they should be listed

    Returns:
        Envelope with a ``resources`` list in MCP resource format
    """
    return {"resources": [d.to_resource_dict() for d in descriptors]}


def build_resource_response(
    uri: str,
    content: str,
    mime_type: str = DEFAULT_MIME_TYPE,
) -> Dict[str, Any]:
    """Wrap resource content as a resources/read result.

    Args:
        uri: URI the content was read from
        content: Resource text
        mime_type: Content type advertised for the resource

    Returns:
        Envelope with a single-element ``contents`` list
    """
    return {
        "contents": [
            {
                "uri": uri,
                "mimeType": mime_type,
                "text": content,
            }
        ]
    }


def build_prompt_list(descriptors: Iterable[PromptDescriptor]) -> Dict[str, Any]:
    """Wrap prompt descriptors as a prompts/list result.

    Args:
        descriptors: Prompt descriptors in catalog order

    Returns:
        Envelope with a ``prompts`` list including argument declarations
    """
    return {"prompts": [d.to_prompt_dict() for d in descriptors]}


def build_prompt_response(
    summary: str,
    messages: Iterable[MessageFragment],
) -> Dict[str, Any]:
    """Wrap a rendered prompt as a prompts/get result.

    Args:
        summary: Rendered one-line description
        messages: Rendered messages in template order

    Returns:
        Envelope with ``description`` and ``messages``
    """
    return {
        "description": summary,
        "messages": [m.to_message_dict() for m in messages],
    }


def build_search_response(
    query: str,
    descriptors: Iterable[ResourceDescriptor],
    category: Optional[str] = None,
    complexity: Optional[str] = None,
) -> Dict[str, Any]:
    """Wrap resource search results.

    Args:
        query: The search query as supplied
        descriptors: Matching descriptors
        category: Category filter, if one was applied
        complexity: Complexity filter, if one was applied

    Returns:
        Envelope with the query, filters, match count and matches
    """
    results = [d.to_summary_dict() for d in descriptors]
    return {
        "query": query,
        "category": category,
        "complexity": complexity,
        "count": len(results),
        "resources": results,
    }


def build_overview_response(
    server: Mapping[str, Any],
    descriptors: Sequence[ResourceDescriptor],
    categories: Iterable[str],
) -> Dict[str, Any]:
    """Summarize a server and everything it serves.

    Args:
        server: Server identity (name, version, description)
        descriptors: Every advertised resource
        categories: Distinct categories in display order

    Returns:
        Envelope with the server identity, statistics, per-category counts
        and a summary of every resource
    """
    counts: Dict[str, int] = {category: 0 for category in categories}
    tags: Dict[str, None] = {}
    complexity_levels: Dict[str, None] = {}
    for descriptor in descriptors:
        counts[descriptor.category] = counts.get(descriptor.category, 0) + 1
        for tag in descriptor.tags:
            tags.setdefault(tag, None)
        if descriptor.complexity:
            complexity_levels.setdefault(descriptor.complexity, None)

    return {
        "server": dict(server),
        "statistics": {
            "total_resources": len(descriptors),
            "categories": len(counts),
            "tags": len(tags),
            "complexity_levels": list(complexity_levels),
        },
        "categories": [{"name": name, "count": count} for name, count in counts.items()],
        "resources": [d.to_summary_dict() for d in descriptors],
    }


def build_quick_reference_response(reference: QuickReference) -> Dict[str, Any]:
    return {"quick_reference": reference.to_dict()}


def build_error_response(
    error: Exception,
    error_code: str,
    request: str,
) -> Dict[str, Any]:
    """Wrap a failed request.

    Args:
        error: The exception raised while handling the request
        error_code: ErrorCode value categorizing the failure
        request: Kind of the request that failed

    Returns:
        Error envelope in the same status/error/error_code shape used by
        the handler decorators
    """
    message = error.message if isinstance(error, NotFoundError) else str(error)
    return {
        "status": ResponseStatus.ERROR.value,
        "error": message,
        "error_code": error_code,
        "request": request,
    }
