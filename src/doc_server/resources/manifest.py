"""Resource manifest for documentation servers.

The manifest is the ordered list of resource descriptors a server
advertises. Its declaration order is what clients display, so it is kept
as-is.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from ..constants import DEFAULT_MIME_TYPE
from ..exceptions import CatalogIntegrityError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceDescriptor:
    """Metadata for one addressable resource."""

    uri: str  # scheme-qualified, e.g. agency://clients/onboarding-checklist
    name: str  # display name
    description: str = ""
    category: str = "general"
    mime_type: str = DEFAULT_MIME_TYPE
    tags: Tuple[str, ...] = ()
    complexity: Optional[str] = None  # foundational, intermediate, advanced, enterprise

    def to_resource_dict(self) -> Dict[str, Any]:
        """Convert to MCP resource format."""
        return {
            "uri": self.uri,
            "mimeType": self.mime_type,
            "name": self.name,
            "description": self.description,
        }

    def to_summary_dict(self) -> Dict[str, Any]:
        """Convert to the format used by search results and overviews.

        Adds the catalog metadata (category, tags, complexity) that the MCP
        resource format has no field for.
        """
        summary = self.to_resource_dict()
        summary["category"] = self.category
        summary["tags"] = list(self.tags)
        summary["complexity"] = self.complexity
        return summary


def split_uri(uri: str) -> Tuple[str, str]:
    """Split a scheme-qualified URI into (scheme, path).

    The scheme carries no routing meaning; this is only used to derive
    categories and for display.

    Args:
        uri: Resource URI (e.g. "crm-base://patterns/api-routes")

    Returns:
        Tuple of (scheme, path). The scheme is "" when the URI has none.
    """
    scheme, sep, path = uri.partition("://")
    if not sep:
        return "", uri
    return scheme, path


class ResourceManifest:
    """Ordered, immutable collection of resource descriptors."""

    def __init__(self, descriptors: Iterable[ResourceDescriptor]):
        """Build a manifest.

        Args:
            descriptors: Descriptors in declaration order

        Raises:
            CatalogIntegrityError: If a URI is empty or declared twice
        """
        ordered = tuple(descriptors)
        index: Dict[str, ResourceDescriptor] = {}
        for descriptor in ordered:
            if not descriptor.uri:
                raise CatalogIntegrityError("Resource descriptor has an empty URI")
            if descriptor.uri in index:
                raise CatalogIntegrityError(
                    f"Resource '{descriptor.uri}' declared more than once"
                )
            index[descriptor.uri] = descriptor

        self._descriptors = ordered
        self._index = index
        logger.debug(f"Built resource manifest with {len(ordered)} entries")

    def __iter__(self) -> Iterator[ResourceDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, uri: object) -> bool:
        return uri in self._index

    @property
    def descriptors(self) -> Tuple[ResourceDescriptor, ...]:
        return self._descriptors

    def uris(self) -> Tuple[str, ...]:
        return tuple(d.uri for d in self._descriptors)

    def get(self, uri: str) -> Optional[ResourceDescriptor]:
        return self._index.get(uri)

    def categories(self) -> Tuple[str, ...]:
        """Distinct categories in order of first appearance."""
        seen: Dict[str, None] = {}
        for descriptor in self._descriptors:
            seen.setdefault(descriptor.category, None)
        return tuple(seen)

    def by_category(self, category: str) -> List[ResourceDescriptor]:
        return [d for d in self._descriptors if d.category == category]
