"""Resource content store and registry.

The store maps resource URIs to their content. Content is either a string
or a zero-argument callable producing one; callables are resolved on every
read. The registry pairs a store with the manifest that advertises it and
checks that the two agree.
"""

import logging
from types import MappingProxyType
from typing import Callable, Iterator, List, Mapping, Optional, Tuple, Union

from ..constants import ErrorMessage
from ..exceptions import CatalogIntegrityError, NotFoundError
from .manifest import ResourceDescriptor, ResourceManifest
from .reference import QuickReference, derive_quick_reference

logger = logging.getLogger(__name__)

ContentSource = Union[str, Callable[[], str]]


class ResourceStore:
    """Immutable mapping from resource URI to content source."""

    def __init__(self, contents: Mapping[str, ContentSource]):
        for uri, source in contents.items():
            if not isinstance(source, str) and not callable(source):
                raise CatalogIntegrityError(
                    f"Content for '{uri}' must be a string or a callable, "
                    f"got {type(source).__name__}"
                )
        self._contents = MappingProxyType(dict(contents))

    def __contains__(self, uri: object) -> bool:
        return uri in self._contents

    def __iter__(self) -> Iterator[str]:
        return iter(self._contents)

    def __len__(self) -> int:
        return len(self._contents)

    def load(self, uri: str) -> str:
        """Resolve the content for ``uri``.

        Raises:
            NotFoundError: If ``uri`` has no content
        """
        try:
            source = self._contents[uri]
        except KeyError:
            raise NotFoundError(uri, kind="Resource") from None
        if callable(source):
            return source()
        return source


class ResourceRegistry:
    """Answers "what resources exist" and "what is the content of X".

    Built once at startup; read-only afterwards, so it can be shared
    between concurrent request handlers without locking.
    """

    def __init__(
        self,
        manifest: ResourceManifest,
        store: ResourceStore,
        quick_reference: Optional[QuickReference] = None,
    ):
        """Initialize the registry.

        Args:
            manifest: Descriptors advertised to clients
            store: Content for every advertised URI
            quick_reference: Curated index of key resources; derived from
                the manifest categories when omitted

        Raises:
            CatalogIntegrityError: If the manifest and store disagree
        """
        missing = [uri for uri in manifest.uris() if uri not in store]
        if missing:
            raise CatalogIntegrityError(
                f"No content registered for: {', '.join(missing)}"
            )
        orphans = [uri for uri in store if uri not in manifest]
        if orphans:
            raise CatalogIntegrityError(
                f"Content registered without a manifest entry: {', '.join(orphans)}"
            )
        if quick_reference is not None:
            unknown = [uri for uri in quick_reference.uris() if uri not in manifest]
            if unknown:
                raise CatalogIntegrityError(
                    f"Quick reference refers to unknown resources: {', '.join(unknown)}"
                )

        self.manifest = manifest
        self.store = store
        self._quick_reference = quick_reference
        logger.info(f"Resource registry ready ({len(manifest)} resources)")

    def list_resources(self) -> Tuple[ResourceDescriptor, ...]:
        """List every advertised resource.

        Returns:
            Descriptors in manifest declaration order
        """
        return self.manifest.descriptors

    def get_descriptor(self, uri: str) -> ResourceDescriptor:
        """Get the descriptor for a resource.

        Args:
            uri: Resource URI, matched exactly

        Returns:
            The descriptor advertised for ``uri``

        Raises:
            ValueError: If ``uri`` is empty
            NotFoundError: If ``uri`` is not registered
        """
        self._check_uri(uri)
        descriptor = self.manifest.get(uri)
        if descriptor is None:
            raise NotFoundError(uri, kind="Resource")
        return descriptor

    def get_resource(self, uri: str) -> str:
        """Get resource content by URI.

        Lookup is an exact match on the full URI string.

        Args:
            uri: Resource URI

        Returns:
            Resource content

        Raises:
            ValueError: If ``uri`` is empty
            NotFoundError: If ``uri`` is not registered
        """
        self._check_uri(uri)
        return self.store.load(uri)

    def categories(self) -> Tuple[str, ...]:
        """List the resource categories.

        Returns:
            Distinct categories in order of first appearance in the manifest
        """
        return self.manifest.categories()

    def quick_reference(self, title: Optional[str] = None) -> QuickReference:
        """Get the quick reference for this server.

        Args:
            title: Title for a derived quick reference; ignored when one
                was configured

        Returns:
            The configured quick reference, or one section per category
        """
        if self._quick_reference is not None:
            return self._quick_reference
        return derive_quick_reference(self.manifest, title=title)

    def search(
        self,
        query: str,
        category: Optional[str] = None,
        complexity: Optional[str] = None,
    ) -> List[ResourceDescriptor]:
        """Search resources by text query.

        Args:
            query: Case-insensitive substring matched against URI, name,
                description and tags
            category: Optional category filter
            complexity: Optional complexity filter

        Returns:
            Matching descriptors in manifest order
        """
        if not query or not query.strip():
            raise ValueError(ErrorMessage.EMPTY_QUERY)

        needle = query.strip().lower()
        matches = []
        for descriptor in self.manifest:
            if category and descriptor.category != category:
                continue
            if complexity and descriptor.complexity != complexity:
                continue
            if (
                needle in descriptor.uri.lower()
                or needle in descriptor.name.lower()
                or needle in descriptor.description.lower()
                or any(needle in tag.lower() for tag in descriptor.tags)
            ):
                matches.append(descriptor)
        return matches

    @staticmethod
    def _check_uri(uri: str) -> None:
        if not isinstance(uri, str) or not uri:
            raise ValueError(ErrorMessage.EMPTY_URI)
