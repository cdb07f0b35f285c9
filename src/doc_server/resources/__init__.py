"""Resource management for documentation servers.

This package provides the manifest, content store and registry that back
the ListResources and ReadResource requests.
"""

from .loader import (
    MarkdownFile,
    discover_markdown,
    generate_resource_description,
    generate_resource_name,
    parse_frontmatter,
)
from .manifest import ResourceDescriptor, ResourceManifest, split_uri
from .reference import (
    QuickReference,
    QuickReferenceEntry,
    build_quick_reference,
    derive_quick_reference,
)
from .store import ContentSource, ResourceRegistry, ResourceStore

__all__ = [
    "ContentSource",
    "MarkdownFile",
    "QuickReference",
    "QuickReferenceEntry",
    "ResourceDescriptor",
    "ResourceManifest",
    "ResourceRegistry",
    "ResourceStore",
    "build_quick_reference",
    "derive_quick_reference",
    "discover_markdown",
    "generate_resource_description",
    "generate_resource_name",
    "parse_frontmatter",
    "split_uri",
]
