"""Quick reference for documentation servers.

A quick reference is a short, curated index of the resources a reader
should look at first, grouped into named sections. Catalogs may declare
one; otherwise it is derived from the manifest categories.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..exceptions import CatalogIntegrityError
from .manifest import ResourceManifest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuickReferenceEntry:
    uri: str
    name: str
    usage: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "uri": self.uri, "usage": self.usage}


@dataclass(frozen=True)
class QuickReference:
    """Titled sections of quick reference entries, in declaration order."""

    title: str
    sections: Tuple[Tuple[str, Tuple[QuickReferenceEntry, ...]], ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the quick reference envelope.

        Returns:
            Dictionary with the title and a mapping of section name to entry
            dictionaries
        """
        return {
            "title": self.title,
            "sections": {
                name: [entry.to_dict() for entry in entries]
                for name, entries in self.sections
            },
        }

    def uris(self) -> Tuple[str, ...]:
        return tuple(entry.uri for _, entries in self.sections for entry in entries)


def build_quick_reference(
    section: Any,
    manifest: ResourceManifest,
) -> QuickReference:
    """Build a quick reference from its catalog definition.

    Entry names and usage text default to the name and description of the
    referenced resource.

    Args:
        section: Parsed ``quick_reference`` mapping with ``title`` and
            ``sections`` (section name -> list of entries with ``uri`` and
            optional ``name`` / ``usage``)
        manifest: Manifest the entries must refer to

    Returns:
        QuickReference

    Raises:
        CatalogIntegrityError: If the definition is malformed or an entry
            refers to an unknown resource
    """
    if not isinstance(section, dict):
        raise CatalogIntegrityError("'quick_reference' must be a mapping")
    sections = section.get("sections") or {}
    if not isinstance(sections, dict):
        raise CatalogIntegrityError("'quick_reference.sections' must be a mapping")

    built = []
    for name, entries in sections.items():
        items = []
        for entry in entries or []:
            if not isinstance(entry, dict) or not entry.get("uri"):
                raise CatalogIntegrityError(
                    f"Quick reference entry in '{name}' needs a 'uri': {entry!r}"
                )
            uri = str(entry["uri"])
            descriptor = manifest.get(uri)
            if descriptor is None:
                raise CatalogIntegrityError(
                    f"Quick reference entry in '{name}' refers to unknown resource '{uri}'"
                )
            items.append(
                QuickReferenceEntry(
                    uri=uri,
                    name=str(entry.get("name") or descriptor.name),
                    usage=str(entry.get("usage") or descriptor.description),
                )
            )
        built.append((str(name), tuple(items)))

    return QuickReference(
        title=str(section.get("title") or "Key Resources"),
        sections=tuple(built),
    )


def derive_quick_reference(
    manifest: ResourceManifest,
    title: Optional[str] = None,
) -> QuickReference:
    """Derive a quick reference with one section per category."""
    sections = []
    for category in manifest.categories():
        entries = tuple(
            QuickReferenceEntry(uri=d.uri, name=d.name, usage=d.description)
            for d in manifest.by_category(category)
        )
        if entries:
            sections.append((category, entries))
    logger.debug(f"Derived quick reference with {len(sections)} sections")
    return QuickReference(title=title or "Key Resources", sections=tuple(sections))
