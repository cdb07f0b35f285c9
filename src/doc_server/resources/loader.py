"""Markdown payload loading for resource stores.

Resource payloads live as markdown files next to the catalog definition.
Files may start with YAML frontmatter (``title``, ``description``,
``category``), which is stripped from the served content.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from ..constants import DEFAULT_MIME_TYPE
from .manifest import ResourceDescriptor

logger = logging.getLogger(__name__)


# Delimiters must sit on their own lines; "---" inside a value is text
_FRONTMATTER = re.compile(r"---[ \t]*\n(.*?)\n---[ \t]*(?:\n|$)", re.S)


def parse_frontmatter(content: str) -> Tuple[Dict[str, Any], str]:
    """Extract YAML frontmatter from markdown content.

    The leading block is only treated as frontmatter when it parses to a
    mapping. A document that merely opens with a horizontal rule is
    returned unchanged.

    Args:
        content: Markdown content with optional YAML frontmatter

    Returns:
        Tuple of (frontmatter_dict, content_without_frontmatter)
    """
    match = _FRONTMATTER.match(content)
    if match is None:
        return {}, content

    try:
        loaded = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        logger.warning(f"Failed to parse frontmatter YAML: {e}")
        return {}, content

    if not isinstance(loaded, dict):
        return {}, content
    return loaded, content[match.end():].lstrip()


def _title_words(slug: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in re.split(r"[-_]", slug) if word)


def generate_resource_name(resource_path: str) -> str:
    """Derive a display name from a resource path.

    >>> generate_resource_name("vitracoat/business-workflows")
    'Vitracoat - Business Workflows'
    """
    return " - ".join(_title_words(part) for part in resource_path.split("/") if part)


def generate_resource_description(resource_path: str) -> str:
    """Derive a description from a resource path.

    >>> generate_resource_description("vitracoat/business-workflows")
    'Business workflows for vitracoat business unit'
    """
    folder, _, item = resource_path.rpartition("/")
    words = " ".join(re.split(r"[-_]", item))
    sentence = words[:1].upper() + words[1:]
    if not folder:
        return sentence
    return f"{sentence} for {folder} business unit"


@dataclass(frozen=True)
class MarkdownFile:
    """Lazily read markdown payload.

    Calling the instance reads the file and returns its content without
    frontmatter, so edits to payload files are picked up without a restart.
    """

    path: Path

    def __call__(self) -> str:
        with open(self.path, "r", encoding="utf-8") as f:
            content = f.read()
        _, content_clean = parse_frontmatter(content)
        return content_clean

    def frontmatter(self) -> Dict[str, Any]:
        with open(self.path, "r", encoding="utf-8") as f:
            frontmatter, _ = parse_frontmatter(f.read())
        return frontmatter


def discover_markdown(
    root: Path,
    scheme: str,
    category: Optional[str] = None,
    mime_type: str = "text/markdown",
) -> List[Tuple[ResourceDescriptor, MarkdownFile]]:
    """Discover markdown payloads under ``root``.

    Every ``*.md`` file becomes a resource ``{scheme}://{category}/{stem}``.
    Without an explicit ``category`` the file's parent directory (relative
    to ``root``) is used, falling back to the frontmatter ``category`` and
    then "general". Name and description come from frontmatter when
    present, otherwise they are generated from the resource path.

    Args:
        root: Directory to scan
        scheme: URI scheme for the discovered resources
        category: Category override for every discovered file
        mime_type: MIME type advertised for the discovered resources

    Returns:
        List of (descriptor, content source) pairs sorted by URI
    """
    root = Path(root)
    found: List[Tuple[ResourceDescriptor, MarkdownFile]] = []

    if not root.is_dir():
        logger.warning(f"Discovery path is not a directory: {root}")
        return found

    for md_file in sorted(root.rglob("*.md")):
        source = MarkdownFile(md_file)
        frontmatter = source.frontmatter()

        relative_parent = md_file.parent.relative_to(root).as_posix()
        item_category = (
            category
            or (relative_parent if relative_parent != "." else None)
            or frontmatter.get("category")
            or "general"
        )
        resource_path = f"{item_category}/{md_file.stem}"

        descriptor = ResourceDescriptor(
            uri=f"{scheme}://{resource_path}",
            name=str(frontmatter.get("title") or generate_resource_name(resource_path)),
            description=str(
                frontmatter.get("description") or generate_resource_description(resource_path)
            ),
            category=str(item_category),
            mime_type=mime_type or DEFAULT_MIME_TYPE,
        )
        found.append((descriptor, source))
        logger.debug(f"Discovered resource: {descriptor.uri}")

    found.sort(key=lambda pair: pair[0].uri)
    logger.info(f"Discovered {len(found)} markdown resources under {root}")
    return found
