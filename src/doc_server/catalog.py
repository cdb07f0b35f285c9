"""Catalog definitions.

A catalog definition is a YAML document describing one documentation
server: its identity, its resources (inline text, markdown files or
discovered directories), an optional quick reference and its prompt
templates. Loading a definition builds the immutable registries the
dispatcher serves from.

Example::

    server:
      name: agency-client-template
      version: 1.0.0
      uri_scheme: agency
    resources:
      - uri: agency://clients/onboarding-checklist
        name: Client Onboarding Checklist
        category: clients
        tags: [onboarding]
        complexity: foundational
        file: resources/clients/onboarding-checklist.md
    quick_reference:
      title: Agency Key Resources
      sections:
        clients:
          - uri: agency://clients/onboarding-checklist
            usage: Before the kickoff call
    prompts:
      - name: onboard_client
        arguments:
          - {name: client_name, required: true}
        summary: "Onboarding {client_name|client}"
        messages:
          - "Complete the onboarding process for {client_name|client}."
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml

from .constants import DEFAULT_MIME_TYPE
from .dispatcher import Dispatcher
from .exceptions import CatalogIntegrityError
from .prompts.catalog import PromptArgument, PromptCatalog, PromptDescriptor
from .prompts.renderer import PromptRenderer
from .prompts.template import PromptTemplate
from .resources.loader import MarkdownFile, discover_markdown
from .resources.manifest import ResourceDescriptor, ResourceManifest, split_uri
from .resources.reference import build_quick_reference
from .resources.store import ContentSource, ResourceRegistry, ResourceStore

logger = logging.getLogger(__name__)

CATALOGS_DIR = Path(__file__).parent / "catalogs"
CATALOG_FILENAME = "catalog.yaml"


@dataclass(frozen=True)
class ServerInfo:
    """Identity of a documentation server."""

    name: str
    version: str = "1.0.0"
    description: str = ""
    uri_scheme: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "version": self.version, "description": self.description}


@dataclass(frozen=True)
class ServerCatalog:
    """Everything one documentation server serves."""

    info: ServerInfo
    resources: ResourceRegistry
    prompts: PromptRenderer
    source: Optional[Path] = None

    def create_dispatcher(self) -> Dispatcher:
        return Dispatcher(self.resources, self.prompts, server=self.info.to_dict())


def available_catalogs() -> List[str]:
    """Names of the catalogs bundled with the package."""
    if not CATALOGS_DIR.is_dir():
        return []
    return sorted(
        p.name for p in CATALOGS_DIR.iterdir()
        if (p / CATALOG_FILENAME).is_file()
    )


def resolve_catalog_path(catalog: Union[str, Path]) -> Path:
    """Resolve a bundled catalog name or a filesystem path.

    Args:
        catalog: Bundled catalog name (e.g. "agency"), a directory holding
            a catalog.yaml, or a path to a YAML file

    Returns:
        Path to the catalog YAML file

    Raises:
        FileNotFoundError: If nothing matches
    """
    candidate = Path(catalog)
    if candidate.is_file():
        return candidate
    if (candidate / CATALOG_FILENAME).is_file():
        return candidate / CATALOG_FILENAME

    bundled = CATALOGS_DIR / str(catalog) / CATALOG_FILENAME
    if bundled.is_file():
        return bundled

    raise FileNotFoundError(
        f"Catalog '{catalog}' not found. "
        f"Bundled catalogs: {', '.join(available_catalogs()) or 'none'}"
    )


def load_catalog(catalog: Union[str, Path]) -> ServerCatalog:
    """Load a catalog definition from a bundled name or a path.

    Raises:
        FileNotFoundError: If the catalog cannot be found
        CatalogIntegrityError: If the definition is inconsistent
    """
    path = resolve_catalog_path(catalog)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise CatalogIntegrityError(f"Invalid catalog YAML in {path}: {e}") from e

    server_catalog = build_catalog(data, base_path=path.parent, source=path)
    logger.info(
        f"Loaded catalog '{server_catalog.info.name}' from {path} "
        f"({len(server_catalog.resources.manifest)} resources, "
        f"{len(server_catalog.prompts.catalog)} prompts)"
    )
    return server_catalog


def build_catalog(
    data: Any,
    base_path: Optional[Path] = None,
    source: Optional[Path] = None,
) -> ServerCatalog:
    """Build registries from a parsed catalog definition.

    Args:
        data: Parsed YAML document
        base_path: Directory relative ``file``/``discover`` paths resolve
            against (default: current directory)
        source: Where the definition came from, kept for logging

    Returns:
        ServerCatalog with immutable registries
    """
    if not isinstance(data, dict):
        raise CatalogIntegrityError("Catalog definition must be a mapping")
    base_path = Path(base_path) if base_path is not None else Path.cwd()

    info = _build_server_info(data.get("server"))
    descriptors, contents = _build_resources(data, base_path, info.uri_scheme)
    manifest = ResourceManifest(descriptors)
    quick_reference = None
    if data.get("quick_reference") is not None:
        quick_reference = build_quick_reference(data["quick_reference"], manifest)
    prompt_catalog, templates = _build_prompts(data.get("prompts") or [])

    return ServerCatalog(
        info=info,
        resources=ResourceRegistry(manifest, ResourceStore(contents), quick_reference),
        prompts=PromptRenderer(prompt_catalog, templates),
        source=source,
    )


def _build_server_info(section: Any) -> ServerInfo:
    if not isinstance(section, dict) or not section.get("name"):
        raise CatalogIntegrityError("Catalog definition needs a 'server' section with a name")
    return ServerInfo(
        name=str(section["name"]),
        version=str(section.get("version", "1.0.0")),
        description=str(section.get("description", "")),
        uri_scheme=str(section.get("uri_scheme", "")),
    )


def _build_resources(
    data: Dict[str, Any],
    base_path: Path,
    default_scheme: str,
) -> Tuple[List[ResourceDescriptor], Dict[str, ContentSource]]:
    descriptors: List[ResourceDescriptor] = []
    contents: Dict[str, ContentSource] = {}

    for entry in data.get("resources") or []:
        if not isinstance(entry, dict) or not entry.get("uri"):
            raise CatalogIntegrityError(f"Resource entry needs a 'uri': {entry!r}")
        uri = str(entry["uri"])
        _, path = split_uri(uri)

        descriptors.append(
            ResourceDescriptor(
                uri=uri,
                name=str(entry.get("name") or uri),
                description=str(entry.get("description", "")),
                category=str(entry.get("category") or path.split("/", 1)[0] or "general"),
                mime_type=str(entry.get("mime_type") or DEFAULT_MIME_TYPE),
                tags=_tags(entry.get("tags"), uri),
                complexity=str(entry["complexity"]) if entry.get("complexity") else None,
            )
        )

        if "text" in entry and "file" in entry:
            raise CatalogIntegrityError(f"Resource '{uri}' has both 'text' and 'file'")
        if "text" in entry:
            contents[uri] = str(entry["text"])
        elif "file" in entry:
            file_path = base_path / str(entry["file"])
            if not file_path.is_file():
                raise CatalogIntegrityError(
                    f"Content file for '{uri}' not found: {file_path}"
                )
            contents[uri] = MarkdownFile(file_path)

    for entry in data.get("discover") or []:
        if not isinstance(entry, dict) or not entry.get("path"):
            raise CatalogIntegrityError(f"Discover entry needs a 'path': {entry!r}")
        scheme = str(entry.get("uri_scheme") or default_scheme)
        if not scheme:
            raise CatalogIntegrityError("Discovered resources need a URI scheme")
        for descriptor, source in discover_markdown(
            base_path / str(entry["path"]),
            scheme=scheme,
            category=entry.get("category"),
            mime_type=str(entry.get("mime_type") or "text/markdown"),
        ):
            descriptors.append(descriptor)
            contents[descriptor.uri] = source

    return descriptors, contents


def _tags(value: Any, uri: str) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(tag.strip() for tag in value.split(",") if tag.strip())
    if not isinstance(value, list):
        raise CatalogIntegrityError(f"Tags of '{uri}' must be a list or a comma-separated string")
    return tuple(str(tag) for tag in value)


def _build_prompts(
    entries: List[Any],
) -> Tuple[PromptCatalog, Dict[str, PromptTemplate]]:
    descriptors: List[PromptDescriptor] = []
    templates: Dict[str, PromptTemplate] = {}

    for entry in entries:
        if not isinstance(entry, dict) or not entry.get("name"):
            raise CatalogIntegrityError(f"Prompt entry needs a 'name': {entry!r}")
        name = str(entry["name"])

        for arg in entry.get("arguments") or []:
            if not isinstance(arg, dict) or not arg.get("name"):
                raise CatalogIntegrityError(
                    f"Prompt '{name}' has an argument without a name: {arg!r}"
                )
        arguments = tuple(
            PromptArgument(
                name=str(arg["name"]),
                description=str(arg.get("description", "")),
                required=bool(arg.get("required", False)),
            )
            for arg in entry.get("arguments") or []
        )
        descriptors.append(
            PromptDescriptor(
                name=name,
                description=str(entry.get("description", "")),
                arguments=arguments,
            )
        )

        messages = entry.get("messages") or []
        if isinstance(messages, str):
            messages = [messages]
        if not messages:
            raise CatalogIntegrityError(f"Prompt '{name}' has no messages")
        templates[name] = PromptTemplate.from_strings(
            summary=str(entry.get("summary") or entry.get("description", "")),
            messages=[str(m) for m in messages],
        )

    return PromptCatalog(descriptors), templates
