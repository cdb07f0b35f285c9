"""Prompt catalog: the descriptors advertised by ListPrompts."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from ..exceptions import CatalogIntegrityError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PromptArgument:
    """A named prompt argument."""

    name: str
    description: str = ""
    required: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to MCP prompt argument format.

        Returns:
            Dictionary with name, description and required flag
        """
        return {
            "name": self.name,
            "description": self.description,
            "required": self.required,
        }


@dataclass(frozen=True)
class PromptDescriptor:
    """Metadata for one prompt template."""

    name: str
    description: str = ""
    arguments: Tuple[PromptArgument, ...] = field(default_factory=tuple)

    def argument_names(self) -> Tuple[str, ...]:
        """Names of the declared arguments.

        Returns:
            Argument names in declaration order
        """
        return tuple(arg.name for arg in self.arguments)

    def to_prompt_dict(self) -> Dict[str, Any]:
        """Convert to MCP prompt format."""
        return {
            "name": self.name,
            "description": self.description,
            "arguments": [arg.to_dict() for arg in self.arguments],
        }


class PromptCatalog:
    """Ordered, immutable collection of prompt descriptors."""

    def __init__(self, descriptors: Iterable[PromptDescriptor]):
        """Build a catalog.

        Args:
            descriptors: Prompt descriptors in declaration order

        Raises:
            CatalogIntegrityError: If a name is empty or declared twice, or a
                prompt declares the same argument twice
        """
        ordered = tuple(descriptors)
        index: Dict[str, PromptDescriptor] = {}
        for descriptor in ordered:
            if not descriptor.name:
                raise CatalogIntegrityError("Prompt descriptor has an empty name")
            if descriptor.name in index:
                raise CatalogIntegrityError(
                    f"Prompt '{descriptor.name}' declared more than once"
                )
            names = descriptor.argument_names()
            if len(set(names)) != len(names):
                raise CatalogIntegrityError(
                    f"Prompt '{descriptor.name}' declares an argument twice"
                )
            index[descriptor.name] = descriptor

        self._descriptors = ordered
        self._index = index

    def __iter__(self) -> Iterator[PromptDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def list_prompts(self) -> Tuple[PromptDescriptor, ...]:
        """List every prompt.

        Returns:
            Descriptors in declaration order
        """
        return self._descriptors

    def get(self, name: str) -> Optional[PromptDescriptor]:
        """Look up a prompt by exact name.

        Args:
            name: Prompt name

        Returns:
            The descriptor, or None if no prompt has that name
        """
        return self._index.get(name)
