"""Prompt rendering.

The renderer maps prompt names to templates and turns a loosely-typed
argument bag into a summary line and role-tagged messages.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Tuple

from ..constants import ErrorMessage
from ..exceptions import CatalogIntegrityError, NotFoundError
from .catalog import PromptCatalog, PromptDescriptor
from .template import Arguments, MessageFragment, PromptTemplate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedPrompt:
    summary: str
    messages: List[MessageFragment]


class PromptRenderer:
    """Renders the prompts of one catalog.

    Arguments marked ``required`` in a descriptor are advertised as such,
    but a missing or empty value is not an error: the slot's fallback text
    is substituted instead.
    """

    def __init__(self, catalog: PromptCatalog, templates: Mapping[str, PromptTemplate]):
        """Initialize renderer.

        Args:
            catalog: Prompt descriptors
            templates: Template for every descriptor, keyed by prompt name

        Raises:
            CatalogIntegrityError: If a descriptor has no template, a
                template has no descriptor, or a template slot is not a
                declared argument
        """
        for descriptor in catalog:
            template = templates.get(descriptor.name)
            if template is None:
                raise CatalogIntegrityError(
                    f"No template registered for prompt '{descriptor.name}'"
                )
            undeclared = [
                name for name in template.slot_names()
                if name not in descriptor.argument_names()
            ]
            if undeclared:
                raise CatalogIntegrityError(
                    f"Prompt '{descriptor.name}' uses undeclared arguments: "
                    f"{', '.join(undeclared)}"
                )

        orphans = [name for name in templates if name not in catalog]
        if orphans:
            raise CatalogIntegrityError(
                f"Templates registered without a descriptor: {', '.join(orphans)}"
            )

        self.catalog = catalog
        self._templates = MappingProxyType(dict(templates))
        logger.info(f"Prompt renderer ready ({len(catalog)} prompts)")

    def list_prompts(self) -> Tuple[PromptDescriptor, ...]:
        """List every prompt.

        Returns:
            Descriptors in catalog order
        """
        return self.catalog.list_prompts()

    def get_descriptor(self, name: str) -> PromptDescriptor:
        """Get the descriptor for a prompt.

        Args:
            name: Prompt name, matched exactly

        Returns:
            The prompt descriptor

        Raises:
            NotFoundError: If no prompt is registered under ``name``
        """
        descriptor = self.catalog.get(name)
        if descriptor is None:
            raise NotFoundError(name, kind="Prompt")
        return descriptor

    def render_prompt(self, name: str, args: Arguments = None) -> RenderedPrompt:
        """Render a prompt.

        Args:
            name: Prompt name
            args: Argument values; keys may be missing and the mapping may
                be None

        Returns:
            RenderedPrompt with the summary line and messages

        Raises:
            ValueError: If ``name`` is empty
            NotFoundError: If no prompt is registered under ``name``
        """
        if not isinstance(name, str) or not name:
            raise ValueError(ErrorMessage.EMPTY_PROMPT_NAME)

        template = self._templates.get(name)
        if template is None:
            raise NotFoundError(name, kind="Prompt")

        missing = [
            arg.name for arg in self.get_descriptor(name).arguments
            if arg.required and not (args or {}).get(arg.name)
        ]
        if missing:
            logger.debug(
                f"Prompt '{name}' rendered with fallbacks for: {', '.join(missing)}"
            )

        return RenderedPrompt(
            summary=template.render_summary(args),
            messages=template.render_messages(args),
        )
