"""Prompt templates as values.

A template is an ordered sequence of literal segments interleaved with
named substitution slots. Each slot declares the fallback text used when
the caller does not supply a value, so rendering is a fold over the
segments rather than per-prompt string formatting.

Template source strings use ``{name|fallback}`` for slots and ``{{`` /
``}}`` for literal braces::

    >>> t = parse_template("Onboarding {client_name|client} today")
    >>> t.render({"client_name": "Acme"})
    'Onboarding Acme today'
    >>> t.render({})
    'Onboarding client today'
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from ..constants import Role
from ..exceptions import CatalogIntegrityError

_TOKEN = re.compile(
    r"\{\{|\}\}|\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?:\|(?P<fallback>[^{}]*))?\}"
)

Arguments = Optional[Mapping[str, Any]]


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Slot:
    name: str
    fallback: str = ""

    def resolve(self, args: Arguments) -> str:
        """Return the supplied value, or the fallback when absent or empty."""
        if args:
            value = args.get(self.name)
            if value is not None and value != "":
                return str(value)
        return self.fallback


Segment = Union[Literal, Slot]


@dataclass(frozen=True)
class TextTemplate:
    """A single piece of text with substitution slots."""

    segments: Tuple[Segment, ...]

    def render(self, args: Arguments) -> str:
        parts = []
        for segment in self.segments:
            if isinstance(segment, Slot):
                parts.append(segment.resolve(args))
            else:
                parts.append(segment.text)
        return "".join(parts)

    def slot_names(self) -> Tuple[str, ...]:
        return tuple(s.name for s in self.segments if isinstance(s, Slot))


def parse_template(source: str) -> TextTemplate:
    """Parse a template source string into segments.

    Raises:
        CatalogIntegrityError: On an unmatched or malformed brace
    """
    segments: List[Segment] = []
    buffer: List[str] = []
    position = 0

    def flush_literal(text: str) -> None:
        if "{" in text or "}" in text:
            raise CatalogIntegrityError(
                f"Malformed placeholder in template: {source!r}"
            )
        buffer.append(text)

    for match in _TOKEN.finditer(source):
        flush_literal(source[position:match.start()])
        position = match.end()

        token = match.group(0)
        if token == "{{":
            buffer.append("{")
        elif token == "}}":
            buffer.append("}")
        else:
            if buffer:
                segments.append(Literal("".join(buffer)))
                buffer = []
            segments.append(Slot(match.group("name"), match.group("fallback") or ""))

    flush_literal(source[position:])
    if buffer:
        segments.append(Literal("".join(buffer)))

    return TextTemplate(tuple(segments))


@dataclass(frozen=True)
class MessageFragment:
    """One role-tagged block of prompt text."""

    role: Role
    text: str

    def to_message_dict(self) -> Dict[str, Any]:
        """Convert to MCP prompt message format."""
        return {
            "role": self.role.value,
            "content": {"type": "text", "text": self.text},
        }


@dataclass(frozen=True)
class PromptTemplate:
    """Summary line plus the ordered message templates of one prompt."""

    summary: TextTemplate
    messages: Tuple[Tuple[Role, TextTemplate], ...]

    @classmethod
    def from_strings(
        cls,
        summary: str,
        messages: Iterable[str],
        role: Role = Role.USER,
    ) -> "PromptTemplate":
        return cls(
            summary=parse_template(summary),
            messages=tuple((role, parse_template(text)) for text in messages),
        )

    def slot_names(self) -> Tuple[str, ...]:
        """Distinct slot names in order of first appearance."""
        seen: Dict[str, None] = {}
        for name in self.summary.slot_names():
            seen.setdefault(name, None)
        for _, template in self.messages:
            for name in template.slot_names():
                seen.setdefault(name, None)
        return tuple(seen)

    def render_summary(self, args: Arguments) -> str:
        return self.summary.render(args)

    def render_messages(self, args: Arguments) -> List[MessageFragment]:
        return [MessageFragment(role, template.render(args)) for role, template in self.messages]
