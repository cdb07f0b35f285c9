"""Exceptions raised by the documentation server core."""

from .constants import ErrorCode, ErrorMessage


class NotFoundError(LookupError):
    """A resource URI or prompt name has no registered entry.

    Attributes:
        identifier: The URI or name that was looked up
        kind: "Resource", "Prompt" or "Tool"
    """

    _messages = {
        "Resource": (ErrorMessage.RESOURCE_NOT_FOUND, ErrorCode.RESOURCE_NOT_FOUND),
        "Prompt": (ErrorMessage.PROMPT_NOT_FOUND, ErrorCode.PROMPT_NOT_FOUND),
        "Tool": (ErrorMessage.TOOL_NOT_FOUND, ErrorCode.TOOL_NOT_FOUND),
    }

    def __init__(self, identifier: str, kind: str = "Resource"):
        if kind not in self._messages:
            raise ValueError(f"Unknown lookup kind: {kind}")
        self.identifier = identifier
        self.kind = kind
        template, self.error_code = self._messages[kind]
        super().__init__(template.format(identifier=identifier))

    @property
    def message(self) -> str:
        return self.args[0]


class CatalogIntegrityError(ValueError):
    """A catalog definition is inconsistent.

    Raised while building registries at startup, never while serving
    requests.
    """
