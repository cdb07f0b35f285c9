"""Decorators for dispatcher entry points.

This module provides the error-handling decorator that keeps a failing
request from affecting anything beyond its own response.
"""

import logging
from functools import wraps
from typing import Any, Callable, Dict, TypeVar

from .constants import ErrorCode, ErrorMessage
from .exceptions import NotFoundError
from .response_builder import build_error_response

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Dict[str, Any]])


def _request_kind(request: Any) -> str:
    kind = getattr(request, "kind", None)
    if kind is None:
        return type(request).__name__
    return getattr(kind, "value", str(kind))


def handle_errors(func: F) -> F:
    """Decorator to convert failures of a request handler into envelopes.

    The wrapped function is called as ``func(self, request)``. Failures are
    returned as error envelopes (see ``build_error_response``) instead of
    raised:

    - NotFoundError -> RESOURCE_NOT_FOUND / PROMPT_NOT_FOUND / TOOL_NOT_FOUND
    - ValueError -> INVALID_INPUT
    - anything else -> UNEXPECTED_ERROR, logged with traceback

    Args:
        func: Handler to wrap

    Returns:
        Wrapped handler that never raises ``Exception`` subclasses
    """
    @wraps(func)
    def wrapper(self: Any, request: Any) -> Dict[str, Any]:
        kind = _request_kind(request)
        try:
            return func(self, request)
        except NotFoundError as e:
            logger.warning(f"{e.message} (request: {kind})")
            return build_error_response(e, e.error_code.value, kind)
        except ValueError as e:
            logger.error(f"Invalid input in {kind}: {e}", exc_info=False)
            return build_error_response(e, ErrorCode.INVALID_INPUT.value, kind)
        except Exception as e:
            logger.error(f"Unexpected error in {kind}: {e}", exc_info=True)
            return build_error_response(
                RuntimeError(f"{ErrorMessage.UNEXPECTED_ERROR}: {e}"),
                ErrorCode.UNEXPECTED_ERROR.value,
                kind,
            )

    return wrapper  # type: ignore[return-value]
