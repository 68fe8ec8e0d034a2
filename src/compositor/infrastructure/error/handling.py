"""Error logging for engine entry points."""
import functools
from typing import Any, Callable, TypeVar

from compositor.domain.base.exceptions import CompositorError
from compositor.infrastructure.error.context import ExceptionContext
from compositor.infrastructure.logging.logger import get_logger

F = TypeVar("F", bound=Callable[..., Any])

logger = get_logger(__name__)


def log_errors(operation: str, layer: str = "application") -> Callable[[F], F]:
    """
    Log failures of the wrapped call with an ExceptionContext and re-raise them.

    Compositor errors are expected caller mistakes and log at warning;
    anything else logs at error with the traceback. The exception is never
    replaced or swallowed.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except CompositorError as e:
                context = ExceptionContext(operation, layer, error_type=type(e).__name__)
                logger.warning(e.message, **context.to_dict())
                raise
            except Exception as e:
                context = ExceptionContext(operation, layer, error_type=type(e).__name__)
                logger.error("Unexpected failure", error=str(e), exc_info=True, **context.to_dict())
                raise

        return wrapper  # type: ignore[return-value]

    return decorator
