"""Error handling infrastructure."""

from .context import ExceptionContext
from .handling import log_errors

__all__ = ["ExceptionContext", "log_errors"]
