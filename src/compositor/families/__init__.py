"""Built-in part families."""

from .registration import BUILTIN_FAMILIES, builtin_families, register_builtin_families

__all__ = ["BUILTIN_FAMILIES", "builtin_families", "register_builtin_families"]
