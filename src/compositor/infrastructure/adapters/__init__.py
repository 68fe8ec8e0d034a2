"""Infrastructure adapters."""

from .capability_adapter import CapabilityAdapter, adapter_constructor

__all__ = ["CapabilityAdapter", "adapter_constructor"]
