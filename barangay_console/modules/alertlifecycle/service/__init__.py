"""Alert lifecycle service exports."""

from .core import AlertLifecycleManager, DescriptorInput

__all__ = ["AlertLifecycleManager", "DescriptorInput"]
